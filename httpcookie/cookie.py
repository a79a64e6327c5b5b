import datetime
from typing import Dict, Optional

import attr

from ._cookie_helpers import format_cookie, parse_cookie

__all__ = ("Cookie",)


@attr.s(slots=True, eq=True, repr=True)
class Cookie:
    """A single HTTP cookie with its ``Set-Cookie`` attributes.

    Equality is structural over every field. Instances are mutable so that
    an owning jar can adjust them; copy before sharing.

    >>> c = Cookie.parse("foo=bar; httponly")
    >>> c.name, c.value, c.httponly
    ('foo', 'bar', True)
    >>> str(c)
    'foo=bar; HttpOnly'

    """

    name = attr.ib(type=str)
    value = attr.ib(type=str)
    expires = attr.ib(type=Optional[datetime.datetime], default=None, kw_only=True)
    max_age = attr.ib(type=Optional[int], default=None, kw_only=True)
    domain = attr.ib(type=Optional[str], default=None, kw_only=True)
    path = attr.ib(type=Optional[str], default=None, kw_only=True)
    secure = attr.ib(type=bool, default=False, kw_only=True)
    httponly = attr.ib(type=bool, default=False, kw_only=True)
    custom = attr.ib(type=Dict[str, str], factory=dict, kw_only=True)

    @classmethod
    def parse(cls, raw: str) -> "Cookie":
        """Parse a cookie string such as ``foo=bar; Path=/; Secure``.

        Raises ParseError when the leading name=value pair is missing or
        the name is empty. Malformed attributes are silently skipped.
        """
        return cls(**parse_cookie(raw))

    from_str = parse

    def pair(self) -> str:
        """Return the bare ``name=value`` pair."""
        return f"{self.name}={self.value}"

    def __str__(self) -> str:
        return format_cookie(self)
