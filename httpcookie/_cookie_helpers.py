"""
Internal cookie handling helpers.

This module contains the tokenizer and the formatter behind
``Cookie.parse`` and ``str(Cookie)``. These are not part of the public
API and may change without notice.
"""

import re
from typing import TYPE_CHECKING, Any, Callable, Dict, List, Optional, Tuple

from .errors import ParseError
from .helpers import ascii_lower, format_http_date, parse_http_date
from .log import internal_logger

if TYPE_CHECKING:  # pragma: no cover
    from .cookie import Cookie

__all__ = ("format_cookie", "parse_cookie", "split_attr")

# Attributes interpreted by the parser, anything else is kept as custom.
_COOKIE_KNOWN_ATTRS = frozenset(
    ("secure", "httponly", "max-age", "domain", "path", "expires")
)
_COOKIE_BOOL_ATTRS = frozenset(("secure", "httponly"))

# Max-Age is a signed 64 bit decimal, no underscores or unicode digits
_MAX_AGE_RE = re.compile(r"[+-]?[0-9]+", re.ASCII)
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


def split_attr(attr: str) -> Tuple[str, Optional[str]]:
    """Split ``key=value`` on the first equal sign.

    Both parts are stripped, value is None when there is no equal sign.
    """
    key, sep, value = attr.partition("=")
    if not sep:
        return key.strip(), None
    return key.strip(), value.strip()


def _split_pair(pair: str, raw: str) -> Tuple[str, str]:
    name, sep, value = pair.strip().partition("=")
    if not sep:
        raise ParseError(raw, "Cookie has no name=value pair")
    name = name.strip()
    if not name:
        raise ParseError(raw, "Cookie name is empty")
    return name, value.strip()


def _parse_max_age(value: str) -> Optional[int]:
    if not _MAX_AGE_RE.fullmatch(value):
        return None
    max_age = int(value)
    if not _INT64_MIN <= max_age <= _INT64_MAX:
        return None
    # See RFC 6265 Section 5.2.2, negative values indicate that the
    # earliest possible expiration time should be used.
    return max(max_age, 0)


def _parse_domain(value: str) -> Optional[str]:
    if not value:
        return None
    if value.startswith("."):
        value = value[1:]
    return ascii_lower(value)


_VALUE_PARSERS: Dict[str, Callable[[str], Any]] = {
    "max-age": _parse_max_age,
    "domain": _parse_domain,
    "path": str,
    "expires": parse_http_date,
}

_FIELD_NAMES = {
    "secure": "secure",
    "httponly": "httponly",
    "max-age": "max_age",
    "domain": "domain",
    "path": "path",
    "expires": "expires",
}


def parse_cookie(raw: str) -> Dict[str, Any]:
    """
    Parse a single cookie string into ``Cookie`` constructor arguments.

    The first ``;`` separated segment must be a ``name=value`` pair, a
    missing equal sign or an empty name raises ParseError. The remaining
    segments are attributes matched case-insensitively against
    _COOKIE_KNOWN_ATTRS. A known attribute whose value can not be
    interpreted (bad Max-Age, unknown Expires date, empty Domain) is
    skipped and parsing goes on. Unknown attributes with a value land in
    ``custom``, unknown flags are dropped.
    """
    pair, *attrs = raw.strip().split(";")
    name, value = _split_pair(pair, raw)

    fields: Dict[str, Any] = {"name": name, "value": value}
    custom: Dict[str, str] = {}

    for attr in attrs:
        key, attr_value = split_attr(attr)
        lower_key = ascii_lower(key)

        if lower_key in _COOKIE_BOOL_ATTRS:
            fields[_FIELD_NAMES[lower_key]] = True
        elif attr_value is None:
            # Bare key: a known attribute without value or an unknown flag
            continue
        elif lower_key in _COOKIE_KNOWN_ATTRS:
            parsed = _VALUE_PARSERS[lower_key](attr_value)
            if parsed is None:
                internal_logger.debug(
                    "Skip invalid %s attribute %r of cookie %r", key, attr_value, name
                )
                continue
            fields[_FIELD_NAMES[lower_key]] = parsed
        else:
            custom[key] = attr_value

    if custom:
        fields["custom"] = custom
    return fields


def format_cookie(cookie: "Cookie") -> str:
    """Format a cookie back into its ``Set-Cookie`` string form.

    Attributes come in a fixed order: HttpOnly, Secure, Path, Domain,
    Max-Age, Expires, then custom attributes sorted by key. Nothing is
    quoted or escaped.
    """
    parts: List[str] = [cookie.pair()]
    if cookie.httponly:
        parts.append("HttpOnly")
    if cookie.secure:
        parts.append("Secure")
    if cookie.path is not None:
        parts.append(f"Path={cookie.path}")
    if cookie.domain is not None:
        parts.append(f"Domain={cookie.domain}")
    if cookie.max_age is not None:
        parts.append(f"Max-Age={cookie.max_age}")
    if cookie.expires is not None:
        parts.append(f"Expires={format_http_date(cookie.expires)}")
    for key in sorted(cookie.custom):
        parts.append(f"{key}={cookie.custom[key]}")
    return "; ".join(parts)
