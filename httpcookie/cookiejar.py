import datetime
from collections.abc import Mapping
from typing import Dict, Iterable, Iterator, List, Optional

from multidict import CIMultiDict

from . import hdrs
from .abc import AbstractCookieJar
from .cookie import Cookie
from .errors import ParseError
from .log import internal_logger, jar_logger
from .typedefs import LooseCookies, LooseHeaders

__all__ = ("CookieJar",)


class CookieJar(AbstractCookieJar):
    """Keeps cookies by name and tracks what changed since creation.

    No domain or path matching is done, cookies are keyed by name only.
    """

    EPOCH = datetime.datetime(1970, 1, 1, tzinfo=datetime.timezone.utc)

    def __init__(self, *, cookies: Optional[Iterable[Cookie]] = None) -> None:
        self._cookies: Dict[str, Cookie] = {}
        self._delta: Dict[str, Cookie] = {}
        if cookies is not None:
            for cookie in cookies:
                self._cookies[cookie.name] = cookie

    def __len__(self) -> int:
        return len(self._cookies)

    def __iter__(self) -> Iterator[Cookie]:
        return iter(list(self._cookies.values()))

    def __contains__(self, name: object) -> bool:
        return name in self._cookies

    def get(self, name: str) -> Optional[Cookie]:
        return self._cookies.get(name)

    def add(self, cookie: Cookie) -> None:
        """Add a cookie, replacing any cookie with the same name."""
        jar_logger.debug("Add cookie %r", cookie.name)
        self._cookies[cookie.name] = cookie
        self._track(cookie)

    def remove(self, name: str) -> None:
        """Remove a cookie and remember a removal cookie for the delta."""
        cookie = self._cookies.pop(name, None)
        if cookie is None:
            return
        jar_logger.debug("Remove cookie %r", name)
        self._track(self._removal_cookie(cookie))

    def clear(self) -> None:
        for name in list(self._cookies):
            self.remove(name)

    def delta(self) -> List[Cookie]:
        """Cookies added or removed since the jar was created.

        Ordered by their last change.
        """
        return list(self._delta.values())

    def update_cookies(self, cookies: LooseCookies) -> None:
        """Update cookies."""
        if isinstance(cookies, Mapping):
            cookies = cookies.items()

        for item in cookies:
            if isinstance(item, Cookie):
                self.add(item)
                continue
            name, value = item
            if isinstance(value, Cookie):
                self.add(value)
            else:
                self.add(Cookie(name, value))

    def update_cookies_from_headers(self, headers: LooseHeaders) -> None:
        """Add one cookie for every Set-Cookie header value.

        Values which can not be parsed are logged and skipped.
        """
        for raw in CIMultiDict(headers).getall(hdrs.SET_COOKIE, ()):
            try:
                cookie = Cookie.parse(raw)
            except ParseError:
                internal_logger.warning("Can not load cookie from %r", raw)
                continue
            self.add(cookie)

    def set_cookie_headers(self) -> "CIMultiDict[str]":
        """Build Set-Cookie headers for the delta."""
        headers: CIMultiDict[str] = CIMultiDict()
        for cookie in self._delta.values():
            headers.add(hdrs.SET_COOKIE, str(cookie))
        return headers

    def cookie_headers(self) -> "CIMultiDict[str]":
        """Build the Cookie request header carrying every stored cookie.

        Empty when the jar is empty.
        """
        headers: CIMultiDict[str] = CIMultiDict()
        if self._cookies:
            headers[hdrs.COOKIE] = "; ".join(
                cookie.pair() for cookie in self._cookies.values()
            )
        return headers

    def _track(self, cookie: Cookie) -> None:
        # re-insert to keep the delta ordered by last change
        self._delta.pop(cookie.name, None)
        self._delta[cookie.name] = cookie

    @classmethod
    def _removal_cookie(cls, cookie: Cookie) -> Cookie:
        return Cookie(
            cookie.name,
            "",
            max_age=0,
            expires=cls.EPOCH,
            path=cookie.path,
            domain=cookie.domain,
        )
