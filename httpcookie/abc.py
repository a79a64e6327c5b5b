from abc import abstractmethod
from collections.abc import Iterable, Sized
from typing import TYPE_CHECKING, Iterator, Optional

from .typedefs import LooseCookies

if TYPE_CHECKING:  # pragma: no cover
    from .cookie import Cookie

    IterableBase = Iterable[Cookie]
else:
    IterableBase = Iterable


class AbstractCookieJar(Sized, IterableBase):
    """Abstract Cookie Jar."""

    @abstractmethod
    def clear(self) -> None:
        """Clear all cookies."""

    @abstractmethod
    def update_cookies(self, cookies: LooseCookies) -> None:
        """Update cookies."""

    @abstractmethod
    def add(self, cookie: "Cookie") -> None:
        """Add or replace a cookie by name."""

    @abstractmethod
    def remove(self, name: str) -> None:
        """Remove a cookie by name."""

    @abstractmethod
    def get(self, name: str) -> Optional["Cookie"]:
        """Return the cookie stored under name, if any."""

    @abstractmethod
    def __iter__(self) -> Iterator["Cookie"]:
        """Iterate over stored cookies."""
