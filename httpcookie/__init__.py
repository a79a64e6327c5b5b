__version__ = "0.5.0"

from typing import Tuple

from . import hdrs
from .abc import AbstractCookieJar
from .cookie import Cookie
from .cookiejar import CookieJar
from .errors import CookieError, ParseError

__all__: Tuple[str, ...] = (
    "hdrs",
    # abc
    "AbstractCookieJar",
    # cookie
    "Cookie",
    # cookiejar
    "CookieJar",
    # errors
    "CookieError",
    "ParseError",
)
