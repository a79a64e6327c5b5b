"""Cookie related errors."""

__all__ = ("CookieError", "ParseError")


class CookieError(Exception):
    """Base class for cookie errors."""


class ParseError(CookieError, ValueError):
    """Cookie string can not be parsed.

    Raised only when the leading ``name=value`` pair is missing or
    malformed. Problems with individual attributes never raise.
    """

    def __init__(self, raw: str, message: str = "Can not parse cookie") -> None:
        self.raw = raw
        super().__init__(f"{message}: {raw!r}")
