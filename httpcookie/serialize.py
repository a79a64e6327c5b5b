"""JSON adapter for cookies.

A cookie is serialized as the JSON string of its ``Set-Cookie`` form.
"""

from .cookie import Cookie
from .errors import ParseError
from .typedefs import DEFAULT_JSON_DECODER, DEFAULT_JSON_ENCODER, JSONDecoder, JSONEncoder

__all__ = ("dumps", "loads")


def dumps(cookie: Cookie, *, dumps: JSONEncoder = DEFAULT_JSON_ENCODER) -> str:
    return dumps(str(cookie))


def loads(data: str, *, loads: JSONDecoder = DEFAULT_JSON_DECODER) -> Cookie:
    try:
        raw = loads(data)
    except ValueError as exc:
        raise ParseError(data, "Could not parse serialized cookie") from exc
    if not isinstance(raw, str):
        raise ParseError(data, "Could not parse serialized cookie")
    try:
        return Cookie.parse(raw)
    except ParseError as exc:
        raise ParseError(data, "Could not parse serialized cookie") from exc
