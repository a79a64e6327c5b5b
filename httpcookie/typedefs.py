import json
from collections.abc import Callable, Iterable, Mapping
from typing import TYPE_CHECKING, Any, Union

from multidict import CIMultiDict, CIMultiDictProxy, MultiDict, MultiDictProxy, istr

DEFAULT_JSON_ENCODER = json.dumps
DEFAULT_JSON_DECODER = json.loads

if TYPE_CHECKING:
    from .cookie import Cookie

JSONEncoder = Callable[[Any], str]
JSONDecoder = Callable[[str], Any]
LooseHeaders = Union[
    Mapping[str, str],
    Mapping[istr, str],
    CIMultiDict[str],
    CIMultiDictProxy[str],
    MultiDict[str],
    MultiDictProxy[str],
    Iterable[tuple[Union[str, istr], str]],
]

LooseCookiesMappings = Mapping[str, Union[str, "Cookie"]]
LooseCookiesIterables = Iterable[Union[tuple[str, Union[str, "Cookie"]], "Cookie"]]
LooseCookies = Union[LooseCookiesMappings, LooseCookiesIterables]
