import copy
import datetime
import pickle

import pytest

from httpcookie import Cookie, ParseError


def test_new() -> None:
    c = Cookie("foo", "bar")
    assert c.name == "foo"
    assert c.value == "bar"
    assert c.expires is None
    assert c.max_age is None
    assert c.domain is None
    assert c.path is None
    assert not c.secure
    assert not c.httponly
    assert c.custom == {}


@pytest.mark.parametrize("raw", ["bar", "=bar", " =bar", "", " ", ";Secure"])
def test_parse_error(raw: str) -> None:
    with pytest.raises(ParseError):
        Cookie.parse(raw)


def test_parse_error_is_value_error() -> None:
    with pytest.raises(ValueError):
        Cookie.parse("bar")


def test_parse_empty_value() -> None:
    c = Cookie.parse("foo=")
    assert c.name == "foo"
    assert c.value == ""


@pytest.mark.parametrize(
    "raw",
    [
        "foo=bar",
        "foo = bar",
        " foo=bar ",
        " foo=bar ;Domain=",
        " foo=bar ;Domain= ",
        " foo=bar ;Ignored",
        "foo=bar; Max-Age",
        "foo=bar; Expires",
        "foo=bar; Path",
        "foo=bar; Max-Age=abc",
        "foo=bar; Max-Age=1.5",
        "foo=bar; Expires=never",
    ],
)
def test_parse_plain(raw: str) -> None:
    assert Cookie.parse(raw) == Cookie("foo", "bar")


@pytest.mark.parametrize(
    "raw",
    [
        " foo=bar ;HttpOnly",
        " foo=bar ;httponly",
        " foo=bar ;HTTPONLY=whatever",
        " foo=bar ; sekure; HTTPONLY",
    ],
)
def test_parse_httponly(raw: str) -> None:
    assert Cookie.parse(raw) == Cookie("foo", "bar", httponly=True)


@pytest.mark.parametrize(
    "raw",
    [
        " foo=bar ;HttpOnly; Secure",
        " foo=bar ;HttpOnly; Secure=aaaa",
    ],
)
def test_parse_secure(raw: str) -> None:
    assert Cookie.parse(raw) == Cookie("foo", "bar", httponly=True, secure=True)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("Max-Age=0", 0),
        ("Max-Age = 0 ", 0),
        ("Max-Age=-1", 0),
        ("Max-Age = -1 ", 0),
        ("Max-Age=4", 4),
        ("Max-Age = 4 ", 4),
        ("max-age=+4", 4),
    ],
)
def test_parse_max_age(raw: str, expected: int) -> None:
    c = Cookie.parse(" foo=bar ;HttpOnly; Secure; " + raw)
    assert c == Cookie("foo", "bar", httponly=True, secure=True, max_age=expected)


def test_parse_max_age_last_wins() -> None:
    assert Cookie.parse("foo=bar; Max-Age=4; Max-Age=10").max_age == 10


def test_parse_max_age_invalid_keeps_previous() -> None:
    assert Cookie.parse("foo=bar; Max-Age=4; Max-Age=x").max_age == 4


@pytest.mark.parametrize(
    "domain", ["foo.com", "FOO.COM", ".foo.com", ".Foo.Com"]
)
def test_parse_domain(domain: str) -> None:
    assert Cookie.parse(f"foo=bar; Domain={domain}").domain == "foo.com"


def test_parse_domain_strips_single_dot() -> None:
    assert Cookie.parse("foo=bar; Domain=..foo.com").domain == ".foo.com"


def test_parse_path_verbatim() -> None:
    assert Cookie.parse("foo=bar; Path=/Foo/Bar").path == "/Foo/Bar"


def test_parse_composite() -> None:
    c = Cookie.parse(
        " foo=bar ;HttpOnly; Secure; Max-Age=4; Path=/foo; Domain=foo.com; wut=lol"
    )
    assert c == Cookie(
        "foo",
        "bar",
        httponly=True,
        secure=True,
        max_age=4,
        path="/foo",
        domain="foo.com",
        custom={"wut": "lol"},
    )
    assert (
        str(c)
        == "foo=bar; HttpOnly; Secure; Path=/foo; Domain=foo.com; Max-Age=4; wut=lol"
    )


def test_parse_uppercase_domain_composite() -> None:
    c = Cookie.parse(
        " foo=bar ;HttpOnly; Secure; Max-Age=4; Path=/foo; Domain=FOO.COM"
    )
    assert c.domain == "foo.com"


def test_parse_custom_keeps_case() -> None:
    c = Cookie.parse("foo=bar; WuT=LoL; SameSite=Lax")
    assert c.custom == {"WuT": "LoL", "SameSite": "Lax"}


def test_parse_value_with_equal_sign() -> None:
    c = Cookie.parse("foo=a=b=c; Path=/")
    assert c.value == "a=b=c"
    assert c.path == "/"


def test_odd_characters() -> None:
    assert Cookie.parse("foo=b%2Fr") == Cookie("foo", "b%2Fr")


def test_parse_expires(expires: datetime.datetime) -> None:
    c = Cookie.parse("foo=bar; expires=Sun, 23 Nov 2014 20:00:00 GMT")
    assert c.expires == expires
    assert c.expires.tzinfo is not None


def test_from_str() -> None:
    assert Cookie.from_str("foo=bar; secure") == Cookie("foo", "bar", secure=True)


def test_pair() -> None:
    assert Cookie("foo", "bar").pair() == "foo=bar"


def test_format_bare() -> None:
    assert str(Cookie("foo", "bar")) == "foo=bar"


def test_format_full(full_cookie: Cookie) -> None:
    assert str(full_cookie) == (
        "Hello=World!; Secure; Path=/; Domain=servo.org; Max-Age=42; "
        "Expires=Sun, 23 Nov 2014 20:00:00 GMT; arm=x0; x86=rdi"
    )


def test_format_custom_sorted() -> None:
    c = Cookie("foo", "bar", custom={"b": "2", "a": "1", "C": "3"})
    assert str(c) == "foo=bar; C=3; a=1; b=2"


@pytest.mark.parametrize(
    ("name", "value"),
    [("foo", "bar"), ("foo", ""), ("a-b", "b%2Fr"), ("x", "^start/foo=bar")],
)
def test_roundtrip_pair(name: str, value: str) -> None:
    c = Cookie(name, value)
    assert Cookie.parse(str(Cookie.parse(str(c)))) == c


def test_roundtrip_full(full_cookie: Cookie) -> None:
    assert Cookie.parse(str(full_cookie)) == full_cookie


def test_equality() -> None:
    assert Cookie("foo", "bar") == Cookie("foo", "bar")
    assert Cookie("foo", "bar") != Cookie("foo", "baz")
    assert Cookie("foo", "bar") != Cookie("foo", "bar", secure=True)
    assert Cookie("foo", "bar", custom={"a": "1", "b": "2"}) == Cookie(
        "foo", "bar", custom={"b": "2", "a": "1"}
    )


def test_unhashable() -> None:
    with pytest.raises(TypeError):
        hash(Cookie("foo", "bar"))


def test_copy_is_independent(full_cookie: Cookie) -> None:
    clone = copy.deepcopy(full_cookie)
    assert clone == full_cookie
    clone.custom["new"] = "1"
    assert "new" not in full_cookie.custom


def test_pickle(full_cookie: Cookie) -> None:
    assert pickle.loads(pickle.dumps(full_cookie)) == full_cookie


def test_repr() -> None:
    assert repr(Cookie("foo", "bar")).startswith("Cookie(name='foo', value='bar'")


def test_parse_expires_other_zone_kept() -> None:
    c = Cookie.parse("foo=bar; Expires=Sun, 06 Nov 1994 08:49:37 PST")
    assert c.expires == datetime.datetime(
        1994, 11, 6, 8, 49, 37, tzinfo=datetime.timezone.utc
    )
