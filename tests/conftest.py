import datetime

import pytest

from httpcookie import Cookie, CookieJar


@pytest.fixture
def expires() -> datetime.datetime:
    return datetime.datetime(2014, 11, 23, 20, 0, 0, tzinfo=datetime.timezone.utc)


@pytest.fixture
def full_cookie(expires: datetime.datetime) -> Cookie:
    return Cookie(
        "Hello",
        "World!",
        expires=expires,
        max_age=42,
        domain="servo.org",
        path="/",
        secure=True,
        httponly=False,
        custom={"x86": "rdi", "arm": "x0"},
    )


@pytest.fixture
def jar() -> CookieJar:
    return CookieJar(
        cookies=[
            Cookie("shared", "first"),
            Cookie("scoped", "second", domain="example.com", path="/one"),
        ]
    )
