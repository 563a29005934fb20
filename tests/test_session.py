"""Tests for session cookie parsing and the Set-Cookie contract."""
import pytest
from fastapi import Response

from cinefeel.api.middleware.session import (
    clear_session_cookie,
    extract_session_token,
    set_session_cookie,
)
from cinefeel.config.settings import Settings
from tests.conftest import cookie_attributes


@pytest.mark.parametrize(
    ("header", "expected"),
    [
        ("token=abc.def.ghi", "abc.def.ghi"),
        ("theme=dark; token=abc", "abc"),
        ("theme=dark;token=abc;lang=ko", "abc"),
        ("  token = abc  ", "abc"),
        ("token=first; token=second", "first"),
        ("xtoken=abc", None),
        ("tokens=abc; mytoken=def", None),
        ("token=", None),
        ("token", None),
        ("theme=dark", None),
        ("", None),
        (None, None),
    ],
)
def test_extract_session_token(header: str | None, expected: str | None) -> None:
    assert extract_session_token(header) == expected


def test_extract_session_token_custom_name() -> None:
    assert extract_session_token("sid=abc; token=def", cookie_name="sid") == "abc"


def test_set_session_cookie_outside_production() -> None:
    response = Response()
    set_session_cookie(response, "jwt-value", Settings(APP_ENV="development"))

    header = response.headers["set-cookie"]
    assert header.startswith("token=jwt-value;")
    attrs = cookie_attributes(header)
    assert "httponly" in attrs
    assert "path=/" in attrs
    assert "samesite=lax" in attrs
    assert "max-age=604800" in attrs
    assert "secure" not in attrs


def test_set_session_cookie_in_production_is_secure() -> None:
    response = Response()
    set_session_cookie(response, "jwt-value", Settings(APP_ENV="production"))

    assert "secure" in cookie_attributes(response.headers["set-cookie"])


def test_clear_session_cookie() -> None:
    response = Response()
    clear_session_cookie(response, Settings(APP_ENV="development"))

    header = response.headers["set-cookie"]
    assert header.startswith('token="";')
    attrs = cookie_attributes(header)
    assert "max-age=0" in attrs
    assert "path=/" in attrs
    assert "httponly" in attrs
