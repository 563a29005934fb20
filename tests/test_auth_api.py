"""Tests for /auth endpoints: registration, login, logout and session lookup."""
from datetime import timedelta

import pytest
from httpx import AsyncClient
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from cinefeel.api.dependencies.settings import get_app_settings
from cinefeel.api.main import app
from cinefeel.config.settings import Settings
from cinefeel.shared.models import User
from cinefeel.shared.utils.security import SecurityUtils
from tests.conftest import (
    TEST_PASSWORD,
    auth_headers,
    cookie_attributes,
    register_user,
    session_token_from,
)


async def test_register_creates_user_and_sets_session_cookie(
    client: AsyncClient,
    db_session: AsyncSession,
) -> None:
    response = await client.post(
        "/auth/register",
        json={"email": "a@example.com", "password": TEST_PASSWORD, "nickname": "alice"},
    )
    assert response.status_code == 201

    body = response.json()
    assert body["message"] == "Registration successful"
    assert body["user"]["email"] == "a@example.com"
    assert body["user"]["nickname"] == "alice"
    assert "createdAt" in body["user"]
    assert "token" not in body
    assert "passwordHash" not in body["user"]

    attrs = cookie_attributes(response.headers["set-cookie"])
    assert "httponly" in attrs
    assert "path=/" in attrs
    assert "samesite=lax" in attrs
    assert "max-age=604800" in attrs
    assert "secure" not in attrs

    user = (await db_session.execute(select(User))).scalar_one()
    assert user.password_hash != TEST_PASSWORD
    assert SecurityUtils.verify_password(TEST_PASSWORD, user.password_hash)


async def test_register_cookie_is_secure_in_production(client: AsyncClient) -> None:
    app.dependency_overrides[get_app_settings] = lambda: Settings(APP_ENV="production")

    response = await client.post(
        "/auth/register",
        json={"email": "a@example.com", "password": TEST_PASSWORD, "nickname": "alice"},
    )

    assert response.status_code == 201
    assert "secure" in cookie_attributes(response.headers["set-cookie"])


@pytest.mark.parametrize(
    "payload",
    [
        {"email": "a@example.com", "password": TEST_PASSWORD},
        {"email": "a@example.com", "nickname": "alice"},
        {"password": TEST_PASSWORD, "nickname": "alice"},
        {"email": "not-an-email", "password": TEST_PASSWORD, "nickname": "alice"},
        {"email": "a@example.com", "password": "", "nickname": "alice"},
        {"email": "a@example.com", "password": TEST_PASSWORD, "nickname": ""},
        {"email": "a@example.com", "password": TEST_PASSWORD, "nickname": "x" * 51},
    ],
)
async def test_register_rejects_missing_or_malformed_fields(
    client: AsyncClient,
    db_session: AsyncSession,
    payload: dict,
) -> None:
    response = await client.post("/auth/register", json=payload)

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "VALIDATION_ERROR"
    assert "set-cookie" not in response.headers
    count = (await db_session.execute(select(func.count()).select_from(User))).scalar_one()
    assert count == 0


async def test_register_duplicate_email_conflicts(client: AsyncClient) -> None:
    await register_user(client, "a@example.com")

    response = await client.post(
        "/auth/register",
        json={"email": "a@example.com", "password": "other", "nickname": "impostor"},
    )

    assert response.status_code == 409
    assert response.json()["error"]["code"] == "CONFLICT"


async def test_login_sets_fresh_cookie(client: AsyncClient) -> None:
    user_id, _ = await register_user(client, "a@example.com", nickname="alice")

    response = await client.post(
        "/auth/login",
        json={"email": "a@example.com", "password": TEST_PASSWORD},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "Login successful"
    assert body["user"]["id"] == user_id
    token = session_token_from(response.headers["set-cookie"])
    assert token
    assert "max-age=604800" in cookie_attributes(response.headers["set-cookie"])


async def test_login_failures_are_indistinguishable(client: AsyncClient) -> None:
    await register_user(client, "a@example.com")

    wrong_password = await client.post(
        "/auth/login", json={"email": "a@example.com", "password": "wrong"},
    )
    unknown_email = await client.post(
        "/auth/login", json={"email": "nobody@example.com", "password": TEST_PASSWORD},
    )

    assert wrong_password.status_code == 400
    assert unknown_email.status_code == 400
    assert wrong_password.json() == unknown_email.json()
    assert wrong_password.json()["error"]["code"] == "INVALID_CREDENTIALS"
    assert "set-cookie" not in wrong_password.headers


async def test_login_requires_both_fields(client: AsyncClient) -> None:
    response = await client.post("/auth/login", json={"email": "a@example.com"})
    assert response.status_code == 400


async def test_logout_expires_cookie(client: AsyncClient) -> None:
    response = await client.post("/auth/logout")

    assert response.status_code == 200
    assert response.json() == {"message": "Logged out"}
    header = response.headers["set-cookie"]
    assert header.startswith('token="";')
    assert "max-age=0" in cookie_attributes(header)


async def test_me_with_session(client: AsyncClient) -> None:
    user_id, token = await register_user(client, "a@example.com", nickname="alice")

    response = await client.get("/auth/me", headers=auth_headers(token))

    assert response.status_code == 200
    body = response.json()
    assert body["authenticated"] is True
    assert body["user"]["id"] == user_id
    assert body["user"]["nickname"] == "alice"


async def test_me_without_session(client: AsyncClient) -> None:
    response = await client.get("/auth/me")

    assert response.status_code == 401
    assert response.json() == {"authenticated": False, "user": None}


@pytest.mark.parametrize("cookie", ["token=garbage", "token=", "xtoken=abc"])
async def test_me_with_invalid_cookie(client: AsyncClient, cookie: str) -> None:
    response = await client.get("/auth/me", headers={"Cookie": cookie})

    assert response.status_code == 401
    assert response.json() == {"authenticated": False, "user": None}


async def test_me_with_expired_token(client: AsyncClient, settings: Settings) -> None:
    user_id, _ = await register_user(client, "a@example.com")
    expired = SecurityUtils.create_access_token(
        {"user_id": user_id}, settings.JWT_SECRET, expires_delta=timedelta(seconds=-1),
    )

    response = await client.get("/auth/me", headers=auth_headers(expired))

    assert response.status_code == 401


async def test_me_for_deleted_account(client: AsyncClient, settings: Settings) -> None:
    token = SecurityUtils.create_access_token({"user_id": 9999}, settings.JWT_SECRET)

    response = await client.get("/auth/me", headers=auth_headers(token))

    assert response.status_code == 401
    assert response.json() == {"authenticated": False, "user": None}


async def test_session_survives_logout_of_another_client(client: AsyncClient) -> None:
    """Logout only clears the caller's cookie; tokens are not revoked server-side."""
    _, token = await register_user(client, "a@example.com")
    await client.post("/auth/logout")

    response = await client.get("/auth/me", headers=auth_headers(token))

    assert response.status_code == 200
