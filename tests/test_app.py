"""Tests for health checks, request ids and the error envelope."""
from fastapi import APIRouter
from httpx import AsyncClient

from cinefeel.api.main import app
from cinefeel.api.middleware.session import REQUEST_ID_HEADER
from cinefeel.shared.core.logging import REDACTED, redact_secrets
from cinefeel.shared.schemas.common import ErrorResponse


async def test_health(client: AsyncClient) -> None:
    response = await client.get("/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert body["service"] == "cinefeel"


async def test_ready(client: AsyncClient) -> None:
    response = await client.get("/ready")

    assert response.status_code == 200
    assert response.json() == {"status": "ready"}


async def test_live(client: AsyncClient) -> None:
    assert (await client.get("/live")).json() == {"status": "alive"}


async def test_request_id_is_generated(client: AsyncClient) -> None:
    response = await client.get("/live")

    assert response.headers[REQUEST_ID_HEADER]


async def test_request_id_is_echoed(client: AsyncClient) -> None:
    response = await client.get("/live", headers={REQUEST_ID_HEADER: "req-123"})

    assert response.headers[REQUEST_ID_HEADER] == "req-123"


async def test_unknown_route(client: AsyncClient) -> None:
    response = await client.get("/does-not-exist")

    assert response.status_code == 404


async def test_unexpected_error_returns_500_envelope(client: AsyncClient) -> None:
    router = APIRouter()

    @router.get("/__boom")
    async def boom():
        raise RuntimeError("kaboom")

    app.include_router(router)
    try:
        response = await client.get("/__boom")
    finally:
        app.router.routes[:] = [r for r in app.router.routes if getattr(r, "path", None) != "/__boom"]

    assert response.status_code == 500
    error = response.json()["error"]
    assert error["code"] == "INTERNAL_ERROR"
    assert error["details"]["error"] == "kaboom"


async def test_error_bodies_match_error_schema(client: AsyncClient) -> None:
    unauthenticated = await client.get("/bookmarks")
    invalid = await client.get("/likes/abc")

    assert ErrorResponse.model_validate(unauthenticated.json()).error.code == "AUTHENTICATION_ERROR"
    assert ErrorResponse.model_validate(invalid.json()).error.code == "VALIDATION_ERROR"


def test_openapi_documents_error_schema() -> None:
    schema = app.openapi()

    assert "ErrorResponse" in schema["components"]["schemas"]
    responses = schema["paths"]["/bookmarks/{tmdb_id}"]["get"]["responses"]
    assert responses["404"]["content"]["application/json"]["schema"]["$ref"].endswith("/ErrorResponse")


def test_log_redaction_masks_credentials() -> None:
    event = redact_secrets(None, "info", {"event": "login", "password": "hunter2", "Token": "abc", "user_id": 1})

    assert event["password"] == REDACTED
    assert event["Token"] == REDACTED
    assert event["user_id"] == 1
