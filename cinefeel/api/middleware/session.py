"""
Session Middleware

Everything that touches the session cookie lives here, so handlers never
parse the Cookie header themselves.

Cookie Contract:
================
    Set (login/register):
        token=<jwt>; HttpOnly; Max-Age=604800; Path=/; SameSite=lax[; Secure]

    Clear (logout):
        token=""; HttpOnly; Max-Age=0; Path=/; SameSite=lax[; Secure]

Secure is present if and only if the app runs with APP_ENV=production.

Request Context:
================
RequestContextMiddleware binds request_id, method and path to the structlog
context for every request and returns the id in the X-Request-ID header.
"""

import uuid
from typing import Optional

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from cinefeel.config.settings import Settings
from cinefeel.shared.core.logging import clear_log_context, log_context


REQUEST_ID_HEADER = "X-Request-ID"


def extract_session_token(cookie_header: Optional[str], cookie_name: str = "token") -> Optional[str]:
    """
    Get the session token from a raw Cookie header.

    The header is split on ';' and the first pair whose name is exactly
    ``cookie_name`` wins. Names that merely end in it ("xtoken") do not match.

    Args:
        cookie_header: Raw Cookie header value (may be None)
        cookie_name: Name of the session cookie

    Returns:
        The token, or None if the cookie is absent or empty

    Example:
        extract_session_token("theme=dark; token=abc.def.ghi")  # "abc.def.ghi"
    """
    if not cookie_header:
        return None

    for pair in cookie_header.split(";"):
        name, sep, value = pair.strip().partition("=")
        if sep and name.strip() == cookie_name:
            value = value.strip()
            return value or None

    return None


def set_session_cookie(response: Response, token: str, settings: Settings) -> None:
    """Attach the session cookie to a login/registration response."""
    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=token,
        max_age=settings.session_max_age_seconds,
        path="/",
        secure=settings.is_production,
        httponly=True,
        samesite="lax",
    )


def clear_session_cookie(response: Response, settings: Settings) -> None:
    """Expire the session cookie immediately (logout)."""
    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value="",
        max_age=0,
        path="/",
        secure=settings.is_production,
        httponly=True,
        samesite="lax",
    )


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Bind a request id to the log context and echo it in the response."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint,
    ) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        request.state.request_id = request_id

        clear_log_context()
        log_context(
            request_id=request_id,
            method=request.method,
            path=request.url.path,
        )
        try:
            response = await call_next(request)
        finally:
            clear_log_context()

        response.headers[REQUEST_ID_HEADER] = request_id
        return response
