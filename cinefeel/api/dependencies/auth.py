"""
Authentication Dependencies

FastAPI dependencies that resolve the caller from the session cookie.

Dependency Hierarchy:
=====================
    extract_session_token()     ← Read "token" from the Cookie header
           │
           ▼
    verify_token()              ← Check signature and expiry (no DB access)
           │
           ├── get_current_user_id()   ← Raise 401 if missing/invalid
           └── get_optional_user_id()  ← Return None instead

Both run before the handler body, so an unauthenticated request never
reaches service or storage code.

Type Aliases:
=============
    CurrentUserId   - Authenticated numeric user id (401 otherwise)
    OptionalUserId  - User id or None

Usage:
======
    from cinefeel.api.dependencies.auth import CurrentUserId

    @router.get("/bookmarks")
    async def list_bookmarks(user_id: CurrentUserId):
        ...
"""

from typing import Annotated, Optional

from fastapi import Depends, Request

from cinefeel.api.dependencies.settings import AppSettings
from cinefeel.api.middleware.session import extract_session_token
from cinefeel.shared.core.exceptions import AuthenticationError
from cinefeel.shared.core.logging import log_context
from cinefeel.shared.services.auth_service import verify_token


async def get_optional_user_id(request: Request, settings: AppSettings) -> Optional[int]:
    """
    Resolve the caller's user id from the session cookie, if any.

    On success the id is stored on request.state.user_id and bound to the
    log context.

    Returns:
        The numeric user id, or None if there is no valid session
    """
    token = extract_session_token(
        request.headers.get("cookie"),
        cookie_name=settings.SESSION_COOKIE_NAME,
    )
    claims = verify_token(token, settings)
    if claims is None:
        return None

    user_id = claims["user_id"]
    request.state.user_id = user_id
    log_context(user_id=user_id)
    return user_id


async def get_current_user_id(
    user_id: Annotated[Optional[int], Depends(get_optional_user_id)],
) -> int:
    """
    Require an authenticated caller.

    Raises:
        AuthenticationError: No cookie, or an expired/tampered/malformed token.
            The message is the same in every case.
    """
    if user_id is None:
        raise AuthenticationError()
    return user_id


# ═══════════════════════════════════════════════════════════════════════════════
# TYPE ALIASES
# ═══════════════════════════════════════════════════════════════════════════════

# Authenticated user id (most common dependency)
CurrentUserId = Annotated[int, Depends(get_current_user_id)]

OptionalUserId = Annotated[Optional[int], Depends(get_optional_user_id)]
