"""
Authentication Handler

Handles registration, login, logout and session lookup.

ARCHITECTURE:
=============
    Handler → Service → Repository → Model
          ↘ Utils  ↗

Handlers should ONLY:
- Parse HTTP requests
- Call service methods
- Format HTTP responses
- Handle HTTP-specific errors

Business logic belongs in the SERVICE layer, not here.

SESSION COOKIE:
===============
The session token is never returned in a body. Register and login set it
as an HttpOnly cookie; logout expires it.
"""

from fastapi import APIRouter, Depends, Response, status
from fastapi.responses import JSONResponse

from cinefeel.api.dependencies import AppSettings, OptionalUserId
from cinefeel.api.dependencies.services import get_auth_service
from cinefeel.api.middleware.session import clear_session_cookie, set_session_cookie
from cinefeel.shared.core.exceptions import UserNotFoundError
from cinefeel.shared.models.user import User
from cinefeel.shared.schemas.common import MessageResponse
from cinefeel.shared.schemas.user import (
    AuthResponse,
    LoginRequest,
    MeResponse,
    RegisterRequest,
    UserSummary,
)
from cinefeel.shared.services.auth_service import AuthService


router = APIRouter()


def _build_user_summary(user: User) -> UserSummary:
    return UserSummary(
        id=user.id,
        email=user.email,
        nickname=user.nickname,
        created_at=user.created_at,
    )


@router.post(
    "/register",
    response_model=AuthResponse,
    status_code=status.HTTP_201_CREATED,
)
async def register(
    user_data: RegisterRequest,
    response: Response,
    settings: AppSettings,
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Register a new user and start a session.

    Raises:
        400: Missing or malformed email/password/nickname
        409: Email already registered
    """
    user, token = await auth_service.register_user(
        email=user_data.email,
        password=user_data.password,
        nickname=user_data.nickname,
    )
    set_session_cookie(response, token, settings)

    return AuthResponse(message="Registration successful", user=_build_user_summary(user))


@router.post("/login", response_model=AuthResponse)
async def login(
    credentials: LoginRequest,
    response: Response,
    settings: AppSettings,
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Authenticate user and start a session.

    Raises:
        400: Invalid email or password (same message for both)
    """
    user, token = await auth_service.login_user(
        email=credentials.email,
        password=credentials.password,
    )
    set_session_cookie(response, token, settings)

    return AuthResponse(message="Login successful", user=_build_user_summary(user))


@router.post("/logout", response_model=MessageResponse)
async def logout(response: Response, settings: AppSettings):
    """End the session by expiring the cookie. Works without a session."""
    clear_session_cookie(response, settings)
    return MessageResponse(message="Logged out")


@router.get("/me", response_model=MeResponse)
async def me(
    user_id: OptionalUserId,
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Report whether the caller has a valid session, and as whom.

    Unlike other endpoints, the 401 body is {"authenticated": false, "user": null}.
    """
    unauthenticated = JSONResponse(
        status_code=status.HTTP_401_UNAUTHORIZED,
        content={"authenticated": False, "user": None},
    )
    if user_id is None:
        return unauthenticated

    try:
        user = await auth_service.get_user(user_id)
    except UserNotFoundError:
        # Valid token for an account that no longer exists
        return unauthenticated

    return MeResponse(authenticated=True, user=_build_user_summary(user))
