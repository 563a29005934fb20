"""
User Schemas

Request/response models for user and authentication endpoints.

The session token itself never appears in a response body; it travels
only in the HttpOnly cookie.
"""

from datetime import datetime
from typing import Optional

from pydantic import EmailStr, Field

from cinefeel.shared.schemas.common import BaseSchema


class LoginRequest(BaseSchema):
    """Schema for user login."""

    email: EmailStr
    password: str = Field(min_length=1)


class RegisterRequest(LoginRequest):
    """Schema for user registration. All three fields are required."""

    nickname: str = Field(
        min_length=1,
        max_length=50,
        description="Display name shown on public bookmarks",
    )


class UserSummary(BaseSchema):
    """Public view of a user (never includes the password hash)."""

    id: int
    email: str
    nickname: str
    created_at: datetime


class AuthResponse(BaseSchema):
    """Schema for register/login responses."""

    message: str
    user: UserSummary


class MeResponse(BaseSchema):
    """Schema for GET /auth/me."""

    authenticated: bool
    user: Optional[UserSummary] = None
