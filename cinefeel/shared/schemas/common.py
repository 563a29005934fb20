"""
Common Schemas

Shared schemas used across the application for consistent API responses.

Schema Types:
=============
- BaseSchema: Base with common config (camelCase aliases, from_attributes, populate_by_name)
- Generic Responses: MessageResponse, SuccessResponse, ErrorResponse
- Health: HealthResponse

JSON Keys:
==========
Python attributes are snake_case; the wire format is camelCase. Requests
accept either spelling.

    class BookmarkResponse(BaseSchema):
        tmdb_id: int          # serialized as "tmdbId"
        is_public: bool       # serialized as "isPublic"
"""

from datetime import datetime, timezone
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


# Largest value an INTEGER id column holds
MAX_ID = 2_147_483_647


class BaseSchema(BaseModel):
    """
    Base schema with common configuration.

    All request and response schemas should inherit from this class.
    Provides:
    - alias_generator: camelCase JSON keys
    - from_attributes: Allow creating from ORM models
    - populate_by_name: Allow field population by name or alias
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        from_attributes=True,
        populate_by_name=True,
    )


# ═══════════════════════════════════════════════════════════════════════════════
# STANDARD RESPONSES
# ═══════════════════════════════════════════════════════════════════════════════


class MessageResponse(BaseSchema):
    """Simple message response for confirmations."""

    message: str


class SuccessResponse(BaseSchema):
    """Bare success flag, e.g. after a delete."""

    success: bool = True


class ErrorDetail(BaseModel):
    """Error detail structure in error responses."""

    code: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error message")
    details: Optional[dict[str, Any]] = Field(
        default=None,
        description="Additional error context",
    )


class ErrorResponse(BaseModel):
    """
    Standard error response schema.

    All API errors return this format for consistency.

    Example:
        {
            "error": {
                "code": "NOT_FOUND",
                "message": "Bookmark with id '603' not found",
                "details": {}
            }
        }
    """

    error: ErrorDetail


# ═══════════════════════════════════════════════════════════════════════════════
# HEALTH CHECK
# ═══════════════════════════════════════════════════════════════════════════════


class HealthResponse(BaseModel):
    """Health check response schema."""

    status: str = "healthy"
    service: str = "cinefeel"
    version: str = "1.0.0"
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
