"""
Pydantic Schemas

Request/response models for the API. All JSON keys are camelCase.

Usage:
======
    from cinefeel.shared.schemas import BookmarkResponse, BookmarkUpdate
"""

from cinefeel.shared.schemas.common import (
    BaseSchema,
    MessageResponse,
    SuccessResponse,
    ErrorDetail,
    ErrorResponse,
    HealthResponse,
)
from cinefeel.shared.schemas.user import (
    LoginRequest,
    RegisterRequest,
    UserSummary,
    AuthResponse,
    MeResponse,
)
from cinefeel.shared.schemas.bookmark import (
    normalize_tags,
    BookmarkCreate,
    BookmarkUpdate,
    BookmarkResponse,
    AuthorResponse,
    PublicBookmarkResponse,
    LikeResponse,
    LikeCountResponse,
)
from cinefeel.shared.schemas.movie import (
    Genre,
    MovieSummary,
    MovieDetail,
    MoviePage,
)

__all__ = [
    # Common
    "BaseSchema",
    "MessageResponse",
    "SuccessResponse",
    "ErrorDetail",
    "ErrorResponse",
    "HealthResponse",
    # User
    "LoginRequest",
    "RegisterRequest",
    "UserSummary",
    "AuthResponse",
    "MeResponse",
    # Bookmark
    "normalize_tags",
    "BookmarkCreate",
    "BookmarkUpdate",
    "BookmarkResponse",
    "AuthorResponse",
    "PublicBookmarkResponse",
    "LikeResponse",
    "LikeCountResponse",
    # Movie
    "Genre",
    "MovieSummary",
    "MovieDetail",
    "MoviePage",
]
