"""
Core Module

Provides core functionality shared across the application:
- Structured logging
- Custom exceptions

Usage:
======
    from cinefeel.shared.core.logging import logger, get_logger
    from cinefeel.shared.core.exceptions import CineFeelException, NotFoundError

    logger.info("Starting operation", user_id=user_id)
"""

from cinefeel.shared.core.logging import (
    logger,
    get_logger,
    log_context,
    clear_log_context,
)
from cinefeel.shared.core.exceptions import (
    CineFeelException,
    ValidationError,
    InvalidCredentialsError,
    AlreadyLikedError,
    AuthenticationError,
    NotFoundError,
    UserNotFoundError,
    BookmarkNotFoundError,
    MovieNotFoundError,
    ConflictError,
    DuplicateResourceError,
    ServiceUnavailableError,
    ExternalServiceError,
)

__all__ = [
    # Logging
    "logger",
    "get_logger",
    "log_context",
    "clear_log_context",
    # Exceptions
    "CineFeelException",
    "ValidationError",
    "InvalidCredentialsError",
    "AlreadyLikedError",
    "AuthenticationError",
    "NotFoundError",
    "UserNotFoundError",
    "BookmarkNotFoundError",
    "MovieNotFoundError",
    "ConflictError",
    "DuplicateResourceError",
    "ServiceUnavailableError",
    "ExternalServiceError",
]
