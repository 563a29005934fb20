"""
Custom Exceptions

Application-specific exceptions with HTTP status codes and error codes.

Exception Hierarchy:
====================
    CineFeelException (base)
       │
       ├── ValidationError (400)          ← Missing or malformed input
       │      ├── InvalidCredentialsError ← Unknown email or wrong password
       │      └── AlreadyLikedError       ← Duplicate like for (user, bookmark)
       ├── AuthenticationError (401)      ← Missing, invalid or expired session
       ├── NotFoundError (404)            ← Resource not found (or not owned)
       │      ├── UserNotFoundError
       │      ├── BookmarkNotFoundError
       │      └── MovieNotFoundError
       ├── ConflictError (409)            ← Resource already exists
       │      └── DuplicateResourceError
       └── ServiceUnavailableError (503)  ← External service down
              └── ExternalServiceError

Ownership:
==========
Acting on another user's bookmark raises BookmarkNotFoundError, never a 403,
so the API does not confirm that other users' resources exist.

Usage:
======
    from cinefeel.shared.core.exceptions import BookmarkNotFoundError

    raise BookmarkNotFoundError(tmdb_id)
    # Results in: {"error": {"code": "NOT_FOUND", "message": "Bookmark with id '603' not found"}}

Exception Handling:
===================
    Exceptions are caught by the error handler middleware and converted to JSON:
    {
        "error": {
            "code": "NOT_FOUND",
            "message": "Bookmark with id '603' not found",
            "details": {}
        }
    }
"""

from typing import Any, Optional


class CineFeelException(Exception):
    """
    Base exception for all CineFeel application errors.

    All custom exceptions inherit from this class, providing:
    - HTTP status code mapping
    - Error code for programmatic handling
    - Optional details dictionary

    Attributes:
        message: Human-readable error message
        status_code: HTTP status code (default 500)
        error_code: Machine-readable error code
        details: Additional error context
    """

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        error_code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        self.message = message
        self.status_code = status_code
        self.error_code = error_code or "INTERNAL_ERROR"
        self.details = details or {}
        super().__init__(self.message)


# ═══════════════════════════════════════════════════════════════════════════════
# VALIDATION ERRORS (400)
# ═══════════════════════════════════════════════════════════════════════════════


class ValidationError(CineFeelException):
    """
    Validation error (400 Bad Request).

    Raised when input data fails validation.
    """

    def __init__(
        self,
        message: str = "Validation failed",
        details: Optional[dict[str, Any]] = None,
        error_code: str = "VALIDATION_ERROR",
    ) -> None:
        super().__init__(
            message=message,
            status_code=400,
            error_code=error_code,
            details=details,
        )


class InvalidCredentialsError(ValidationError):
    """
    Login failed.

    Same message for an unknown email and a wrong password.
    """

    def __init__(self, message: str = "Invalid email or password") -> None:
        super().__init__(message=message, error_code="INVALID_CREDENTIALS")


class AlreadyLikedError(ValidationError):
    """The user already likes this bookmark."""

    def __init__(self, bookmark_id: int) -> None:
        super().__init__(
            message="Bookmark already liked",
            details={"bookmark_id": bookmark_id},
            error_code="ALREADY_LIKED",
        )


# ═══════════════════════════════════════════════════════════════════════════════
# AUTHENTICATION ERRORS (401)
# ═══════════════════════════════════════════════════════════════════════════════


class AuthenticationError(CineFeelException):
    """
    Authentication failed error (401 Unauthorized).

    Raised when:
    - No session cookie was sent
    - Token signature is invalid or the token is malformed
    - Token expired

    The message never says which of these happened.
    """

    def __init__(
        self,
        message: str = "Authentication required",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=401,
            error_code="AUTHENTICATION_ERROR",
            details=details,
        )


# ═══════════════════════════════════════════════════════════════════════════════
# NOT FOUND ERRORS (404)
# ═══════════════════════════════════════════════════════════════════════════════


class NotFoundError(CineFeelException):
    """
    Resource not found error (404 Not Found).

    Base class for all "not found" errors with automatic message formatting.

    Example:
        raise NotFoundError("Bookmark", 603)
        # Message: "Bookmark with id '603' not found"
    """

    def __init__(
        self,
        resource: str,
        resource_id: Optional[Any] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        message = f"{resource} not found"
        if resource_id is not None:
            message = f"{resource} with id '{resource_id}' not found"
        super().__init__(
            message=message,
            status_code=404,
            error_code="NOT_FOUND",
            details=details,
        )


class UserNotFoundError(NotFoundError):
    """User not found error."""

    def __init__(self, user_id: int) -> None:
        super().__init__(resource="User", resource_id=user_id)


class BookmarkNotFoundError(NotFoundError):
    """Bookmark not found for the caller."""

    def __init__(self, bookmark_ref: int) -> None:
        super().__init__(resource="Bookmark", resource_id=bookmark_ref)


class MovieNotFoundError(NotFoundError):
    """Movie not found in the external catalog."""

    def __init__(self, tmdb_id: int) -> None:
        super().__init__(resource="Movie", resource_id=tmdb_id)


# ═══════════════════════════════════════════════════════════════════════════════
# CONFLICT ERRORS (409)
# ═══════════════════════════════════════════════════════════════════════════════


class ConflictError(CineFeelException):
    """
    Resource conflict error (409 Conflict).

    Raised when operation conflicts with existing resource.

    Example:
        raise ConflictError("Email already registered")
    """

    def __init__(
        self,
        message: str = "Resource conflict",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=409,
            error_code="CONFLICT",
            details=details,
        )


class DuplicateResourceError(ConflictError):
    """
    Duplicate resource error.

    Specific case of conflict when trying to create duplicate resource.
    """

    def __init__(
        self,
        message: str = "Resource already exists",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(message=message, details=details)


# ═══════════════════════════════════════════════════════════════════════════════
# SERVICE ERRORS (503)
# ═══════════════════════════════════════════════════════════════════════════════


class ServiceUnavailableError(CineFeelException):
    """
    Service temporarily unavailable error (503).

    Raised when the movie catalog is not configured or not reachable.
    """

    def __init__(
        self,
        message: str = "Service temporarily unavailable",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=503,
            error_code="SERVICE_UNAVAILABLE",
            details=details,
        )


class ExternalServiceError(ServiceUnavailableError):
    """
    External service error.

    More specific error for external API failures.
    """

    def __init__(
        self,
        service_name: str,
        message: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        msg = message or f"{service_name} service error"
        extra_details = details or {}
        extra_details["service"] = service_name
        super().__init__(message=msg, details=extra_details)
