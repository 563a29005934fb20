"""
API Handlers

Route handlers for the CineFeel API.

Handlers follow the pattern:
- Parse HTTP requests
- Call service methods
- Format HTTP responses

All business logic is delegated to the service layer. Errors raised by
services (CineFeelException subclasses) are rendered by the global
exception handlers.
"""

from cinefeel.api.handlers import (
    auth_handler,
    bookmark_handler,
    health_handler,
    like_handler,
    movie_handler,
    public_bookmark_handler,
)

__all__ = [
    "auth_handler",
    "bookmark_handler",
    "health_handler",
    "like_handler",
    "movie_handler",
    "public_bookmark_handler",
]
