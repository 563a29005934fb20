"""
Route Registration

Centralizes all route registration for the FastAPI application.

Route Hierarchy:
================
    /health, /ready, /live  → Health check endpoints
    /auth                   → Register, login, logout, me
    /bookmarks              → Caller's bookmarks (CRUD)
    /public-bookmarks       → Public feed
    /likes                  → Likes on bookmarks
    /movies                 → TMDB catalog proxy

Usage:
======
    from cinefeel.api.routes import register_routes

    app = FastAPI()
    register_routes(app)
"""

from fastapi import FastAPI

from cinefeel.api.handlers import (
    auth_handler,
    bookmark_handler,
    health_handler,
    like_handler,
    movie_handler,
    public_bookmark_handler,
)
from cinefeel.shared.schemas.common import ErrorResponse


# Documents the shared error envelope in the OpenAPI schema
ERROR_RESPONSES = {
    status_code: {"model": ErrorResponse}
    for status_code in (400, 401, 404, 409, 500, 503)
}


def register_routes(app: FastAPI) -> None:
    """
    Register all API routes.

    Args:
        app: FastAPI application instance
    """
    # Health check endpoints (no prefix, root level)
    app.include_router(
        health_handler.router,
        tags=["Health"],
    )

    # Authentication endpoints
    app.include_router(
        auth_handler.router,
        prefix="/auth",
        tags=["Authentication"],
        responses=ERROR_RESPONSES,
    )

    # Caller's bookmarks
    app.include_router(
        bookmark_handler.router,
        prefix="/bookmarks",
        tags=["Bookmarks"],
        responses=ERROR_RESPONSES,
    )

    # Public feed
    app.include_router(
        public_bookmark_handler.router,
        prefix="/public-bookmarks",
        tags=["Bookmarks"],
        responses=ERROR_RESPONSES,
    )

    # Likes
    app.include_router(
        like_handler.router,
        prefix="/likes",
        tags=["Likes"],
        responses=ERROR_RESPONSES,
    )

    # Movie catalog
    app.include_router(
        movie_handler.router,
        prefix="/movies",
        tags=["Movies"],
        responses=ERROR_RESPONSES,
    )
