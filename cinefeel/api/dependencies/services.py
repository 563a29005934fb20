"""
Service Dependencies

FastAPI dependencies for service injection.

These dependencies create service instances with proper database session injection.
Services are created per-request, which is fine because:
- Services are stateless (only hold db session reference)
- Each request gets its own db session
- No shared state between requests

Usage:
======
    from cinefeel.api.dependencies.services import get_bookmark_service

    @router.get("")
    async def list_bookmarks(
        user_id: CurrentUserId,
        bookmark_service: BookmarkService = Depends(get_bookmark_service),
    ):
        return await bookmark_service.list_user_bookmarks(user_id)
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from cinefeel.api.dependencies.database import get_db
from cinefeel.api.dependencies.settings import AppSettings
from cinefeel.shared.adapters.tmdb_adapter import TMDBAdapter
from cinefeel.shared.services.auth_service import AuthService
from cinefeel.shared.services.bookmark_service import BookmarkService
from cinefeel.shared.services.like_service import LikeService
from cinefeel.shared.services.movie_service import MovieService


async def get_auth_service(
    settings: AppSettings,
    db: AsyncSession = Depends(get_db),
) -> AuthService:
    """
    Dependency to get AuthService instance.

    Creates a new service instance per request with the request's db session.
    """
    return AuthService(db, settings)


async def get_bookmark_service(
    db: AsyncSession = Depends(get_db),
) -> BookmarkService:
    """
    Dependency to get BookmarkService instance.
    """
    return BookmarkService(db)


async def get_like_service(
    db: AsyncSession = Depends(get_db),
) -> LikeService:
    """
    Dependency to get LikeService instance.
    """
    return LikeService(db)


def get_tmdb_adapter(settings: AppSettings) -> TMDBAdapter:
    """
    Dependency to get the TMDB adapter.

    Tests override this to inject an adapter over httpx.MockTransport.
    """
    return TMDBAdapter(settings)


async def get_movie_service(
    settings: AppSettings,
    adapter: TMDBAdapter = Depends(get_tmdb_adapter),
) -> MovieService:
    """
    Dependency to get MovieService instance. Needs no database session.
    """
    return MovieService(adapter, settings)
