"""
Bookmark Service

Business logic for a user's bookmarks and the public feed.

Ownership:
==========
Every bookmark operation is scoped to (user_id, tmdb_id). Another user's
bookmark for the same movie is indistinguishable from a missing one and
raises BookmarkNotFoundError (404), never a 403.

Update Transaction:
===================
update_bookmark() applies the scalar changes and, when tags were sent,
replaces the whole tag set:

    1. UPDATE bookmarks SET note = ..., is_public = ...
    2. DELETE FROM bookmark_tags WHERE bookmark_id = ...
    3. INSERT INTO tags ... ON CONFLICT (name) DO NOTHING
    4. INSERT INTO bookmark_tags ...

All four run in the request's session transaction. If any step raises,
the session is rolled back before the error propagates, so a failure
never leaves new scalar values next to the old tags (or the reverse).

Usage:
======
    from cinefeel.shared.services.bookmark_service import BookmarkService

    service = BookmarkService(db)
    bookmark = await service.update_bookmark(user_id, tmdb_id, BookmarkUpdate(tags=["drama"]))
"""

from typing import Optional, Tuple

from sqlalchemy.ext.asyncio import AsyncSession

from cinefeel.config.settings import get_settings
from cinefeel.shared.core.exceptions import BookmarkNotFoundError
from cinefeel.shared.core.logging import get_logger
from cinefeel.shared.models.bookmark import Bookmark
from cinefeel.shared.repositories.bookmark_repository import BookmarkRepository
from cinefeel.shared.repositories.tag_repository import TagRepository
from cinefeel.shared.schemas.bookmark import BookmarkUpdate


logger = get_logger(__name__)


class BookmarkService:
    """
    Service for bookmark-related business logic.

    Handles:
    - Listing, fetching, creating and deleting the caller's bookmarks
    - The atomic note/visibility/tags update
    - The public feed
    """

    def __init__(self, session: AsyncSession) -> None:
        """
        Initialize BookmarkService.

        Args:
            session: Async database session
        """
        self.session = session
        self.bookmark_repo = BookmarkRepository(session)
        self.tag_repo = TagRepository(session)

    # ═══════════════════════════════════════════════════════════════════════════
    # READ
    # ═══════════════════════════════════════════════════════════════════════════

    async def list_user_bookmarks(self, user_id: int) -> list[Bookmark]:
        """List the caller's bookmarks, newest first, with tags and likes loaded."""
        return await self.bookmark_repo.list_for_user(user_id)

    async def get_bookmark(self, user_id: int, tmdb_id: int) -> Bookmark:
        """
        Get the caller's bookmark for a movie.

        Raises:
            BookmarkNotFoundError: If the caller has no bookmark for tmdb_id
        """
        bookmark = await self.bookmark_repo.get_by_owner_and_tmdb(user_id, tmdb_id)
        if not bookmark:
            raise BookmarkNotFoundError(tmdb_id)
        return bookmark

    async def list_public_bookmarks(self, limit: Optional[int] = None) -> list[Bookmark]:
        """
        List public bookmarks from all users, newest first.

        Args:
            limit: Maximum number of bookmarks (default PUBLIC_FEED_LIMIT, 50)
        """
        if limit is None:
            limit = get_settings().PUBLIC_FEED_LIMIT
        return await self.bookmark_repo.list_public(limit)

    # ═══════════════════════════════════════════════════════════════════════════
    # WRITE
    # ═══════════════════════════════════════════════════════════════════════════

    async def create_bookmark(
        self,
        user_id: int,
        tmdb_id: int,
        title: str,
        poster_path: Optional[str] = None,
    ) -> Tuple[Bookmark, bool]:
        """
        Bookmark a movie for the caller, or return the existing bookmark.

        A repeated request (or a concurrent duplicate) does not create a
        second row and does not modify the existing one.

        Returns:
            Tuple of (bookmark, created)
        """
        bookmark, created = await self.bookmark_repo.insert_or_get(
            user_id=user_id,
            tmdb_id=tmdb_id,
            title=title,
            poster_path=poster_path,
        )
        if created:
            logger.info("Bookmark created", user_id=user_id, tmdb_id=tmdb_id)
        return bookmark, created

    async def update_bookmark(
        self,
        user_id: int,
        tmdb_id: int,
        changes: BookmarkUpdate,
    ) -> Bookmark:
        """
        Partially update the caller's bookmark in one transaction.

        Args:
            user_id: Authenticated caller
            tmdb_id: Catalog id identifying the bookmark
            changes: Fields sent by the client; omitted fields keep their values

        Returns:
            The updated bookmark, re-read with tags and likes

        Raises:
            BookmarkNotFoundError: If the caller has no bookmark for tmdb_id
        """
        bookmark = await self.get_bookmark(user_id, tmdb_id)
        tag_names = changes.tag_names()

        try:
            scalar_changes = changes.scalar_changes()
            if scalar_changes:
                await self.bookmark_repo.apply_changes(bookmark, scalar_changes)

            if tag_names is not None:
                tags = await self.tag_repo.upsert_many(tag_names)
                await self.bookmark_repo.replace_tags(bookmark.id, [tag.id for tag in tags])
        except Exception:
            logger.exception("Bookmark update failed, rolling back", user_id=user_id, tmdb_id=tmdb_id)
            await self.session.rollback()
            raise

        logger.info(
            "Bookmark updated",
            user_id=user_id,
            tmdb_id=tmdb_id,
            fields=sorted(scalar_changes),
            tags_replaced=tag_names is not None,
        )
        return await self.bookmark_repo.get_with_relations(bookmark.id, refresh=True)

    async def delete_bookmark(self, user_id: int, tmdb_id: int) -> None:
        """
        Delete the caller's bookmark with its tag links and likes.

        Raises:
            BookmarkNotFoundError: If the caller has no bookmark for tmdb_id
        """
        bookmark = await self.get_bookmark(user_id, tmdb_id)
        await self.bookmark_repo.delete(bookmark.id)
        logger.info("Bookmark deleted", user_id=user_id, tmdb_id=tmdb_id)
