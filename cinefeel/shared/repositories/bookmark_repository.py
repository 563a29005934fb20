"""
Bookmark Repository

Database operations for bookmarks and their tag associations.

Every read that feeds a response eagerly loads tag_links -> tag and likes
with selectinload; async sessions cannot lazy-load relationships.

Common Operations:
==================
- get_by_owner_and_tmdb() → Owner-scoped lookup by catalog id
- list_for_user()         → Caller's bookmarks, newest first
- list_public()           → Public feed with authors
- insert_or_get()         → Insert-or-fetch on (user_id, tmdb_id)
- apply_changes()         → Scalar field update
- replace_tags()          → Delete-then-recreate tag associations
"""

from typing import Any, Optional

from sqlalchemy import delete, insert, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from cinefeel.shared.core.exceptions import BookmarkNotFoundError
from cinefeel.shared.models.bookmark import Bookmark
from cinefeel.shared.models.bookmark_tag import BookmarkTag
from cinefeel.shared.repositories.base import BaseRepository, conflict_insert


def _with_relations(query, include_author: bool = False):
    query = query.options(
        selectinload(Bookmark.tag_links).selectinload(BookmarkTag.tag),
        selectinload(Bookmark.likes),
    )
    if include_author:
        query = query.options(selectinload(Bookmark.user))
    return query


class BookmarkRepository(BaseRepository[Bookmark]):
    """Repository for Bookmark database operations."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(Bookmark, session)

    # ═══════════════════════════════════════════════════════════════════════════
    # READ OPERATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def get_with_relations(self, bookmark_id: int, refresh: bool = False) -> Optional[Bookmark]:
        """
        Get a bookmark by id with tags and likes loaded.

        Args:
            bookmark_id: Bookmark primary key
            refresh: Overwrite identity-map state with fresh rows. Needed after
                Core statements (tag replacement) changed the association table
                behind the ORM's back.
        """
        query = _with_relations(select(Bookmark).where(Bookmark.id == bookmark_id))
        if refresh:
            query = query.execution_options(populate_existing=True)
        result = await self.session.execute(query)
        return result.scalar_one_or_none()

    async def get_by_owner_and_tmdb(self, user_id: int, tmdb_id: int) -> Optional[Bookmark]:
        """
        Get the caller's bookmark for a catalog movie.

        Another user's bookmark for the same movie is never returned.

        SQL Generated:
            SELECT * FROM bookmarks WHERE user_id = 42 AND tmdb_id = 603
        """
        query = _with_relations(
            select(Bookmark).where(Bookmark.user_id == user_id, Bookmark.tmdb_id == tmdb_id)
        )
        result = await self.session.execute(query)
        return result.scalar_one_or_none()

    async def list_for_user(self, user_id: int) -> list[Bookmark]:
        """List a user's bookmarks, newest first."""
        query = _with_relations(
            select(Bookmark)
            .where(Bookmark.user_id == user_id)
            .order_by(Bookmark.created_at.desc(), Bookmark.id.desc())
        )
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def list_public(self, limit: int = 50) -> list[Bookmark]:
        """
        List public bookmarks across all users, newest first.

        Args:
            limit: Maximum number of bookmarks to return

        Returns:
            Bookmarks with user, tags and likes loaded
        """
        query = _with_relations(
            select(Bookmark)
            .where(Bookmark.is_public.is_(True))
            .order_by(Bookmark.created_at.desc(), Bookmark.id.desc())
            .limit(limit),
            include_author=True,
        )
        result = await self.session.execute(query)
        return list(result.scalars().all())

    # ═══════════════════════════════════════════════════════════════════════════
    # WRITE OPERATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def insert_or_get(
        self,
        user_id: int,
        tmdb_id: int,
        title: str,
        poster_path: Optional[str],
    ) -> tuple[Bookmark, bool]:
        """
        Insert a bookmark unless (user_id, tmdb_id) already exists.

        The unique constraint decides: a conflicting insert does nothing and
        the existing row is fetched instead, unchanged.

        Returns:
            Tuple of (bookmark, created)

        Raises:
            BookmarkNotFoundError: If the conflicting row is gone before it is read

        SQL Generated:
            INSERT INTO bookmarks (...) VALUES (...)
            ON CONFLICT (user_id, tmdb_id) DO NOTHING RETURNING id
        """
        stmt = (
            conflict_insert(self.session, Bookmark)
            .values(
                user_id=user_id,
                tmdb_id=tmdb_id,
                title=title,
                poster_path=poster_path,
                is_public=False,
            )
            .on_conflict_do_nothing(index_elements=["user_id", "tmdb_id"])
            .returning(Bookmark.id)
        )
        result = await self.session.execute(stmt)
        created = result.scalar_one_or_none() is not None

        bookmark = await self.get_by_owner_and_tmdb(user_id, tmdb_id)
        if bookmark is None:
            # The conflicting row was deleted before it could be read back
            raise BookmarkNotFoundError(tmdb_id)
        return bookmark, created

    async def apply_changes(self, bookmark: Bookmark, changes: dict[str, Any]) -> None:
        """
        Set scalar columns on a loaded bookmark and flush.

        None is written as-is (it clears the note).
        """
        for field, value in changes.items():
            setattr(bookmark, field, value)
        await self.session.flush()

    async def replace_tags(self, bookmark_id: int, tag_ids: list[int]) -> None:
        """
        Make ``tag_ids`` the bookmark's complete tag set.

        SQL Generated:
            DELETE FROM bookmark_tags WHERE bookmark_id = 7
            INSERT INTO bookmark_tags (bookmark_id, tag_id) VALUES (7, 1), (7, 2)
        """
        await self.session.execute(delete(BookmarkTag).where(BookmarkTag.bookmark_id == bookmark_id))
        if tag_ids:
            await self.session.execute(
                insert(BookmarkTag),
                [{"bookmark_id": bookmark_id, "tag_id": tag_id} for tag_id in tag_ids],
            )
