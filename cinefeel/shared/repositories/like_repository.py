"""
Like Repository

Likes are unique per (user_id, bookmark_id); add() lets the database
enforce that and surfaces the IntegrityError to the caller.
"""

from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession

from cinefeel.shared.models.like import Like
from cinefeel.shared.repositories.base import BaseRepository


class LikeRepository(BaseRepository[Like]):
    """Repository for Like database operations."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(Like, session)

    async def add(self, user_id: int, bookmark_id: int) -> Like:
        """
        Insert a like.

        Raises:
            sqlalchemy.exc.IntegrityError: If the user already liked the bookmark
        """
        return await self.create(user_id=user_id, bookmark_id=bookmark_id)

    async def remove(self, user_id: int, bookmark_id: int) -> int:
        """Delete the user's like on a bookmark. Returns the number of rows removed."""
        result = await self.session.execute(
            delete(Like).where(Like.user_id == user_id, Like.bookmark_id == bookmark_id)
        )
        return result.rowcount or 0

    async def count_for_bookmark(self, bookmark_id: int) -> int:
        return await self.count(filters={"bookmark_id": bookmark_id})
