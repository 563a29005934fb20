"""
Like Service

Like, unlike and count likes on bookmarks.

One like per (user, bookmark) is enforced by the database's unique
constraint, not by a lookup before the insert: of two concurrent likes
from the same user, one row is stored and the other caller gets
AlreadyLikedError.
"""

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from cinefeel.shared.core.exceptions import AlreadyLikedError, BookmarkNotFoundError
from cinefeel.shared.core.logging import get_logger
from cinefeel.shared.models.like import Like
from cinefeel.shared.repositories.bookmark_repository import BookmarkRepository
from cinefeel.shared.repositories.like_repository import LikeRepository


logger = get_logger(__name__)


class LikeService:
    """Service for likes on bookmarks."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.like_repo = LikeRepository(session)
        self.bookmark_repo = BookmarkRepository(session)

    async def like(self, user_id: int, bookmark_id: int) -> Like:
        """
        Like a bookmark.

        Only public bookmarks (or the caller's own) can be liked; any other
        bookmark id is reported as not found.

        Raises:
            BookmarkNotFoundError: Unknown or private bookmark of another user
            AlreadyLikedError: The caller already likes this bookmark
        """
        bookmark = await self.bookmark_repo.get(bookmark_id)
        if not bookmark or (not bookmark.is_public and bookmark.user_id != user_id):
            raise BookmarkNotFoundError(bookmark_id)

        try:
            like = await self.like_repo.add(user_id, bookmark_id)
        except IntegrityError:
            await self.session.rollback()
            raise AlreadyLikedError(bookmark_id)

        logger.info("Bookmark liked", user_id=user_id, bookmark_id=bookmark_id)
        return like

    async def unlike(self, user_id: int, bookmark_id: int) -> None:
        """Remove the caller's like. Succeeds whether or not a like existed."""
        removed = await self.like_repo.remove(user_id, bookmark_id)
        if removed:
            logger.info("Bookmark unliked", user_id=user_id, bookmark_id=bookmark_id)

    async def count(self, bookmark_id: int) -> int:
        return await self.like_repo.count_for_bookmark(bookmark_id)
