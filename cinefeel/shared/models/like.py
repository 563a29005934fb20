"""
Like Entity Model

A user's like on a bookmark.

Constraints:
============
    UNIQUE (user_id, bookmark_id) - enforced by the database, so two
    concurrent likes from the same user store exactly one row and the
    second insert fails with an IntegrityError.
"""

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, ForeignKey, Integer, UniqueConstraint, text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from cinefeel.shared.models.base import Base


if TYPE_CHECKING:
    from cinefeel.shared.models.bookmark import Bookmark
    from cinefeel.shared.models.user import User


class Like(Base):
    """
    Like model.

    Attributes:
        id: Numeric identifier
        user_id: The user who liked (integer, same type as users.id)
        bookmark_id: The liked bookmark
    """

    __tablename__ = "likes"
    __table_args__ = (UniqueConstraint("user_id", "bookmark_id"),)

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )

    user_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )

    bookmark_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("bookmarks.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=text("CURRENT_TIMESTAMP"),
        nullable=False,
    )

    user: Mapped["User"] = relationship(
        "User",
        back_populates="likes",
    )

    bookmark: Mapped["Bookmark"] = relationship(
        "Bookmark",
        back_populates="likes",
    )

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<Like(user_id={self.user_id}, bookmark_id={self.bookmark_id})>"
