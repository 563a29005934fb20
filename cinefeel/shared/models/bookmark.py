"""
Bookmark Entity Model

A user's saved movie from the external catalog, with a private note,
a visibility flag, tags and likes from other users.

SAMPLE BOOKMARK RECORD:
┌──────────────────────────────────────────────────────────────────────────────┐
│ id               │ 7                                                         │
│ user_id          │ 42                                                        │
│ tmdb_id          │ 603                                                       │
│ title            │ "The Matrix"                                              │
│ poster_path      │ "https://image.tmdb.org/t/p/w500/f89U3ADr1oiB1s9GkdPOE.jpg"│
│ note             │ "Rewatch with the director's commentary"                  │
│ is_public        │ true                                                      │
└──────────────────────────────────────────────────────────────────────────────┘

Constraints:
============
    UNIQUE (user_id, tmdb_id) - one bookmark per movie per user. Creation is
    insert-or-fetch against this constraint rather than check-then-insert.
"""

from typing import TYPE_CHECKING, Optional

from sqlalchemy import Boolean, ForeignKey, Index, Integer, String, Text, UniqueConstraint, false
from sqlalchemy.orm import Mapped, mapped_column, relationship

from cinefeel.shared.models.base import Base, TimestampMixin


if TYPE_CHECKING:
    from cinefeel.shared.models.user import User
    from cinefeel.shared.models.bookmark_tag import BookmarkTag
    from cinefeel.shared.models.like import Like


class Bookmark(Base, TimestampMixin):
    """
    Bookmark model - a user's saved movie.

    Attributes:
        id: Numeric identifier (used by the likes API)
        user_id: Exclusive owner
        tmdb_id: External catalog id (used by the bookmarks API)
        title: Movie title as returned by the catalog
        poster_path: Poster URL, if any
        note: Owner's free-text note
        is_public: Whether the bookmark appears in the public feed

    Relationships:
        user: The owner
        tag_links: BookmarkTag association rows
        likes: Likes from users
    """

    __tablename__ = "bookmarks"
    __table_args__ = (
        UniqueConstraint("user_id", "tmdb_id"),
        # Public feed: WHERE is_public ORDER BY created_at DESC
        Index("ix_bookmarks_is_public_created_at", "is_public", "created_at"),
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # PRIMARY KEY
    # ═══════════════════════════════════════════════════════════════════════════

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # FOREIGN KEYS
    # ═══════════════════════════════════════════════════════════════════════════

    user_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # CATALOG DATA
    # ═══════════════════════════════════════════════════════════════════════════

    tmdb_id: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
    )

    title: Mapped[str] = mapped_column(
        String(500),
        nullable=False,
    )

    poster_path: Mapped[Optional[str]] = mapped_column(
        String(1000),
        nullable=True,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # USER-SPECIFIC DATA
    # ═══════════════════════════════════════════════════════════════════════════

    note: Mapped[Optional[str]] = mapped_column(
        Text,
        nullable=True,
    )

    is_public: Mapped[bool] = mapped_column(
        Boolean,
        default=False,
        server_default=false(),
        nullable=False,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # RELATIONSHIPS
    # ═══════════════════════════════════════════════════════════════════════════

    user: Mapped["User"] = relationship(
        "User",
        back_populates="bookmarks",
    )

    tag_links: Mapped[list["BookmarkTag"]] = relationship(
        "BookmarkTag",
        back_populates="bookmark",
        cascade="all, delete-orphan",
    )

    likes: Mapped[list["Like"]] = relationship(
        "Like",
        back_populates="bookmark",
        cascade="all, delete-orphan",
    )

    @property
    def tag_names(self) -> list[str]:
        """Tag names, sorted. Requires tag_links (and their tags) to be loaded."""
        return sorted(link.tag.name for link in self.tag_links)

    @property
    def like_count(self) -> int:
        """Number of likes. Requires likes to be loaded."""
        return len(self.likes)

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<Bookmark(id={self.id}, user_id={self.user_id}, tmdb_id={self.tmdb_id})>"
