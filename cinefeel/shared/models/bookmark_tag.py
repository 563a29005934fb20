"""
BookmarkTag Entity Model

Junction table linking Bookmarks to Tags.

The set of rows for a bookmark is exactly the tag set its owner submitted
last: updates delete every row for the bookmark and insert the new set,
they never merge.

SAMPLE BOOKMARK_TAG RECORD:
┌──────────────────────────────────────────────────────────────────────────────┐
│ bookmark_id      │ 7                                                         │
│ tag_id           │ 3                                                         │
└──────────────────────────────────────────────────────────────────────────────┘
"""

from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, Integer
from sqlalchemy.orm import Mapped, mapped_column, relationship

from cinefeel.shared.models.base import Base


if TYPE_CHECKING:
    from cinefeel.shared.models.bookmark import Bookmark
    from cinefeel.shared.models.tag import Tag


class BookmarkTag(Base):
    """
    BookmarkTag model - links a bookmark to a tag.

    Attributes:
        bookmark_id: The tagged bookmark (part of composite PK)
        tag_id: The tag (part of composite PK)

    Relationships:
        bookmark: The tagged bookmark
        tag: The tag
    """

    __tablename__ = "bookmark_tags"

    # ═══════════════════════════════════════════════════════════════════════════
    # COMPOSITE PRIMARY KEY
    # ═══════════════════════════════════════════════════════════════════════════

    bookmark_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("bookmarks.id", ondelete="CASCADE"),
        primary_key=True,
    )

    tag_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("tags.id", ondelete="CASCADE"),
        primary_key=True,
        index=True,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # RELATIONSHIPS
    # ═══════════════════════════════════════════════════════════════════════════

    bookmark: Mapped["Bookmark"] = relationship(
        "Bookmark",
        back_populates="tag_links",
    )

    tag: Mapped["Tag"] = relationship(
        "Tag",
        back_populates="bookmark_links",
    )

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<BookmarkTag(bookmark_id={self.bookmark_id}, tag_id={self.tag_id})>"
