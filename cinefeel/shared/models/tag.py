"""
Tag Entity Model

A tag name shared by all users. Tags are created lazily the first time a
bookmark uses the name (upsert keyed on the unique name).

SAMPLE TAG RECORD:
┌──────────────────────────────────────────────────────────────────────────────┐
│ id               │ 3                                                         │
│ name             │ "scifi"                                                   │
└──────────────────────────────────────────────────────────────────────────────┘
"""

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, Integer, String, text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from cinefeel.shared.models.base import Base


if TYPE_CHECKING:
    from cinefeel.shared.models.bookmark_tag import BookmarkTag


TAG_NAME_MAX_LENGTH = 100


class Tag(Base):
    """
    Tag model.

    Attributes:
        id: Numeric identifier
        name: Normalized tag name (trimmed, no leading '#', never empty)
    """

    __tablename__ = "tags"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )

    name: Mapped[str] = mapped_column(
        String(TAG_NAME_MAX_LENGTH),
        unique=True,
        nullable=False,
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=text("CURRENT_TIMESTAMP"),
        nullable=False,
    )

    bookmark_links: Mapped[list["BookmarkTag"]] = relationship(
        "BookmarkTag",
        back_populates="tag",
        cascade="all, delete-orphan",
    )

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<Tag(id={self.id}, name={self.name})>"
