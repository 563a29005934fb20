"""
User Entity Model

Represents a registered application user.

Model Hierarchy:
================
    User
       ├── bookmarks (Bookmark[]) - Movies the user bookmarked
       └── likes (Like[])         - Likes the user gave to public bookmarks

SAMPLE USER RECORD:
┌──────────────────────────────────────────────────────────────────────────────┐
│ id               │ 42                                                        │
│ email            │ "user@example.com"                                        │
│ password_hash    │ "$2b$10$..."                                              │
│ nickname         │ "moviebuff"                                               │
│ created_at       │ 2024-01-01T00:00:00Z                                      │
└──────────────────────────────────────────────────────────────────────────────┘
"""

from typing import TYPE_CHECKING

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from cinefeel.shared.models.base import Base, TimestampMixin


if TYPE_CHECKING:
    from cinefeel.shared.models.bookmark import Bookmark
    from cinefeel.shared.models.like import Like


class User(Base, TimestampMixin):
    """
    User model representing a registered application user.

    Attributes:
        id: Numeric identifier (also the session token subject)
        email: User's email address (unique, indexed)
        password_hash: Bcrypt hashed password, never the plaintext
        nickname: Display name shown on public bookmarks

    Relationships:
        bookmarks: All bookmarks owned by this user
        likes: All likes given by this user
    """

    __tablename__ = "users"

    # ═══════════════════════════════════════════════════════════════════════════
    # PRIMARY KEY
    # ═══════════════════════════════════════════════════════════════════════════

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # AUTHENTICATION
    # ═══════════════════════════════════════════════════════════════════════════

    # Email address - used for login
    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        nullable=False,
        index=True,
    )

    # Bcrypt hashed password
    password_hash: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # PROFILE
    # ═══════════════════════════════════════════════════════════════════════════

    nickname: Mapped[str] = mapped_column(
        String(50),
        nullable=False,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # RELATIONSHIPS
    # ═══════════════════════════════════════════════════════════════════════════

    bookmarks: Mapped[list["Bookmark"]] = relationship(
        "Bookmark",
        back_populates="user",
        cascade="all, delete-orphan",
    )

    likes: Mapped[list["Like"]] = relationship(
        "Like",
        back_populates="user",
        cascade="all, delete-orphan",
    )

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<User(id={self.id}, email={self.email})>"
