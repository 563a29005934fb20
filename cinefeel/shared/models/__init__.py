"""
CineFeel SQLAlchemy Models

This package contains all database models for the CineFeel application.

Model Hierarchy:
================
    User
       ├── bookmarks (Bookmark[])
       │      ├── tag_links (BookmarkTag[]) ──► Tag
       │      └── likes (Like[])
       └── likes (Like[])

Models Overview:
================
- Base: Base class and timestamp mixin
- User: Registered application user
- Bookmark: A user's saved movie (unique per user and tmdb_id)
- Tag: Shared tag name (unique)
- BookmarkTag: Junction table for bookmarks and tags
- Like: A user's like on a bookmark (unique per user and bookmark)

Usage:
======
    from cinefeel.shared.models import User, Bookmark, Tag
"""

from cinefeel.shared.models.base import Base, TimestampMixin
from cinefeel.shared.models.user import User
from cinefeel.shared.models.bookmark import Bookmark
from cinefeel.shared.models.tag import Tag
from cinefeel.shared.models.bookmark_tag import BookmarkTag
from cinefeel.shared.models.like import Like

__all__ = [
    # Base classes and mixins
    "Base",
    "TimestampMixin",
    # Models
    "User",
    "Bookmark",
    "Tag",
    "BookmarkTag",
    "Like",
]
