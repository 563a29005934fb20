"""
Repository Pattern Implementations

This module provides the Repository pattern for database operations.
Repositories encapsulate database queries and provide a clean API for data access.

Repository Hierarchy:
=====================
    BaseRepository[ModelType]       ← Generic CRUD operations
         │
         ├── UserRepository         ← Credential store (lookup by email)
         ├── BookmarkRepository     ← Owner-scoped bookmarks, public feed, tag links
         ├── TagRepository          ← Upsert-by-name
         └── LikeRepository         ← Likes with DB-enforced uniqueness

Usage Example:
==============
    from cinefeel.shared.repositories import BookmarkRepository, TagRepository

    async def retag(db: AsyncSession, bookmark_id: int, names: list[str]):
        tags = await TagRepository(db).upsert_many(names)
        await BookmarkRepository(db).replace_tags(bookmark_id, [t.id for t in tags])
"""

from cinefeel.shared.repositories.base import BaseRepository, conflict_insert
from cinefeel.shared.repositories.user_repository import UserRepository
from cinefeel.shared.repositories.bookmark_repository import BookmarkRepository
from cinefeel.shared.repositories.tag_repository import TagRepository
from cinefeel.shared.repositories.like_repository import LikeRepository

__all__ = [
    # Base class
    "BaseRepository",
    "conflict_insert",
    # Entity-specific repositories
    "UserRepository",
    "BookmarkRepository",
    "TagRepository",
    "LikeRepository",
]
