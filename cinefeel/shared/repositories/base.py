"""
Base Repository

This module provides a generic base repository with common CRUD operations.
All entity-specific repositories inherit from this class.

What This Provides:
===================
- get(id)        → Fetch single record by primary key
- count()        → Count records with filtering
- create()       → Create new record
- delete()       → Hard delete record

Generic Type Pattern:
=====================
    class UserRepository(BaseRepository[User]):
        pass

    repo = UserRepository(db)
    user = await repo.get(user_id)  # Returns User, not Any

flush() vs commit():
====================
- flush(): Sends SQL to database but doesn't commit transaction
  - Changes are visible within the same session
  - Can be rolled back if error occurs later

- commit(): Permanently saves all changes
  - Called by get_db() after request handler completes
  - Repository methods use flush() to allow request-level transactions
"""

from typing import Any, Generic, Optional, Type, TypeVar

from sqlalchemy import select
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql.functions import count as sql_count

from cinefeel.shared.models.base import Base


# TypeVar bound to Base ensures we only work with SQLAlchemy models
ModelType = TypeVar("ModelType", bound=Base)


def conflict_insert(session: AsyncSession, model: Type[Base]) -> Any:
    """
    Return an INSERT construct that supports on_conflict_do_nothing().

    PostgreSQL and SQLite both implement INSERT ... ON CONFLICT DO NOTHING,
    which lets upserts rely on the unique constraint instead of a
    check-then-insert race.

    Raises:
        NotImplementedError: For dialects without ON CONFLICT support
    """
    dialect = session.get_bind().dialect.name
    if dialect == "postgresql":
        return postgresql.insert(model)
    if dialect == "sqlite":
        return sqlite.insert(model)
    raise NotImplementedError(f"ON CONFLICT inserts are not supported for {dialect}")


class BaseRepository(Generic[ModelType]):
    """
    Generic base repository providing common CRUD operations.

    Type Parameter:
        ModelType: The SQLAlchemy model class this repository manages

    Attributes:
        model: The SQLAlchemy model class
        session: The async database session
    """

    def __init__(self, model: Type[ModelType], session: AsyncSession) -> None:
        """
        Initialize the repository.

        Args:
            model: SQLAlchemy model class (e.g., User, Bookmark)
            session: Async database session from get_db()
        """
        self.model = model
        self.session = session

    # ═══════════════════════════════════════════════════════════════════════════
    # READ OPERATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def get(self, record_id: int) -> Optional[ModelType]:
        """
        Get a single record by its primary key.

        Args:
            record_id: The id of the record to fetch

        Returns:
            The model instance if found, None otherwise

        SQL Generated:
            SELECT * FROM users WHERE id = 42
        """
        result = await self.session.execute(select(self.model).where(self.model.id == record_id))
        return result.scalar_one_or_none()

    async def count(self, filters: Optional[dict[str, Any]] = None) -> int:
        """
        Count records with optional filtering.

        Args:
            filters: Dict of field=value for WHERE clauses

        Returns:
            Number of matching records

        SQL Generated:
            SELECT COUNT(*) FROM likes WHERE bookmark_id = 7
        """
        query = select(sql_count()).select_from(self.model)

        if filters:
            for field, value in filters.items():
                if hasattr(self.model, field):
                    query = query.where(getattr(self.model, field) == value)

        result = await self.session.execute(query)
        return result.scalar() or 0

    # ═══════════════════════════════════════════════════════════════════════════
    # CREATE OPERATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def create(self, **kwargs: Any) -> ModelType:
        """
        Create a new record.

        Creates a new instance of the model, adds it to the session,
        and flushes to get the generated ID and defaults.

        Args:
            **kwargs: Field values for the new record

        Returns:
            The created model instance with all DB-generated values

        Raises:
            sqlalchemy.exc.IntegrityError: If a unique/foreign key constraint fails
        """
        instance = self.model(**kwargs)

        self.session.add(instance)

        # Flush: send INSERT to database (but don't commit yet)
        await self.session.flush()

        # Refresh: load server defaults (id, created_at, ...)
        await self.session.refresh(instance)

        return instance

    # ═══════════════════════════════════════════════════════════════════════════
    # DELETE OPERATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def delete(self, record_id: int) -> bool:
        """
        Hard delete a record by ID.

        ORM cascades configured on the model (for example a bookmark's tag
        links and likes) are applied.

        Args:
            record_id: id of the record to delete

        Returns:
            True if deleted, False if not found
        """
        instance = await self.get(record_id)
        if not instance:
            return False

        await self.session.delete(instance)
        await self.session.flush()
        return True
