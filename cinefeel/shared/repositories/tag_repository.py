"""
Tag Repository

Upsert-by-name for the shared tag table.
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from cinefeel.shared.models.tag import Tag
from cinefeel.shared.repositories.base import BaseRepository, conflict_insert


class TagRepository(BaseRepository[Tag]):
    """Repository for Tag database operations."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(Tag, session)

    async def get_by_names(self, names: list[str]) -> list[Tag]:
        """Fetch the tags whose name is in ``names`` (any order)."""
        if not names:
            return []
        result = await self.session.execute(select(Tag).where(Tag.name.in_(names)))
        return list(result.scalars().all())

    async def upsert_many(self, names: list[str]) -> list[Tag]:
        """
        Get or create a tag for each name.

        Issues one INSERT ... ON CONFLICT (name) DO NOTHING for all names,
        then selects them back, so a tag created concurrently by another
        request is reused rather than duplicated.

        Args:
            names: Distinct, already-normalized tag names

        Returns:
            Tags in the same order as ``names``

        SQL Generated:
            INSERT INTO tags (name) VALUES ('drama'), ('90s') ON CONFLICT (name) DO NOTHING
            SELECT * FROM tags WHERE name IN ('drama', '90s')
        """
        if not names:
            return []

        stmt = (
            conflict_insert(self.session, Tag)
            .values([{"name": name} for name in names])
            .on_conflict_do_nothing(index_elements=["name"])
        )
        await self.session.execute(stmt)

        by_name = {tag.name: tag for tag in await self.get_by_names(names)}
        return [by_name[name] for name in names]
