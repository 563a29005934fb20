"""
User Repository

Lookups against the credential store. Emails are unique at the database
level; email_exists() only gives registration a friendly early answer,
the unique index still decides under concurrency.
"""

from typing import Optional

from sqlalchemy import exists, select
from sqlalchemy.ext.asyncio import AsyncSession

from cinefeel.shared.models.user import User
from cinefeel.shared.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    """Repository for User database operations."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(User, session)

    async def get_by_email(self, email: str) -> Optional[User]:
        """
        Find the account registered under an email address (exact match).

        SQL Generated:
            SELECT * FROM users WHERE email = 'user@example.com'
        """
        result = await self.session.execute(select(User).where(User.email == email))
        return result.scalar_one_or_none()

    async def email_exists(self, email: str) -> bool:
        """
        Whether an account already uses this email.

        SQL Generated:
            SELECT EXISTS (SELECT * FROM users WHERE email = 'user@example.com')
        """
        result = await self.session.execute(select(exists().where(User.email == email)))
        return bool(result.scalar())
