"""
API Dependencies

FastAPI dependencies for injection into route handlers.

Dependencies:
=============
- Database: get_db(), DbSession
- Settings: get_app_settings(), AppSettings
- Authentication: get_current_user_id(), CurrentUserId, OptionalUserId
- Services: get_*_service() functions

Type Aliases:
=============
Type aliases provide cleaner route signatures:

    # Instead of this:
    async def handler(
        db: AsyncSession = Depends(get_db),
        user_id: int = Depends(get_current_user_id)
    ):

    # Write this:
    async def handler(db: DbSession, user_id: CurrentUserId):
"""

from cinefeel.api.dependencies.database import (
    get_db,
    DbSession,
)
from cinefeel.api.dependencies.settings import (
    get_app_settings,
    AppSettings,
)
from cinefeel.api.dependencies.auth import (
    get_current_user_id,
    get_optional_user_id,
    CurrentUserId,
    OptionalUserId,
)

__all__ = [
    # Database
    "get_db",
    "DbSession",
    # Settings
    "get_app_settings",
    "AppSettings",
    # Authentication
    "get_current_user_id",
    "get_optional_user_id",
    "CurrentUserId",
    "OptionalUserId",
]
