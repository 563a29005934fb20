"""
Configuration Module

Application configuration loaded from environment variables.

Usage:
======
    from cinefeel.config import get_settings

    settings = get_settings()
    db_url = settings.DATABASE_URL
    is_prod = settings.is_production
"""

from cinefeel.config.settings import get_settings, Settings

__all__ = [
    "get_settings",
    "Settings",
]
