"""
Settings Dependency

Exposes the application settings to handlers and dependencies so tests can
swap them (for example to run with APP_ENV=production) via
app.dependency_overrides[get_app_settings].
"""

from typing import Annotated

from fastapi import Depends

from cinefeel.config.settings import Settings, get_settings


def get_app_settings() -> Settings:
    return get_settings()


AppSettings = Annotated[Settings, Depends(get_app_settings)]
