"""
Database Module

This module provides database connectivity and session management for CineFeel.

Architecture Overview:
======================
    FastAPI Route
        │
        │  Dependency Injection: get_db()
        ▼
    AsyncSession (one per request, commit on success, rollback on error)
        │
        │  Passed to Service → Repository
        ▼
    PostgreSQL (SQLite for local development and tests)

Usage in FastAPI:
=================
    from fastapi import Depends
    from cinefeel.shared.db import get_db
    from cinefeel.shared.repositories import UserRepository

    @app.get("/users/{user_id}")
    async def get_user(user_id: int, db: AsyncSession = Depends(get_db)):
        repo = UserRepository(db)
        return await repo.get(user_id)
"""

from cinefeel.shared.db.session import (
    get_db,
    init_db,
    close_db,
    engine_options,
    AsyncSessionLocal,
    engine,
)

__all__ = [
    "get_db",
    "init_db",
    "close_db",
    "engine_options",
    "AsyncSessionLocal",
    "engine",
]
