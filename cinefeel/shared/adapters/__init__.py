"""
Adapters Package

External service integrations.

Contents:
=========
- tmdb_adapter: The Movie Database (TMDB) v3 API client

Note: Database access is handled by shared/db/session.py using async SQLAlchemy.

Usage:
======
    from cinefeel.shared.adapters.tmdb_adapter import TMDBAdapter
"""

from cinefeel.shared.adapters.tmdb_adapter import TMDBAdapter

__all__ = ["TMDBAdapter"]
