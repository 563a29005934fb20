"""
Business Logic Services

Services encapsulate business logic and coordinate between repositories,
external services, and domain rules.

Service Pattern:
================
    Handler → Service → Repository → Database
                ↘ External APIs (TMDB)

Services should:
- Contain business logic and validation
- Coordinate multiple repositories if needed
- Handle transactions (via session)
- NOT handle HTTP concerns (that's for handlers)

Available Services:
===================
- AuthService: Registration, login, session tokens
- BookmarkService: Bookmarks, the atomic update, the public feed
- LikeService: Likes on bookmarks
- MovieService: TMDB catalog lookups

Usage:
======
    from cinefeel.shared.services import AuthService, BookmarkService

    service = AuthService(db)
    user, token = await service.register_user(email, password, nickname)
"""

from cinefeel.shared.services.auth_service import AuthService
from cinefeel.shared.services.bookmark_service import BookmarkService
from cinefeel.shared.services.like_service import LikeService
from cinefeel.shared.services.movie_service import MovieService

__all__ = [
    "AuthService",
    "BookmarkService",
    "LikeService",
    "MovieService",
]
