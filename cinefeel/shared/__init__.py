"""
Shared Module

Domain code used by the API:
- Models: SQLAlchemy ORM models
- Repositories: Data access layer
- Services: Business logic layer
- Schemas: Pydantic request/response models
- Core: Logging, exceptions
- Adapters: External service integrations (TMDB)

Package Structure:
==================
    shared/
    ├── core/           ← Logging, exceptions
    ├── db/             ← Database session management
    ├── models/         ← SQLAlchemy models
    ├── repositories/   ← Data access layer
    ├── services/       ← Business logic
    ├── schemas/        ← Pydantic schemas
    ├── adapters/       ← External services
    ├── migrations/     ← Alembic migrations
    └── utils/          ← Password hashing, JWT

Usage:
======
    from cinefeel.shared.models import User, Bookmark
    from cinefeel.shared.repositories import UserRepository
    from cinefeel.shared.services import AuthService
    from cinefeel.shared.schemas import RegisterRequest, AuthResponse
    from cinefeel.shared.core import logger, CineFeelException
"""
