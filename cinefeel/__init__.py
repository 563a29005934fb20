"""
CineFeel Backend

Movie bookmarking with notes, tags, public sharing and likes.

Package Structure:
==================
    cinefeel/
    ├── api/        ← FastAPI application
    ├── shared/     ← Shared code (models, services, etc.)
    └── config/     ← Configuration

Running the Application:
========================
    # API Server
    uvicorn cinefeel.api.main:app --reload

    # Migrations
    alembic upgrade head
"""

__version__ = "1.0.0"
