"""
API Module

FastAPI application and route handlers.

Package Structure:
==================
    api/
    ├── main.py           ← Application entry point
    ├── routes.py         ← Route registration
    ├── dependencies/     ← FastAPI dependencies (db, settings, session auth, services)
    ├── handlers/         ← Route handlers
    └── middleware/       ← Error handlers, session cookie, request context

Usage:
======
    # Run the API
    uvicorn cinefeel.api.main:app --reload

    # Import the app
    from cinefeel.api.main import app, create_application
"""
