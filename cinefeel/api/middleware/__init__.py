"""
API Middleware

Custom middleware for the FastAPI application.

Components:
===========
- error_handler: Global exception handling
- session: Session cookie parsing/setting and per-request log context

Usage:
======
    from cinefeel.api.middleware import setup_exception_handlers, RequestContextMiddleware

    app = FastAPI()
    setup_exception_handlers(app)
    app.add_middleware(RequestContextMiddleware)
"""

from cinefeel.api.middleware.error_handler import setup_exception_handlers
from cinefeel.api.middleware.session import (
    RequestContextMiddleware,
    clear_session_cookie,
    extract_session_token,
    set_session_cookie,
)

__all__ = [
    "setup_exception_handlers",
    "RequestContextMiddleware",
    "clear_session_cookie",
    "extract_session_token",
    "set_session_cookie",
]
