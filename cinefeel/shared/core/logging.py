"""
Logging Configuration

Structured logging setup using structlog for consistent, parseable logs.

Log Output:
===========
Development:
    2024-01-15 10:30:00 [info     ] Bookmark updated               user_id=42 tmdb_id=603

Production (JSON):
    {"timestamp": "2024-01-15T10:30:00", "level": "info", "event": "Bookmark updated", "user_id": 42}

Features:
=========
- Structured key-value logging
- Context variables (request_id, user_id added to all subsequent logs)
- Colored console output in development, JSON everywhere else
- Credentials (passwords, session tokens, API keys) are masked before rendering

Usage:
======
    from cinefeel.shared.core.logging import logger, get_logger, log_context

    logger.info("User registered", user_id=user.id)

    auth_logger = get_logger("auth")
    auth_logger.debug("Token rejected")

    log_context(request_id=request_id)
    logger.info("Processing request")  # Includes request_id
"""

import logging
import sys
from typing import Any

import structlog
from structlog.typing import Processor

from cinefeel.config.settings import get_settings


SENSITIVE_KEYS = frozenset({
    "password",
    "password_hash",
    "token",
    "cookie",
    "api_key",
    "jwt_secret",
})

REDACTED = "***"

# httpx logs full request URLs at INFO, and TMDB URLs carry the api_key
NOISY_LOGGERS = ("httpx", "httpcore")


def redact_secrets(_logger: Any, _method: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    """structlog processor: mask values whose key names a credential."""
    for key in event_dict:
        if key.lower() in SENSITIVE_KEYS:
            event_dict[key] = REDACTED
    return event_dict


def setup_logging() -> None:
    """
    Configure structured logging for the application.

    Sets up structlog with:
    - Development: Colored console output for readability
    - Otherwise: JSON output for log aggregation systems

    Called automatically when this module is imported.
    """
    settings = get_settings()

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, settings.LOG_LEVEL.upper()),
    )
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
        redact_secrets,
    ]

    if settings.is_development:
        processors: list[Processor] = shared_processors + [
            structlog.dev.ConsoleRenderer(colors=True),
        ]
    else:
        processors = shared_processors + [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """
    Get a structured logger instance.

    Args:
        name: Logger name, defaults to module name if not specified

    Returns:
        Configured structlog logger
    """
    return structlog.get_logger(name)


def log_context(**kwargs: Any) -> None:
    """
    Add context variables to all subsequent log calls.

    Context is stored in context variables and automatically included
    in all log messages until cleared or the request ends.

    Args:
        **kwargs: Key-value pairs to add to log context

    Example:
        log_context(request_id="abc-123", user_id=42)
        logger.info("Processing started")  # Includes request_id, user_id
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_log_context() -> None:
    """
    Clear all context variables.

    Called at the end of request processing so context does not
    leak into the next request handled by the same worker.
    """
    structlog.contextvars.clear_contextvars()


setup_logging()

logger = get_logger("cinefeel")
