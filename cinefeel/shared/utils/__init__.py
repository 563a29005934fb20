"""
Utilities Package

Common utility functions and helpers.

Contents:
=========
- security: Password hashing and JWT management

Usage:
======
    from cinefeel.shared.utils.security import SecurityUtils
"""

from cinefeel.shared.utils.security import SecurityUtils, get_password_context

__all__ = [
    "SecurityUtils",
    "get_password_context",
]
