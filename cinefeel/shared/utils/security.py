"""
Security Utilities

Password hashing and JWT token management.

Password Hashing:
=================
Uses bcrypt (via passlib) with automatic salt generation. The work factor is
configurable; the application uses BCRYPT_ROUNDS (default 10).

JWT Tokens:
===========
Uses PyJWT for JSON Web Token creation and validation (HS256).
Decoding never raises: any invalid token yields None, so callers cannot
tell an expired token from a tampered one.

Usage:
======
    from cinefeel.shared.utils.security import SecurityUtils

    # Hash password
    hashed = SecurityUtils.hash_password("password123")

    # Verify password
    if SecurityUtils.verify_password("password123", hashed):
        print("Password matches!")

    # Create JWT
    token = SecurityUtils.create_access_token(
        data={"user_id": 123},
        secret_key="secret",
        expires_delta=timedelta(days=7)
    )

    # Decode JWT (None if invalid)
    payload = SecurityUtils.decode_access_token(token, "secret")
"""

from datetime import datetime, timedelta, timezone
from functools import lru_cache
from typing import Optional

import jwt
from passlib.context import CryptContext


DEFAULT_BCRYPT_ROUNDS = 10


@lru_cache
def get_password_context(rounds: int = DEFAULT_BCRYPT_ROUNDS) -> CryptContext:
    """Password hashing context for a bcrypt work factor (cached per value)."""
    return CryptContext(
        schemes=["bcrypt"],
        deprecated="auto",
        bcrypt__rounds=rounds,
    )


class SecurityUtils:
    """
    Security utilities for authentication.

    Provides:
    - Password hashing with bcrypt
    - JWT token creation and validation
    """

    # ═══════════════════════════════════════════════════════════════════════════
    # PASSWORD HASHING
    # ═══════════════════════════════════════════════════════════════════════════

    @staticmethod
    def hash_password(password: str, rounds: int = DEFAULT_BCRYPT_ROUNDS) -> str:
        """
        Hash password using bcrypt.

        Bcrypt automatically:
        - Generates a random salt
        - Uses the given work factor
        - Produces a hash that includes the salt

        Args:
            password: Plain text password
            rounds: bcrypt cost factor (log2 of iterations)

        Returns:
            Bcrypt hash string (includes salt)
        """
        return get_password_context(rounds).hash(password)

    @staticmethod
    def verify_password(plain_password: str, hashed_password: str) -> bool:
        """
        Verify password against bcrypt hash.

        The cost factor is read from the hash itself, so hashes created with
        any work factor verify.

        Args:
            plain_password: Plain text password to verify
            hashed_password: Bcrypt hash to verify against

        Returns:
            True if password matches, False otherwise (including a malformed hash)
        """
        try:
            return get_password_context().verify(plain_password, hashed_password)
        except (ValueError, TypeError):
            # Unrecognized or corrupt hash
            return False

    # ═══════════════════════════════════════════════════════════════════════════
    # JWT TOKENS
    # ═══════════════════════════════════════════════════════════════════════════

    @staticmethod
    def create_access_token(
        data: dict,
        secret_key: str,
        expires_delta: Optional[timedelta] = None,
        algorithm: str = "HS256",
    ) -> str:
        """
        Create JWT access token.

        Args:
            data: Payload data to encode (e.g., user_id)
            secret_key: Secret key for signing
            expires_delta: Token expiration time (default: 7 days)
            algorithm: JWT algorithm (default: HS256)

        Returns:
            Encoded JWT token string
        """
        to_encode = data.copy()

        now = datetime.now(timezone.utc)
        expire = now + (expires_delta if expires_delta is not None else timedelta(days=7))

        # Add standard JWT claims
        to_encode.update({
            "exp": expire,
            "iat": now,
        })

        return jwt.encode(to_encode, secret_key, algorithm=algorithm)

    @staticmethod
    def decode_access_token(
        token: str,
        secret_key: str,
        algorithm: str = "HS256",
    ) -> Optional[dict]:
        """
        Decode and verify JWT token.

        Checks the signature, the algorithm and the exp claim (which must be
        present).

        Args:
            token: JWT token string
            secret_key: Secret key used for signing
            algorithm: JWT algorithm (default: HS256)

        Returns:
            Decoded token payload, or None if the token is invalid for any reason

        Example:
            payload = SecurityUtils.decode_access_token(token, settings.JWT_SECRET)
            if payload is None:
                raise AuthenticationError()
        """
        try:
            return jwt.decode(
                token,
                secret_key,
                algorithms=[algorithm],
                options={"require": ["exp", "iat"]},
            )
        except jwt.PyJWTError:
            return None
