"""
Authentication Service

Business logic for user registration, login and session tokens.

Service Pattern:
================
Services encapsulate business logic and coordinate between:
- Repositories (data access)
- Security utilities (hashing, JWT)
- Domain logic

Session Tokens:
===============
A session token is a signed JWT carrying {"user_id": <int>, "iat", "exp"}.
It is never stored server-side; possession of a valid, unexpired token is
the whole session.

Usage:
======
    from cinefeel.shared.services.auth_service import AuthService

    service = AuthService(db, settings)
    user, token = await service.register_user(email, password, nickname)
    claims = service.verify_token(token)  # {"user_id": 42} or None
"""

from datetime import timedelta
from typing import Optional, Tuple

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from cinefeel.config.settings import Settings, get_settings
from cinefeel.shared.core.exceptions import (
    DuplicateResourceError,
    InvalidCredentialsError,
    UserNotFoundError,
)
from cinefeel.shared.core.logging import get_logger
from cinefeel.shared.models.user import User
from cinefeel.shared.repositories.user_repository import UserRepository
from cinefeel.shared.utils.security import SecurityUtils


logger = get_logger(__name__)


def issue_token(user_id: int, settings: Settings) -> str:
    """
    Issue a session token for a user.

    Args:
        user_id: Numeric user id embedded in the token
        settings: Supplies the signing key, algorithm and lifetime

    Returns:
        Signed JWT valid for ACCESS_TOKEN_EXPIRE_DAYS
    """
    return SecurityUtils.create_access_token(
        data={"user_id": user_id},
        secret_key=settings.JWT_SECRET,
        expires_delta=timedelta(days=settings.ACCESS_TOKEN_EXPIRE_DAYS),
        algorithm=settings.JWT_ALGORITHM,
    )


def verify_token(token: Optional[str], settings: Settings) -> Optional[dict]:
    """
    Verify a session token without touching the database.

    Args:
        token: Raw token string from the session cookie
        settings: Supplies the signing key and algorithm

    Returns:
        {"user_id": int} if the token is authentic and unexpired, None otherwise
    """
    if not token:
        return None

    payload = SecurityUtils.decode_access_token(
        token,
        settings.JWT_SECRET,
        algorithm=settings.JWT_ALGORITHM,
    )
    if payload is None:
        return None

    user_id = payload.get("user_id")
    # bool is an int subclass; a token claiming user_id=true is not ours
    if not isinstance(user_id, int) or isinstance(user_id, bool):
        return None

    return {"user_id": user_id}


class AuthService:
    """
    Service for authentication-related business logic.

    Handles:
    - User registration with email/password/nickname
    - User authentication (login)
    - Session token issuing and verification

    Attributes:
        session: Database session
        settings: Application settings (signing key, work factor, expiry)
        repo: UserRepository instance
    """

    def __init__(self, session: AsyncSession, settings: Optional[Settings] = None) -> None:
        """
        Initialize AuthService.

        Args:
            session: Async database session
            settings: Settings to use; defaults to the cached application settings
        """
        self.session = session
        self.settings = settings or get_settings()
        self.repo = UserRepository(session)

    # ═══════════════════════════════════════════════════════════════════════════
    # PASSWORDS
    # ═══════════════════════════════════════════════════════════════════════════

    def hash_password(self, password: str) -> str:
        return SecurityUtils.hash_password(password, rounds=self.settings.BCRYPT_ROUNDS)

    def verify_password(self, password: str, password_hash: str) -> bool:
        return SecurityUtils.verify_password(password, password_hash)

    # ═══════════════════════════════════════════════════════════════════════════
    # SESSION TOKENS
    # ═══════════════════════════════════════════════════════════════════════════

    def issue_token(self, user_id: int) -> str:
        return issue_token(user_id, self.settings)

    def verify_token(self, token: Optional[str]) -> Optional[dict]:
        return verify_token(token, self.settings)

    # ═══════════════════════════════════════════════════════════════════════════
    # ACCOUNTS
    # ═══════════════════════════════════════════════════════════════════════════

    async def register_user(
        self,
        email: str,
        password: str,
        nickname: str,
    ) -> Tuple[User, str]:
        """
        Register a new user.

        Creates a new user account and issues a session token.

        Args:
            email: User's email address
            password: Plain text password (will be hashed)
            nickname: Display name

        Returns:
            Tuple of (user, session_token)

        Raises:
            DuplicateResourceError: If email already registered
        """
        if await self.repo.email_exists(email):
            raise DuplicateResourceError("Email already registered")

        try:
            user = await self.repo.create(
                email=email,
                password_hash=self.hash_password(password),
                nickname=nickname,
            )
        except IntegrityError:
            # Lost a race with a concurrent registration for the same email
            await self.session.rollback()
            raise DuplicateResourceError("Email already registered")

        logger.info("User registered", user_id=user.id)
        return user, self.issue_token(user.id)

    async def login_user(
        self,
        email: str,
        password: str,
    ) -> Tuple[User, str]:
        """
        Authenticate user and issue a session token.

        Args:
            email: User's email address
            password: Plain text password

        Returns:
            Tuple of (user, session_token)

        Raises:
            InvalidCredentialsError: Unknown email or wrong password (same message)
        """
        user = await self.repo.get_by_email(email)
        if not user or not self.verify_password(password, user.password_hash):
            logger.info("Login rejected")
            raise InvalidCredentialsError()

        logger.info("User logged in", user_id=user.id)
        return user, self.issue_token(user.id)

    async def get_user(self, user_id: int) -> User:
        """
        Get the user a session belongs to.

        Raises:
            UserNotFoundError: If the user no longer exists
        """
        user = await self.repo.get(user_id)
        if not user:
            raise UserNotFoundError(user_id)
        return user
