"""
Authentication Service

Business logic for registration, login and the acting user's own profile.

Service Pattern:
================
Services encapsulate business logic and coordinate between:
- Repositories (data access)
- Security utilities (hashing, tokens)
- Domain logic

Usage:
======
    from snipshare.shared.services.auth_service import AuthService

    service = AuthService(db)
    user, token = await service.register_user("ada", "ada@example.com", "secret1")
"""

from datetime import timedelta
from typing import Optional, Tuple

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from snipshare.config.settings import settings
from snipshare.shared.core.exceptions import AuthenticationError, DuplicateResourceError
from snipshare.shared.core.logging import get_logger
from snipshare.shared.models.user import User
from snipshare.shared.repositories.user_repository import UserRepository
from snipshare.shared.utils.security import SecurityUtils

logger = get_logger(__name__)


class AuthService:
    """
    Service for authentication-related business logic.

    Handles:
    - User registration with username/email/password
    - User authentication (login by email)
    - JWT token generation
    - Profile (avatar, bio) updates

    Attributes:
        session: Database session
        repo: UserRepository instance
    """

    def __init__(self, session: AsyncSession) -> None:
        """
        Initialize AuthService.

        Args:
            session: Async database session
        """
        self.session = session
        self.repo = UserRepository(session)

    @staticmethod
    def issue_token(user: User) -> str:
        """Signed bearer token identifying `user`."""
        return SecurityUtils.create_access_token(
            data={"user_id": str(user.id), "username": user.username},
            secret_key=settings.SECRET_KEY,
            expires_delta=timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES),
            algorithm=settings.JWT_ALGORITHM,
        )

    async def register_user(
        self,
        username: str,
        email: str,
        password: str,
    ) -> Tuple[User, str]:
        """
        Register a new user.

        Args:
            username: Unique handle (already validated)
            email: Email address (already lowercased)
            password: Plain text password (will be hashed)

        Returns:
            Tuple of (user, access_token)

        Raises:
            DuplicateResourceError: If the email or username is taken
        """
        if await self.repo.email_exists(email):
            raise DuplicateResourceError("Email already registered", details={"field": "email"})
        if await self.repo.username_exists(username):
            raise DuplicateResourceError("Username already taken", details={"field": "username"})

        try:
            user = await self.repo.create(
                username=username,
                email=email.lower(),
                password_hash=SecurityUtils.hash_password(password),
            )
        except IntegrityError as e:
            # A concurrent registration claimed the email or username first
            logger.warning("Registration lost unique constraint race", username=username)
            raise DuplicateResourceError("Email or username already taken") from e

        logger.info("User registered", user_id=str(user.id), username=user.username)

        return user, self.issue_token(user)

    async def login_user(
        self,
        email: str,
        password: str,
    ) -> Tuple[User, str]:
        """
        Authenticate user and generate token.

        Returns:
            Tuple of (user, access_token)

        Raises:
            AuthenticationError: If credentials are invalid
        """
        user = await self.repo.get_by_email(email)
        if not user:
            raise AuthenticationError("Invalid email or password")

        if not SecurityUtils.verify_password(password, user.password_hash):
            raise AuthenticationError("Invalid email or password")

        logger.info("User logged in", user_id=str(user.id))
        return user, self.issue_token(user)

    async def update_profile(
        self,
        user: User,
        avatar: Optional[str] = None,
        bio: Optional[str] = None,
    ) -> User:
        """Update avatar and/or bio. None leaves a field unchanged."""
        updated = await self.repo.update(user.id, avatar=avatar, bio=bio)
        logger.info("Profile updated", user_id=str(user.id))
        return updated or user
