"""
Security Utilities

Password hashing and bearer token management.

Password Hashing:
=================
bcrypt via passlib. Only the hash is ever stored; it embeds its own salt.

Bearer Tokens:
==============
HS256 JWTs via PyJWT. The payload carries the user's id (``user_id``) and
username; ``exp``/``iat`` are added on creation and verified on decode.

Usage:
======
    from snipshare.shared.utils.security import SecurityUtils

    hashed = SecurityUtils.hash_password("hunter22")
    SecurityUtils.verify_password("hunter22", hashed)  # True

    token = SecurityUtils.create_access_token(
        data={"user_id": str(user.id), "username": user.username},
        secret_key=settings.SECRET_KEY,
        expires_delta=timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES),
    )
    payload = SecurityUtils.decode_access_token(token, settings.SECRET_KEY)
"""

from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt
from passlib.context import CryptContext


pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
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
    def hash_password(password: str) -> str:
        """Hash a plain text password with bcrypt."""
        return pwd_context.hash(password)

    @staticmethod
    def verify_password(plain_password: str, hashed_password: str) -> bool:
        """Check a plain text password against a stored bcrypt hash."""
        return pwd_context.verify(plain_password, hashed_password)

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
        Create a signed access token.

        Args:
            data: Claims to encode (``user_id``, ``username``)
            secret_key: Signing key
            expires_delta: Lifetime of the token (default: 7 days)
            algorithm: JWT algorithm (default: HS256)

        Returns:
            Encoded JWT string
        """
        to_encode = data.copy()
        now = datetime.now(timezone.utc)
        to_encode.update({
            "exp": now + (expires_delta or timedelta(days=7)),
            "iat": now,
        })
        return jwt.encode(to_encode, secret_key, algorithm=algorithm)

    @staticmethod
    def decode_access_token(
        token: str,
        secret_key: str,
        algorithm: str = "HS256",
    ) -> dict:
        """
        Decode and verify a token.

        Raises:
            ValueError: If the token is expired, tampered with or malformed
        """
        try:
            return jwt.decode(
                token,
                secret_key,
                algorithms=[algorithm],
            )
        except jwt.ExpiredSignatureError:
            raise ValueError("Token has expired")
        except jwt.InvalidTokenError as e:
            raise ValueError(f"Invalid token: {str(e)}")
