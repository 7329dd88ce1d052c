"""
Authentication Dependencies

FastAPI dependencies that resolve the bearer credential to a User.

Dependency Hierarchy:
=====================
    get_token_payload()   ← Decode the JWT from the Authorization header
           │                (None when no header was sent)
           ▼
    get_optional_user()   ← User or None (anonymous)
           │
           ▼
    get_current_user()    ← User, or 401 when anonymous

A header that is present but invalid is always a 401, even on endpoints
where anonymous access is allowed.

Type Aliases:
=============
    CurrentUser   - Authenticated user (required)
    OptionalUser  - Authenticated user or None

Usage:
======
    from snipshare.api.dependencies.auth import CurrentUser, OptionalUser

    @router.get("/me")
    async def get_me(current_user: CurrentUser):
        return current_user

    @router.get("/snippets/{snippet_id}")
    async def get_snippet(snippet_id: UUID, viewer: OptionalUser):
        ...
"""

from typing import Annotated, Any, Optional
from uuid import UUID

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from snipshare.api.dependencies.database import DbSession
from snipshare.config.settings import settings
from snipshare.shared.core.exceptions import AuthenticationError
from snipshare.shared.core.logging import log_context
from snipshare.shared.models.user import User
from snipshare.shared.repositories.user_repository import UserRepository
from snipshare.shared.utils.security import SecurityUtils


# Missing credentials are handled below so optional-auth endpoints work
security = HTTPBearer(auto_error=False)


async def get_token_payload(
    credentials: Annotated[Optional[HTTPAuthorizationCredentials], Depends(security)] = None,
) -> Optional[dict[str, Any]]:
    """
    Decode the bearer token, if any.

    Returns:
        Decoded claims, or None when no Authorization header was sent

    Raises:
        AuthenticationError: If a token was sent but is invalid or expired
    """
    if credentials is None:
        return None

    try:
        return SecurityUtils.decode_access_token(
            credentials.credentials,
            settings.SECRET_KEY,
            algorithm=settings.JWT_ALGORITHM,
        )
    except ValueError as e:
        raise AuthenticationError(str(e)) from e


async def get_optional_user(
    db: DbSession,
    payload: Annotated[Optional[dict[str, Any]], Depends(get_token_payload)],
) -> Optional[User]:
    """
    Resolve the token to a User, or None for anonymous callers.

    Raises:
        AuthenticationError: Token payload is malformed or the user is gone
    """
    if payload is None:
        return None

    try:
        user_id = UUID(str(payload.get("user_id")))
    except ValueError as e:
        raise AuthenticationError("Invalid token payload") from e

    user = await UserRepository(db).get(user_id)
    if user is None:
        raise AuthenticationError("User no longer exists")

    log_context(user_id=str(user.id))
    return user


async def get_current_user(
    user: Annotated[Optional[User], Depends(get_optional_user)],
) -> User:
    """
    Require an authenticated user.

    Raises:
        AuthenticationError: If no bearer token was sent
    """
    if user is None:
        raise AuthenticationError("Authorization header required")
    return user


# ═══════════════════════════════════════════════════════════════════════════════
# TYPE ALIASES
# ═══════════════════════════════════════════════════════════════════════════════

CurrentUser = Annotated[User, Depends(get_current_user)]
OptionalUser = Annotated[Optional[User], Depends(get_optional_user)]
