"""
Service Dependencies

FastAPI dependencies for service injection.

These dependencies create service instances with proper database session injection.
Services are created per-request, which is fine because:
- Services are stateless (only hold db session reference)
- Each request gets its own db session
- No shared state between requests

get_view_recorder() hands out the background view counter so tests can
replace it through app.dependency_overrides.

Usage:
======
    from snipshare.api.dependencies.services import get_snippet_service

    @router.post("/snippets")
    async def create_snippet(
        data: SnippetCreate,
        current_user: CurrentUser,
        service: SnippetService = Depends(get_snippet_service),
    ):
        return await service.create_snippet(current_user, data)
"""

from typing import Awaitable, Callable
from uuid import UUID

from snipshare.api.dependencies.database import DbSession
from snipshare.shared.services.auth_service import AuthService
from snipshare.shared.services.snippet_service import SnippetService, record_snippet_view
from snipshare.shared.services.user_service import UserService

ViewRecorder = Callable[[UUID], Awaitable[None]]


async def get_auth_service(db: DbSession) -> AuthService:
    """
    Dependency to get AuthService instance.

    Creates a new service instance per request with the request's db session.
    """
    return AuthService(db)


async def get_snippet_service(db: DbSession) -> SnippetService:
    """
    Dependency to get SnippetService instance.
    """
    return SnippetService(db)


async def get_user_service(db: DbSession) -> UserService:
    """
    Dependency to get UserService instance.
    """
    return UserService(db)


async def get_view_recorder() -> ViewRecorder:
    return record_snippet_view
