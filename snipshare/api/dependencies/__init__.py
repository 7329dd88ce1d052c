"""
API Dependencies

FastAPI dependencies for injection into route handlers.

Dependencies:
=============
- Database: get_db(), DbSession
- Authentication: get_current_user(), get_optional_user(), CurrentUser, OptionalUser
- Pagination: get_pagination()
- Services: get_*_service() functions, get_view_recorder()

Type Aliases:
=============
Type aliases provide cleaner route signatures:

    # Instead of this:
    async def handler(
        db: AsyncSession = Depends(get_db),
        user: User = Depends(get_current_user)
    ):

    # Write this:
    async def handler(db: DbSession, user: CurrentUser):

Usage:
======
    from snipshare.api.dependencies import CurrentUser

    @router.get("/snippets/my")
    async def my_snippets(user: CurrentUser, service: SnippetService = Depends(get_snippet_service)):
        return await service.list_for_author(user.id, SnippetFilters())
"""

from snipshare.api.dependencies.database import (
    get_db,
    DbSession,
)
from snipshare.api.dependencies.auth import (
    get_token_payload,
    get_optional_user,
    get_current_user,
    CurrentUser,
    OptionalUser,
)
from snipshare.api.dependencies.pagination import get_pagination
from snipshare.api.dependencies.services import (
    get_auth_service,
    get_snippet_service,
    get_user_service,
    get_view_recorder,
    ViewRecorder,
)

__all__ = [
    # Database
    "get_db",
    "DbSession",
    # Authentication
    "get_token_payload",
    "get_optional_user",
    "get_current_user",
    "CurrentUser",
    "OptionalUser",
    # Pagination
    "get_pagination",
    # Services
    "get_auth_service",
    "get_snippet_service",
    "get_user_service",
    "get_view_recorder",
    "ViewRecorder",
]
