"""
User Service

Public profiles, the user directory, per-user statistics and the liked
snippets listing.

Usage:
======
    from snipshare.shared.services.user_service import UserService

    service = UserService(db)
    profile = await service.get_profile("ada", page=1, limit=10)
    stats = await service.get_stats(user_id, acting_user_id=current_user.id)
"""

from dataclasses import dataclass
from typing import Any
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from snipshare.shared.core.exceptions import (
    AuthorizationError,
    UserNotFoundError,
    ValidationError,
)
from snipshare.shared.models.enums import ProgrammingLanguage, SortField, SortOrder
from snipshare.shared.models.user import User
from snipshare.shared.repositories.snippet_repository import SnippetFilters, SnippetRepository
from snipshare.shared.repositories.user_repository import UserRepository
from snipshare.shared.services.snippet_service import SnippetPage

SEARCH_MIN_LENGTH = 2


@dataclass
class UserProfile:
    """A user with one page of their public snippets and headline stats."""

    user: User
    snippets: SnippetPage
    stats: dict[str, int]


@dataclass
class UserStats:
    """Full statistics over every snippet of one user."""

    overall: dict[str, int]
    languages: list[tuple[ProgrammingLanguage, int]]
    collections: list[tuple[str, int]]


class UserService:
    """
    Service for user-facing read operations.

    Attributes:
        session: Database session
        user_repo: UserRepository instance
        snippet_repo: SnippetRepository instance
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.user_repo = UserRepository(session)
        self.snippet_repo = SnippetRepository(session)

    async def _page(self, filters: SnippetFilters, page: int, limit: int) -> SnippetPage:
        items = await self.snippet_repo.list_page(
            filters,
            sort=SortField.CREATED_AT,
            order=SortOrder.DESC,
            offset=(page - 1) * limit,
            limit=limit,
        )
        total = await self.snippet_repo.count_matching(filters)
        return SnippetPage(items=items, total=total, page=page, limit=limit)

    async def get_profile(self, username: str, *, page: int = 1, limit: int = 10) -> UserProfile:
        """
        Public profile of `username`: newest public snippets first.

        Raises:
            UserNotFoundError: No user with that username
        """
        user = await self.user_repo.get_by_username(username)
        if user is None:
            raise UserNotFoundError(username)

        snippets = await self._page(
            SnippetFilters(author_id=user.id, is_public=True), page, limit
        )
        totals = await self.snippet_repo.author_totals(user.id)
        stats = {
            key: totals[key]
            for key in ("total_snippets", "public_snippets", "total_views", "total_likes")
        }
        return UserProfile(user=user, snippets=snippets, stats=stats)

    async def search_users(self, query: str, limit: int = 10) -> list[User]:
        """
        Case-insensitive username substring search.

        Raises:
            ValidationError: Query shorter than two characters after trimming
        """
        term = (query or "").strip()
        if len(term) < SEARCH_MIN_LENGTH:
            message = f"Search query must be at least {SEARCH_MIN_LENGTH} characters"
            raise ValidationError(message, errors=[{"field": "q", "message": message}])
        return await self.user_repo.search_by_username(term, limit=limit)

    async def get_stats(self, user_id: UUID, *, acting_user_id: UUID) -> UserStats:
        """
        Statistics over all of a user's snippets, public and private.

        Only the user themselves may read them.

        Raises:
            AuthorizationError: acting_user_id differs from user_id
        """
        if user_id != acting_user_id:
            raise AuthorizationError("You can only view your own statistics")

        overall: dict[str, Any] = await self.snippet_repo.author_totals(user_id)
        overall["private_snippets"] = overall["total_snippets"] - overall["public_snippets"]

        languages = await self.snippet_repo.author_counts_by(user_id, "language")
        collections = await self.snippet_repo.author_counts_by(user_id, "snippet_collection")
        return UserStats(overall=overall, languages=languages, collections=collections)

    async def liked_snippets(self, user_id: UUID, *, page: int = 1, limit: int = 10) -> SnippetPage:
        """Public snippets the user currently likes, newest first."""
        return await self._page(SnippetFilters(liked_by=user_id, is_public=True), page, limit)
