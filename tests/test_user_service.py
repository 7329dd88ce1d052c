"""
UserService Unit Tests
"""

from unittest.mock import AsyncMock
from uuid import uuid4

import pytest

from snipshare.shared.core.exceptions import (
    AuthorizationError,
    UserNotFoundError,
    ValidationError,
)
from snipshare.shared.models.enums import ProgrammingLanguage
from snipshare.shared.services.user_service import UserService
from tests.factories import make_snippet


TOTALS = {
    "total_snippets": 5,
    "public_snippets": 3,
    "total_views": 40,
    "total_likes": 6,
    "total_forks": 2,
}


@pytest.fixture
def service(mock_db_session):
    user_service = UserService(mock_db_session)
    user_service.user_repo = AsyncMock()
    user_service.snippet_repo = AsyncMock()
    user_service.snippet_repo.list_page.return_value = []
    user_service.snippet_repo.count_matching.return_value = 0
    user_service.snippet_repo.author_totals.return_value = dict(TOTALS)
    return user_service


class TestProfile:

    @pytest.mark.asyncio
    async def test_unknown_username(self, service):
        service.user_repo.get_by_username.return_value = None
        with pytest.raises(UserNotFoundError):
            await service.get_profile("nobody")

    @pytest.mark.asyncio
    async def test_lists_public_snippets_of_user(self, service, author):
        snippet = make_snippet(author)
        service.user_repo.get_by_username.return_value = author
        service.snippet_repo.list_page.return_value = [snippet]
        service.snippet_repo.count_matching.return_value = 1

        profile = await service.get_profile("ada", page=1, limit=10)

        filters = service.snippet_repo.list_page.await_args.args[0]
        assert filters.author_id == author.id
        assert filters.is_public is True
        assert profile.user is author
        assert profile.snippets.items == [snippet]
        assert profile.stats == {
            "total_snippets": 5,
            "public_snippets": 3,
            "total_views": 40,
            "total_likes": 6,
        }


class TestSearch:

    @pytest.mark.asyncio
    @pytest.mark.parametrize("query", ["", "a", "  a  "])
    async def test_short_query_is_rejected(self, service, query):
        with pytest.raises(ValidationError):
            await service.search_users(query)
        service.user_repo.search_by_username.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_query_is_trimmed(self, service, author):
        service.user_repo.search_by_username.return_value = [author]

        users = await service.search_users("  ad ", limit=5)

        assert users == [author]
        service.user_repo.search_by_username.assert_awaited_once_with("ad", limit=5)


class TestStats:

    @pytest.mark.asyncio
    async def test_other_users_stats_are_forbidden(self, service, author, other_user):
        with pytest.raises(AuthorizationError):
            await service.get_stats(author.id, acting_user_id=other_user.id)
        service.snippet_repo.author_totals.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_own_stats(self, service, author):
        service.snippet_repo.author_counts_by.side_effect = [
            [(ProgrammingLanguage.PYTHON, 3), (ProgrammingLanguage.GO, 2)],
            [("uncategorized", 4), ("forks", 1)],
        ]

        stats = await service.get_stats(author.id, acting_user_id=author.id)

        assert stats.overall["private_snippets"] == 2
        assert stats.overall["total_forks"] == 2
        assert stats.languages[0] == (ProgrammingLanguage.PYTHON, 3)
        assert stats.collections == [("uncategorized", 4), ("forks", 1)]
        grouped_by = [call.args[1] for call in service.snippet_repo.author_counts_by.await_args_list]
        assert grouped_by == ["language", "snippet_collection"]

    @pytest.mark.asyncio
    async def test_user_without_snippets(self, service):
        user_id = uuid4()
        service.snippet_repo.author_totals.return_value = {key: 0 for key in TOTALS}
        service.snippet_repo.author_counts_by.return_value = []

        stats = await service.get_stats(user_id, acting_user_id=user_id)

        assert stats.overall["private_snippets"] == 0
        assert stats.languages == []


class TestLikedSnippets:

    @pytest.mark.asyncio
    async def test_filters_on_likes_and_public(self, service, author):
        await service.liked_snippets(author.id, page=2, limit=5)

        filters = service.snippet_repo.list_page.await_args.args[0]
        assert filters.liked_by == author.id
        assert filters.is_public is True
        assert service.snippet_repo.list_page.await_args.kwargs["offset"] == 5
