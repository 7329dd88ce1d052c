"""
SnippetRepository SQL shape.

Statements are captured from the mocked session and compiled with the
PostgreSQL dialect, so filters, ordering and the atomic updates are
checked without a live database.
"""

from types import SimpleNamespace
from unittest.mock import MagicMock
from uuid import uuid4

import pytest
from sqlalchemy import select
from sqlalchemy.dialects import postgresql

from snipshare.shared.models.enums import ProgrammingLanguage, SortField, SortOrder
from snipshare.shared.models.snippet import Snippet
from snipshare.shared.repositories.snippet_repository import SnippetFilters, SnippetRepository


def compile_pg(statement):
    return statement.compile(dialect=postgresql.dialect())


def executed(session):
    """The last statement sent to the session, compiled."""
    return compile_pg(session.execute.await_args.args[0])


@pytest.fixture
def result():
    return MagicMock()


@pytest.fixture
def repo(mock_db_session, result):
    mock_db_session.execute.return_value = result
    return SnippetRepository(mock_db_session)


class TestFilters:

    def where_clause(self, filters: SnippetFilters) -> str:
        return str(compile_pg(select(Snippet.id).where(*filters.conditions())))

    def test_no_filters_means_no_constraints(self):
        assert SnippetFilters().conditions() == []

    def test_search_uses_full_text_index(self):
        sql = self.where_clause(SnippetFilters(search="debounce hook"))
        assert "snippets.search_vector @@ websearch_to_tsquery(" in sql

    def test_tags_match_any(self):
        sql = self.where_clause(SnippetFilters(tags=["react", "hooks"]))
        assert "snippets.tags &&" in sql

    def test_liked_by_checks_array_membership(self):
        user_id = uuid4()
        compiled = compile_pg(select(Snippet.id).where(*SnippetFilters(liked_by=user_id).conditions()))
        assert "= ANY (snippets.likes)" in str(compiled)
        assert user_id in compiled.params.values()

    def test_filters_are_anded(self):
        sql = self.where_clause(
            SnippetFilters(
                language=ProgrammingLanguage.GO,
                author_id=uuid4(),
                collection="utils",
                is_public=True,
            )
        )
        assert "snippets.language =" in sql
        assert "snippets.author_id =" in sql
        assert "snippets.snippet_collection =" in sql
        assert "snippets.is_public IS true" in sql
        assert sql.count(" AND ") == 3

    def test_private_only(self):
        sql = self.where_clause(SnippetFilters(is_public=False))
        assert "snippets.is_public IS false" in sql


class TestListing:

    @pytest.mark.asyncio
    async def test_default_order_is_newest_first(self, repo, result, mock_db_session):
        result.scalars.return_value.all.return_value = []

        await repo.list_page(SnippetFilters(is_public=True), offset=20, limit=10)

        compiled = executed(mock_db_session)
        assert "ORDER BY snippets.created_at DESC, snippets.id ASC" in str(compiled)
        assert 20 in compiled.params.values()
        assert 10 in compiled.params.values()

    @pytest.mark.asyncio
    async def test_likes_sort_breaks_ties_by_recency(self, repo, result, mock_db_session):
        result.scalars.return_value.all.return_value = []

        await repo.list_page(SnippetFilters(), sort=SortField.LIKES, order=SortOrder.DESC)

        sql = str(executed(mock_db_session))
        assert "ORDER BY cardinality(snippets.likes) DESC, snippets.created_at DESC, snippets.id ASC" in sql

    @pytest.mark.asyncio
    async def test_views_ascending(self, repo, result, mock_db_session):
        result.scalars.return_value.all.return_value = []

        await repo.list_page(SnippetFilters(), sort=SortField.VIEWS, order=SortOrder.ASC)

        sql = str(executed(mock_db_session))
        assert "ORDER BY snippets.views ASC, snippets.created_at DESC, snippets.id ASC" in sql

    @pytest.mark.asyncio
    async def test_listing_joins_author(self, repo, result, mock_db_session):
        result.scalars.return_value.all.return_value = []

        await repo.list_page(SnippetFilters())

        assert "JOIN users" in str(executed(mock_db_session))

    @pytest.mark.asyncio
    async def test_count_uses_same_filters(self, repo, result, mock_db_session):
        result.scalar.return_value = 4

        total = await repo.count_matching(SnippetFilters(tags=["react"]))

        sql = str(executed(mock_db_session))
        assert total == 4
        assert "count(*)" in sql
        assert "snippets.tags &&" in sql
        assert "ORDER BY" not in sql


class TestAtomicUpdates:

    @pytest.mark.asyncio
    async def test_increment_views(self, repo, result, mock_db_session):
        result.scalar_one_or_none.return_value = 8

        views = await repo.increment_views(uuid4())

        sql = str(executed(mock_db_session))
        assert views == 8
        assert sql.startswith("UPDATE snippets SET")
        assert "snippets.views +" in sql
        assert "updated_at=snippets.updated_at" in sql
        assert "RETURNING snippets.views" in sql

    @pytest.mark.asyncio
    async def test_increment_views_on_missing_snippet(self, repo, result):
        result.scalar_one_or_none.return_value = None
        assert await repo.increment_views(uuid4()) is None

    @pytest.mark.asyncio
    async def test_toggle_like_is_one_conditional_update(self, repo, result, mock_db_session):
        user_id = uuid4()
        result.scalar_one_or_none.return_value = [user_id]

        likes = await repo.toggle_like(uuid4(), user_id)

        compiled = executed(mock_db_session)
        sql = str(compiled)
        assert likes == [user_id]
        assert "likes=CASE WHEN" in sql
        assert "= ANY (snippets.likes)" in sql
        assert "THEN array_remove(snippets.likes," in sql
        assert "ELSE array_append(snippets.likes," in sql
        assert "RETURNING snippets.likes" in sql
        assert user_id in compiled.params.values()

    @pytest.mark.asyncio
    async def test_toggle_like_on_missing_snippet(self, repo, result):
        result.scalar_one_or_none.return_value = None
        assert await repo.toggle_like(uuid4(), uuid4()) is None

    @pytest.mark.asyncio
    async def test_append_fork(self, repo, result, mock_db_session):
        original_id, fork_id = uuid4(), uuid4()
        result.scalar_one_or_none.return_value = original_id

        appended = await repo.append_fork(original_id, fork_id)

        compiled = executed(mock_db_session)
        assert appended is True
        assert "forks=array_append(snippets.forks," in str(compiled)
        assert "RETURNING snippets.id" in str(compiled)
        assert fork_id in compiled.params.values()

    @pytest.mark.asyncio
    async def test_append_fork_to_deleted_origin(self, repo, result):
        result.scalar_one_or_none.return_value = None
        assert await repo.append_fork(uuid4(), uuid4()) is False


class TestAggregates:

    @pytest.mark.asyncio
    async def test_language_counts(self, repo, result, mock_db_session):
        result.all.return_value = [SimpleNamespace(language=ProgrammingLanguage.PYTHON, count=3)]

        counts = await repo.language_counts()

        sql = str(executed(mock_db_session))
        assert counts == [(ProgrammingLanguage.PYTHON, 3)]
        assert "WHERE snippets.is_public IS true" in sql
        assert "GROUP BY snippets.language" in sql
        assert "ORDER BY count DESC, snippets.language" in sql

    @pytest.mark.asyncio
    async def test_tag_counts(self, repo, result, mock_db_session):
        result.all.return_value = [SimpleNamespace(tag="react", count=5)]

        counts = await repo.tag_counts(limit=20)

        compiled = executed(mock_db_session)
        sql = str(compiled)
        assert counts == [("react", 5)]
        assert "unnest(snippets.tags) AS tag" in sql
        assert "snippets.is_public IS true" in sql
        assert "ORDER BY count DESC" in sql
        assert 20 in compiled.params.values()

    @pytest.mark.asyncio
    async def test_author_totals(self, repo, result, mock_db_session):
        row = MagicMock()
        row._mapping = {
            "total_snippets": 3,
            "public_snippets": 2,
            "total_views": 41,
            "total_likes": 5,
            "total_forks": None,
        }
        result.one.return_value = row

        totals = await repo.author_totals(uuid4())

        sql = str(executed(mock_db_session))
        assert totals == {
            "total_snippets": 3,
            "public_snippets": 2,
            "total_views": 41,
            "total_likes": 5,
            "total_forks": 0,
        }
        assert "cardinality(snippets.likes)" in sql
        assert "cardinality(snippets.forks)" in sql
        assert "WHERE snippets.author_id =" in sql

    @pytest.mark.asyncio
    async def test_author_counts_by_collection(self, repo, result, mock_db_session):
        result.all.return_value = [SimpleNamespace(value="utils", count=2)]

        counts = await repo.author_counts_by(uuid4(), "snippet_collection")

        sql = str(executed(mock_db_session))
        assert counts == [("utils", 2)]
        assert "GROUP BY snippets.snippet_collection" in sql
        assert "WHERE snippets.author_id =" in sql
