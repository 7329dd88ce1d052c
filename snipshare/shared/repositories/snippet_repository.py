"""
Snippet Repository

Database operations specific to the Snippet model: filtered listings,
atomic counter/array updates, and aggregate statistics.

Common Operations:
==================
- list_page() / count_matching()  → Filtered, sorted, paginated listings
- increment_views()               → views = views + 1
- toggle_like()                   → Add or remove a user id in one statement
- append_fork()                   → Record a child on its origin
- language_counts() / tag_counts() → Public directories
- author_totals() / author_counts_by() → Per-user statistics

Atomicity:
==========
increment_views(), toggle_like() and append_fork() are single UPDATE
statements evaluated against the current row. PostgreSQL re-evaluates the
SET expression on the latest row version when two updates race, so two
users liking the same snippet at once never lose a vote.
"""

from dataclasses import dataclass, field
from typing import Any, Optional
from uuid import UUID

from sqlalchemy import any_, case, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql import ColumnElement
from sqlalchemy.sql.functions import count as sql_count

from snipshare.shared.repositories.base import BaseRepository
from snipshare.shared.models.enums import ProgrammingLanguage, SortField, SortOrder
from snipshare.shared.models.snippet import Snippet


SEARCH_CONFIG = "english"


@dataclass
class SnippetFilters:
    """
    Composable listing filters, ANDed together. None means "no constraint".

    Attributes:
        search: Full-text query over title + description
        language: Exact language
        tags: Match snippets carrying any of these tags
        author_id: Exact author
        collection: Exact collection label
        is_public: Visibility constraint
        liked_by: Only snippets whose likes contain this user id
    """

    search: Optional[str] = None
    language: Optional[ProgrammingLanguage] = None
    tags: list[str] = field(default_factory=list)
    author_id: Optional[UUID] = None
    collection: Optional[str] = None
    is_public: Optional[bool] = None
    liked_by: Optional[UUID] = None

    def conditions(self) -> list[ColumnElement[bool]]:
        """Translate the filters into WHERE clauses."""
        clauses: list[ColumnElement[bool]] = []

        if self.search:
            clauses.append(
                Snippet.search_vector.bool_op("@@")(
                    func.websearch_to_tsquery(SEARCH_CONFIG, self.search)
                )
            )
        if self.language is not None:
            clauses.append(Snippet.language == self.language)
        if self.tags:
            clauses.append(Snippet.tags.overlap(self.tags))
        if self.author_id is not None:
            clauses.append(Snippet.author_id == self.author_id)
        if self.collection:
            clauses.append(Snippet.snippet_collection == self.collection)
        if self.is_public is not None:
            clauses.append(Snippet.is_public.is_(self.is_public))
        if self.liked_by is not None:
            clauses.append(self.liked_by == any_(Snippet.likes))

        return clauses


def _sort_expression(sort: SortField) -> ColumnElement[Any]:
    if sort == SortField.VIEWS:
        return Snippet.views
    if sort == SortField.LIKES:
        # likes has no stored counter; order by array length
        return func.cardinality(Snippet.likes)
    return Snippet.created_at


class SnippetRepository(BaseRepository[Snippet]):
    """
    Repository for Snippet database operations.

    Every SELECT of Snippet rows joins the author (the relationship is
    configured lazy="joined"), so results always carry the author projection.
    """

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(Snippet, session)

    # ═══════════════════════════════════════════════════════════════════════════
    # LISTINGS
    # ═══════════════════════════════════════════════════════════════════════════

    async def list_page(
        self,
        filters: SnippetFilters,
        *,
        sort: SortField = SortField.CREATED_AT,
        order: SortOrder = SortOrder.DESC,
        offset: int = 0,
        limit: int = 10,
    ) -> list[Snippet]:
        """
        One page of snippets matching `filters`.

        Ties on the sort key fall back to newest first, then id, so pages
        are stable even when many snippets share a like or view count.

        SQL Generated (sort=likes, order=desc):
            SELECT snippets.*, users.* FROM snippets
            LEFT OUTER JOIN users ON users.id = snippets.author_id
            WHERE snippets.is_public IS true AND snippets.tags && ARRAY['react']
            ORDER BY cardinality(snippets.likes) DESC, snippets.created_at DESC, snippets.id
            OFFSET 0 LIMIT 10
        """
        key = _sort_expression(sort)
        ordering = [key.asc() if order == SortOrder.ASC else key.desc()]
        if sort != SortField.CREATED_AT:
            ordering.append(Snippet.created_at.desc())
        ordering.append(Snippet.id.asc())

        query = (
            select(Snippet)
            .where(*filters.conditions())
            .order_by(*ordering)
            .offset(offset)
            .limit(limit)
        )
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def count_matching(self, filters: SnippetFilters) -> int:
        """Total number of snippets matching `filters` (ignores paging)."""
        query = select(sql_count()).select_from(Snippet).where(*filters.conditions())
        result = await self.session.execute(query)
        return result.scalar() or 0

    # ═══════════════════════════════════════════════════════════════════════════
    # ATOMIC UPDATES
    # ═══════════════════════════════════════════════════════════════════════════

    async def increment_views(self, snippet_id: UUID) -> Optional[int]:
        """
        Add one to the view counter.

        Returns:
            The new count, or None if the snippet no longer exists

        SQL Generated:
            UPDATE snippets SET views = views + 1 WHERE id = '...' RETURNING views
        """
        result = await self.session.execute(
            update(Snippet)
            .where(Snippet.id == snippet_id)
            .values(views=Snippet.views + 1, updated_at=Snippet.updated_at)
            .returning(Snippet.views)
            .execution_options(synchronize_session=False)
        )
        return result.scalar_one_or_none()

    async def toggle_like(self, snippet_id: UUID, user_id: UUID) -> Optional[list[UUID]]:
        """
        Remove `user_id` from likes if present, otherwise append it.

        Returns:
            The resulting likes list, or None if the snippet does not exist

        SQL Generated:
            UPDATE snippets SET likes = CASE
                WHEN '<user>' = ANY(likes) THEN array_remove(likes, '<user>')
                ELSE array_append(likes, '<user>') END
            WHERE id = '...' RETURNING likes
        """
        likes_type = Snippet.__table__.c.likes.type
        toggled = case(
            (
                user_id == any_(Snippet.likes),
                func.array_remove(Snippet.likes, user_id, type_=likes_type),
            ),
            else_=func.array_append(Snippet.likes, user_id, type_=likes_type),
        )
        result = await self.session.execute(
            update(Snippet)
            .where(Snippet.id == snippet_id)
            .values(likes=toggled, updated_at=Snippet.updated_at)
            .returning(Snippet.likes)
            .execution_options(synchronize_session=False)
        )
        likes = result.scalar_one_or_none()
        return list(likes) if likes is not None else None

    async def append_fork(self, original_id: UUID, fork_id: UUID) -> bool:
        """
        Append `fork_id` to the origin's fork list.

        Returns:
            False if the origin no longer exists
        """
        forks_type = Snippet.__table__.c.forks.type
        result = await self.session.execute(
            update(Snippet)
            .where(Snippet.id == original_id)
            .values(forks=func.array_append(Snippet.forks, fork_id, type_=forks_type))
            .returning(Snippet.id)
            .execution_options(synchronize_session=False)
        )
        return result.scalar_one_or_none() is not None

    # ═══════════════════════════════════════════════════════════════════════════
    # DIRECTORIES (public snippets only)
    # ═══════════════════════════════════════════════════════════════════════════

    async def language_counts(self) -> list[tuple[ProgrammingLanguage, int]]:
        """
        Languages used by public snippets, most used first.

        SQL Generated:
            SELECT language, count(*) AS count FROM snippets
            WHERE is_public IS true GROUP BY language ORDER BY count DESC, language
        """
        total = sql_count().label("count")
        result = await self.session.execute(
            select(Snippet.language, total)
            .where(Snippet.is_public.is_(True))
            .group_by(Snippet.language)
            .order_by(total.desc(), Snippet.language)
        )
        return [(row.language, row.count) for row in result.all()]

    async def tag_counts(self, limit: int = 50) -> list[tuple[str, int]]:
        """
        Most used tags across public snippets.

        SQL Generated:
            SELECT tag, count(*) AS count
            FROM (SELECT unnest(tags) AS tag FROM snippets WHERE is_public IS true) t
            GROUP BY tag ORDER BY count DESC, tag LIMIT 50
        """
        tagged = (
            select(func.unnest(Snippet.tags).label("tag"))
            .where(Snippet.is_public.is_(True))
            .subquery()
        )
        total = sql_count().label("count")
        result = await self.session.execute(
            select(tagged.c.tag, total)
            .group_by(tagged.c.tag)
            .order_by(total.desc(), tagged.c.tag)
            .limit(limit)
        )
        return [(row.tag, row.count) for row in result.all()]

    # ═══════════════════════════════════════════════════════════════════════════
    # PER-AUTHOR STATISTICS
    # ═══════════════════════════════════════════════════════════════════════════

    async def author_totals(self, author_id: UUID) -> dict[str, int]:
        """
        Totals over every snippet of one author, public and private.

        Returns:
            Dict with total_snippets, public_snippets, total_views,
            total_likes and total_forks (zeros when the author has none)
        """
        result = await self.session.execute(
            select(
                sql_count().label("total_snippets"),
                func.coalesce(
                    func.sum(case((Snippet.is_public.is_(True), 1), else_=0)), 0
                ).label("public_snippets"),
                func.coalesce(func.sum(Snippet.views), 0).label("total_views"),
                func.coalesce(func.sum(func.cardinality(Snippet.likes)), 0).label("total_likes"),
                func.coalesce(func.sum(func.cardinality(Snippet.forks)), 0).label("total_forks"),
            ).where(Snippet.author_id == author_id)
        )
        row = result.one()
        return {key: int(value or 0) for key, value in row._mapping.items()}

    async def author_counts_by(self, author_id: UUID, column: str) -> list[tuple[Any, int]]:
        """
        Group one author's snippets by `column` ("language" or
        "snippet_collection"), most common first.
        """
        group_column = getattr(Snippet, column)
        total = sql_count().label("count")
        result = await self.session.execute(
            select(group_column.label("value"), total)
            .where(Snippet.author_id == author_id)
            .group_by(group_column)
            .order_by(total.desc(), group_column)
        )
        return [(row.value, row.count) for row in result.all()]
