"""
Snippet Service

Business logic for snippet listings, reads and mutations.

Every mutation follows the same order: load → 404 → access check →
validated write. Nothing is written before the checks pass.

FORK ARCHITECTURE:
- The child is inserted and its id appended to the origin's `forks` inside
  the request transaction, so either both writes commit or neither does
- A fork is always private, flagged is_forked, and lands in the "forks"
  collection of the forking user
- The origin may later be deleted; the child keeps original_snippet_id

VIEW COUNTING:
- Detail reads return the pre-increment snapshot
- record_snippet_view() runs after the response in its own session;
  failures are logged and never reach the caller

Usage:
======
    from snipshare.shared.services.snippet_service import SnippetService

    service = SnippetService(db)
    page = await service.list_public(SnippetFilters(language=ProgrammingLanguage.PYTHON))
    child = await service.fork_snippet(snippet_id, current_user)
"""

from dataclasses import dataclass
from typing import Optional
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from snipshare.config.settings import settings
from snipshare.shared.core.exceptions import SnippetNotFoundError
from snipshare.shared.core.logging import get_logger
from snipshare.shared.db.session import AsyncSessionLocal
from snipshare.shared.models.enums import ProgrammingLanguage, SortField, SortOrder
from snipshare.shared.models.snippet import FORK_COLLECTION, Snippet
from snipshare.shared.models.user import User
from snipshare.shared.repositories.snippet_repository import SnippetFilters, SnippetRepository
from snipshare.shared.schemas.snippet import SnippetCreate, SnippetUpdate
from snipshare.shared.services.access import ensure_can_view, ensure_owner, ensure_public

logger = get_logger(__name__)


@dataclass
class SnippetPage:
    """One page of a snippet listing."""

    items: list[Snippet]
    total: int
    page: int
    limit: int


@dataclass
class LikeToggle:
    """Outcome of a like toggle for the acting user."""

    is_liked: bool
    likes_count: int


class SnippetService:
    """
    Service for snippet business logic.

    Handles:
    - Public and per-author listings with filters, sort and pagination
    - Detail reads with visibility checks and fork origin resolution
    - Create, update, delete, fork and like toggle
    - Language and tag directories

    Attributes:
        session: Database session
        snippet_repo: SnippetRepository instance
    """

    def __init__(self, session: AsyncSession) -> None:
        """
        Initialize SnippetService.

        Args:
            session: Async database session
        """
        self.session = session
        self.snippet_repo = SnippetRepository(session)

    async def _load(self, snippet_id: UUID) -> Snippet:
        snippet = await self.snippet_repo.get(snippet_id)
        if snippet is None:
            raise SnippetNotFoundError(str(snippet_id))
        return snippet

    # ═══════════════════════════════════════════════════════════════════════════
    # LISTINGS
    # ═══════════════════════════════════════════════════════════════════════════

    async def _list(
        self,
        filters: SnippetFilters,
        sort: SortField,
        order: SortOrder,
        page: int,
        limit: int,
    ) -> SnippetPage:
        offset = (page - 1) * limit
        items = await self.snippet_repo.list_page(
            filters, sort=sort, order=order, offset=offset, limit=limit
        )
        total = await self.snippet_repo.count_matching(filters)
        return SnippetPage(items=items, total=total, page=page, limit=limit)

    async def list_public(
        self,
        filters: SnippetFilters,
        *,
        sort: SortField = SortField.CREATED_AT,
        order: SortOrder = SortOrder.DESC,
        page: int = 1,
        limit: int = 10,
    ) -> SnippetPage:
        """
        The public feed. Visibility is forced to public whatever the
        caller asked for; pages past the end come back empty.
        """
        filters.is_public = True
        return await self._list(filters, sort, order, page, limit)

    async def list_for_author(
        self,
        author_id: UUID,
        filters: SnippetFilters,
        *,
        sort: SortField = SortField.CREATED_AT,
        order: SortOrder = SortOrder.DESC,
        page: int = 1,
        limit: int = 10,
    ) -> SnippetPage:
        """
        The acting user's own snippets, public and private.

        An explicit `filters.is_public` narrows the listing further.
        """
        filters.author_id = author_id
        return await self._list(filters, sort, order, page, limit)

    # ═══════════════════════════════════════════════════════════════════════════
    # READS
    # ═══════════════════════════════════════════════════════════════════════════

    async def get_for_viewer(
        self,
        snippet_id: UUID,
        viewer_id: Optional[UUID],
    ) -> tuple[Snippet, Optional[Snippet]]:
        """
        Load a snippet for display.

        Returns:
            Tuple of (snippet, original) where original is the fork origin,
            or None when the snippet is not a fork or the origin is gone

        Raises:
            SnippetNotFoundError: Unknown id
            AuthorizationError: Private snippet and viewer is not the author
        """
        snippet = await self._load(snippet_id)
        ensure_can_view(snippet, viewer_id)

        original = None
        if snippet.original_snippet_id is not None:
            original = await self.snippet_repo.get(snippet.original_snippet_id)

        return snippet, original

    # ═══════════════════════════════════════════════════════════════════════════
    # MUTATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def create_snippet(self, author: User, payload: SnippetCreate) -> Snippet:
        """Persist a validated snippet owned by `author`."""
        snippet = await self.snippet_repo.create(
            title=payload.title,
            description=payload.description,
            code=payload.code,
            language=payload.language,
            tags=payload.tags,
            snippet_collection=payload.snippet_collection,
            is_public=payload.is_public,
            author_id=author.id,
        )
        logger.info(
            "Snippet created",
            snippet_id=str(snippet.id),
            author_id=str(author.id),
            is_public=snippet.is_public,
        )
        return snippet

    async def update_snippet(
        self,
        snippet_id: UUID,
        user_id: UUID,
        payload: SnippetUpdate,
    ) -> Snippet:
        """
        Apply the allowlisted fields of `payload`.

        Raises:
            SnippetNotFoundError: Unknown id
            AuthorizationError: Caller is not the author
        """
        snippet = await self._load(snippet_id)
        ensure_owner(snippet, user_id)

        changes = payload.changes()
        if not changes:
            return snippet

        updated = await self.snippet_repo.update(snippet.id, **changes)
        logger.info("Snippet updated", snippet_id=str(snippet_id), fields=sorted(changes))
        return updated or snippet

    async def delete_snippet(self, snippet_id: UUID, user_id: UUID) -> None:
        """
        Remove a snippet. Forks of it are left untouched.

        Raises:
            SnippetNotFoundError: Unknown id
            AuthorizationError: Caller is not the author
        """
        snippet = await self._load(snippet_id)
        ensure_owner(snippet, user_id)

        await self.snippet_repo.delete(snippet.id)
        logger.info("Snippet deleted", snippet_id=str(snippet_id), author_id=str(user_id))

    async def fork_snippet(self, snippet_id: UUID, user: User) -> Snippet:
        """
        Copy a public snippet into `user`'s private "forks" collection.

        Flow:
        1. Load the origin (404) and require it to be public (403)
        2. Insert the child
        3. Append the child id to the origin's forks

        Steps 2 and 3 share the caller's transaction. If step 3 fails the
        exception propagates and the session dependency rolls back step 2.

        Raises:
            SnippetNotFoundError: Unknown id, or origin deleted mid-fork
            AuthorizationError: Origin is private (also for its author)
        """
        original = await self._load(snippet_id)
        ensure_public(original, "fork")

        child = await self.snippet_repo.create(
            title=Snippet.fork_title(original.title),
            description=original.description,
            code=original.code,
            language=original.language,
            tags=list(original.tags or []),
            author_id=user.id,
            is_public=False,
            is_forked=True,
            original_snippet_id=original.id,
            snippet_collection=FORK_COLLECTION,
        )

        if not await self.snippet_repo.append_fork(original.id, child.id):
            raise SnippetNotFoundError(str(snippet_id))

        logger.info(
            "Snippet forked",
            snippet_id=str(child.id),
            original_id=str(original.id),
            user_id=str(user.id),
        )
        return child

    async def toggle_like(self, snippet_id: UUID, user_id: UUID) -> LikeToggle:
        """
        Like a public snippet, or remove the like if already present.

        Raises:
            SnippetNotFoundError: Unknown id
            AuthorizationError: Snippet is private
        """
        snippet = await self._load(snippet_id)
        ensure_public(snippet, "like")

        likes = await self.snippet_repo.toggle_like(snippet.id, user_id)
        if likes is None:
            raise SnippetNotFoundError(str(snippet_id))

        result = LikeToggle(is_liked=user_id in likes, likes_count=len(likes))
        logger.info(
            "Snippet like toggled",
            snippet_id=str(snippet_id),
            user_id=str(user_id),
            is_liked=result.is_liked,
        )
        return result

    # ═══════════════════════════════════════════════════════════════════════════
    # DIRECTORIES
    # ═══════════════════════════════════════════════════════════════════════════

    async def language_directory(self) -> list[tuple[ProgrammingLanguage, int]]:
        return await self.snippet_repo.language_counts()

    async def tag_directory(self) -> list[tuple[str, int]]:
        return await self.snippet_repo.tag_counts(limit=settings.TAG_DIRECTORY_LIMIT)


async def record_snippet_view(snippet_id: UUID) -> None:
    """
    Count one view of `snippet_id` in a short-lived session of its own.

    Runs as a background task after the detail response has been sent,
    so store errors are logged and dropped.
    """
    try:
        async with AsyncSessionLocal() as session:
            async with session.begin():
                views = await SnippetRepository(session).increment_views(snippet_id)
    except SQLAlchemyError as exc:
        logger.warning("Failed to record snippet view", snippet_id=str(snippet_id), error=str(exc))
        return

    logger.debug("Snippet view recorded", snippet_id=str(snippet_id), views=views)
