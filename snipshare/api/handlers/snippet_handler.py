"""
Snippet Handler

Handles snippet listing, detail, mutation, fork, like and directory endpoints.

ARCHITECTURE:
=============
    Handler → Service → Repository → Model

Handlers should ONLY:
- Parse HTTP requests
- Call service methods
- Format HTTP responses

Business logic belongs in the SERVICE layer.

ROUTE ORDER:
============
Fixed paths (/my, /languages/list, /tags/list) are declared before
/{snippet_id} so they are never parsed as snippet ids.
"""

from typing import Optional
from uuid import UUID

from fastapi import APIRouter, BackgroundTasks, Depends, Query, status

from snipshare.shared.models.enums import ProgrammingLanguage, SortField, SortOrder
from snipshare.shared.repositories.snippet_repository import SnippetFilters
from snipshare.shared.schemas.common import MessageResponse, PaginationMeta, PaginationParams
from snipshare.shared.schemas.snippet import (
    LanguageCount,
    LanguageListResponse,
    LikeResponse,
    SnippetCreate,
    SnippetEnvelope,
    SnippetListResponse,
    SnippetMutationResponse,
    SnippetResponse,
    SnippetUpdate,
    TagCount,
    TagListResponse,
    parse_tag_filter,
)
from snipshare.shared.services.snippet_service import SnippetPage, SnippetService
from snipshare.api.dependencies import CurrentUser, OptionalUser, get_pagination
from snipshare.api.dependencies.services import (
    ViewRecorder,
    get_snippet_service,
    get_view_recorder,
)


router = APIRouter()


def build_list_response(page: SnippetPage) -> SnippetListResponse:
    """Helper to build a paginated listing from a service page."""
    return SnippetListResponse(
        snippets=[SnippetResponse.from_snippet(snippet) for snippet in page.items],
        pagination=PaginationMeta.create(page=page.page, limit=page.limit, total=page.total),
    )


async def get_listing_filters(
    search: Optional[str] = Query(None, description="Full-text search over title and description"),
    language: Optional[ProgrammingLanguage] = Query(None),
    tags: Optional[str] = Query(None, description="Comma separated, matches any"),
    author: Optional[UUID] = Query(None, description="Author user id"),
    collection: Optional[str] = Query(None),
) -> SnippetFilters:
    """Filters shared by the public feed and the caller's own listing."""
    return SnippetFilters(
        search=search.strip() if search and search.strip() else None,
        language=language,
        tags=parse_tag_filter(tags),
        author_id=author,
        collection=collection.strip() if collection and collection.strip() else None,
    )


# ═══════════════════════════════════════════════════════════════════════════════
# LISTINGS & DIRECTORIES
# ═══════════════════════════════════════════════════════════════════════════════


@router.get("", response_model=SnippetListResponse)
async def list_snippets(
    filters: SnippetFilters = Depends(get_listing_filters),
    pagination: PaginationParams = Depends(get_pagination),
    sort: SortField = Query(SortField.CREATED_AT),
    order: SortOrder = Query(SortOrder.DESC),
    service: SnippetService = Depends(get_snippet_service),
):
    """
    List public snippets.

    Query params:
        page, limit: Pagination (limit ≤ 100)
        search, language, tags, author, collection: Filters (ANDed)
        sort: createdAt | views | likes
        order: asc | desc
    """
    page = await service.list_public(
        filters,
        sort=sort,
        order=order,
        page=pagination.page,
        limit=pagination.limit,
    )
    return build_list_response(page)


@router.get("/my", response_model=SnippetListResponse)
async def list_my_snippets(
    current_user: CurrentUser,
    filters: SnippetFilters = Depends(get_listing_filters),
    pagination: PaginationParams = Depends(get_pagination),
    sort: SortField = Query(SortField.CREATED_AT),
    order: SortOrder = Query(SortOrder.DESC),
    is_public: Optional[bool] = Query(None, alias="isPublic"),
    service: SnippetService = Depends(get_snippet_service),
):
    """List the caller's snippets, public and private unless isPublic is given."""
    filters.is_public = is_public
    page = await service.list_for_author(
        current_user.id,
        filters,
        sort=sort,
        order=order,
        page=pagination.page,
        limit=pagination.limit,
    )
    return build_list_response(page)


@router.get("/languages/list", response_model=LanguageListResponse)
async def list_languages(service: SnippetService = Depends(get_snippet_service)):
    """Languages used by public snippets with their counts, most used first."""
    counts = await service.language_directory()
    return LanguageListResponse(
        languages=[LanguageCount(language=language, count=count) for language, count in counts]
    )


@router.get("/tags/list", response_model=TagListResponse)
async def list_tags(service: SnippetService = Depends(get_snippet_service)):
    """Most used tags across public snippets."""
    counts = await service.tag_directory()
    return TagListResponse(tags=[TagCount(name=name, count=count) for name, count in counts])


# ═══════════════════════════════════════════════════════════════════════════════
# SINGLE SNIPPET
# ═══════════════════════════════════════════════════════════════════════════════


@router.post(
    "",
    response_model=SnippetMutationResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_snippet(
    data: SnippetCreate,
    current_user: CurrentUser,
    service: SnippetService = Depends(get_snippet_service),
):
    """Create a snippet owned by the caller."""
    snippet = await service.create_snippet(current_user, data)
    return SnippetMutationResponse(
        message="Snippet created successfully",
        snippet=SnippetResponse.from_snippet(snippet),
    )


@router.get("/{snippet_id}", response_model=SnippetEnvelope)
async def get_snippet(
    snippet_id: UUID,
    viewer: OptionalUser,
    background_tasks: BackgroundTasks,
    service: SnippetService = Depends(get_snippet_service),
    record_view: ViewRecorder = Depends(get_view_recorder),
):
    """
    Get one snippet.

    Private snippets are only visible to their author (403 otherwise).
    The view counter is bumped after the response is sent, so the body
    shows the count before this read.
    """
    snippet, original = await service.get_for_viewer(
        snippet_id,
        viewer.id if viewer is not None else None,
    )
    background_tasks.add_task(record_view, snippet.id)
    return SnippetEnvelope(snippet=SnippetResponse.from_snippet(snippet, original))


@router.put("/{snippet_id}", response_model=SnippetMutationResponse)
async def update_snippet(
    snippet_id: UUID,
    data: SnippetUpdate,
    current_user: CurrentUser,
    service: SnippetService = Depends(get_snippet_service),
):
    """Update the caller's own snippet. Unknown fields are ignored."""
    snippet = await service.update_snippet(snippet_id, current_user.id, data)
    return SnippetMutationResponse(
        message="Snippet updated successfully",
        snippet=SnippetResponse.from_snippet(snippet),
    )


@router.delete("/{snippet_id}", response_model=MessageResponse)
async def delete_snippet(
    snippet_id: UUID,
    current_user: CurrentUser,
    service: SnippetService = Depends(get_snippet_service),
):
    """Delete the caller's own snippet. Its forks are kept."""
    await service.delete_snippet(snippet_id, current_user.id)
    return MessageResponse(message="Snippet deleted successfully")


@router.post(
    "/{snippet_id}/fork",
    response_model=SnippetMutationResponse,
    status_code=status.HTTP_201_CREATED,
)
async def fork_snippet(
    snippet_id: UUID,
    current_user: CurrentUser,
    service: SnippetService = Depends(get_snippet_service),
):
    """Fork a public snippet into the caller's private "forks" collection."""
    child = await service.fork_snippet(snippet_id, current_user)
    return SnippetMutationResponse(
        message="Snippet forked successfully",
        snippet=SnippetResponse.from_snippet(child),
    )


@router.post("/{snippet_id}/like", response_model=LikeResponse)
async def toggle_like(
    snippet_id: UUID,
    current_user: CurrentUser,
    service: SnippetService = Depends(get_snippet_service),
):
    """Like a public snippet, or unlike it if the caller already does."""
    result = await service.toggle_like(snippet_id, current_user.id)
    return LikeResponse(
        message="Snippet liked" if result.is_liked else "Snippet unliked",
        likes_count=result.likes_count,
        is_liked=result.is_liked,
    )
