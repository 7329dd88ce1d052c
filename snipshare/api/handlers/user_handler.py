"""
User Handler

Public profiles, user search, personal statistics and liked snippets.
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Query

from snipshare.shared.schemas.common import PaginationMeta, PaginationParams
from snipshare.shared.schemas.snippet import SnippetListResponse, SnippetResponse
from snipshare.shared.schemas.user import (
    CollectionStat,
    LanguageStat,
    OverallStats,
    ProfileResponse,
    ProfileStats,
    PublicUserResponse,
    UserSearchResponse,
    UserStatsResponse,
)
from snipshare.shared.services.user_service import UserService
from snipshare.api.dependencies import CurrentUser, get_pagination
from snipshare.api.dependencies.services import get_user_service
from snipshare.api.handlers.snippet_handler import build_list_response


router = APIRouter()


@router.get("/profile/{username}", response_model=ProfileResponse)
async def get_profile(
    username: str,
    pagination: PaginationParams = Depends(get_pagination),
    service: UserService = Depends(get_user_service),
):
    """
    Public profile: the user, their public snippets (newest first) and
    headline totals.

    Raises:
        404: Unknown username
    """
    profile = await service.get_profile(username, page=pagination.page, limit=pagination.limit)
    page = profile.snippets
    return ProfileResponse(
        user=PublicUserResponse.model_validate(profile.user),
        snippets=[SnippetResponse.from_snippet(snippet) for snippet in page.items],
        pagination=PaginationMeta.create(page=page.page, limit=page.limit, total=page.total),
        stats=ProfileStats(**profile.stats),
    )


@router.get("/search", response_model=UserSearchResponse)
async def search_users(
    q: str = Query("", description="Username substring, at least 2 characters"),
    limit: int = Query(10, ge=1, le=50),
    service: UserService = Depends(get_user_service),
):
    """Find users whose username contains `q` (case-insensitive)."""
    users = await service.search_users(q, limit=limit)
    return UserSearchResponse(users=[PublicUserResponse.model_validate(user) for user in users])


@router.get("/stats/{user_id}", response_model=UserStatsResponse)
async def get_stats(
    user_id: UUID,
    current_user: CurrentUser,
    service: UserService = Depends(get_user_service),
):
    """
    Statistics over all of the caller's snippets.

    Raises:
        403: user_id is not the caller
    """
    stats = await service.get_stats(user_id, acting_user_id=current_user.id)
    return UserStatsResponse(
        overall=OverallStats(**stats.overall),
        languages=[LanguageStat(language=language, count=count) for language, count in stats.languages],
        collections=[
            CollectionStat(collection=collection, count=count)
            for collection, count in stats.collections
        ],
    )


@router.get("/liked-snippets", response_model=SnippetListResponse)
async def liked_snippets(
    current_user: CurrentUser,
    pagination: PaginationParams = Depends(get_pagination),
    service: UserService = Depends(get_user_service),
):
    """Public snippets the caller likes, newest first."""
    page = await service.liked_snippets(
        current_user.id, page=pagination.page, limit=pagination.limit
    )
    return build_list_response(page)
