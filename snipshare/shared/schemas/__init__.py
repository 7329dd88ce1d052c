"""
Pydantic Schemas

Request and response models for the API.

Schema Categories:
==================
- common: Base schema, pagination, error responses
- snippet: Snippet payloads, listings, like/directory responses
- user: Authentication, profile and statistics schemas

Usage:
======
    from snipshare.shared.schemas.snippet import SnippetCreate, SnippetResponse
    from snipshare.shared.schemas.common import PaginationMeta, MessageResponse
"""

from snipshare.shared.schemas.common import (
    BaseSchema,
    HealthResponse,
    MessageResponse,
    PaginationMeta,
    PaginationParams,
)
from snipshare.shared.schemas.snippet import (
    AuthorSummary,
    LanguageCount,
    LanguageListResponse,
    LikeResponse,
    OriginalSnippetSummary,
    SnippetCreate,
    SnippetEnvelope,
    SnippetListResponse,
    SnippetMutationResponse,
    SnippetResponse,
    SnippetUpdate,
    TagCount,
    TagListResponse,
    normalize_tags,
    parse_tag_filter,
)
from snipshare.shared.schemas.user import (
    AuthResponse,
    CollectionStat,
    LanguageStat,
    OverallStats,
    ProfileResponse,
    ProfileStats,
    ProfileUpdate,
    ProfileUpdateResponse,
    PublicUserResponse,
    UserCreate,
    UserEnvelope,
    UserLogin,
    UserResponse,
    UserSearchResponse,
    UserStatsResponse,
)

__all__ = [
    # Common
    "BaseSchema",
    "HealthResponse",
    "MessageResponse",
    "PaginationMeta",
    "PaginationParams",
    # Snippet
    "AuthorSummary",
    "LanguageCount",
    "LanguageListResponse",
    "LikeResponse",
    "OriginalSnippetSummary",
    "SnippetCreate",
    "SnippetEnvelope",
    "SnippetListResponse",
    "SnippetMutationResponse",
    "SnippetResponse",
    "SnippetUpdate",
    "TagCount",
    "TagListResponse",
    "normalize_tags",
    "parse_tag_filter",
    # User
    "AuthResponse",
    "CollectionStat",
    "LanguageStat",
    "OverallStats",
    "ProfileResponse",
    "ProfileStats",
    "ProfileUpdate",
    "ProfileUpdateResponse",
    "PublicUserResponse",
    "UserCreate",
    "UserEnvelope",
    "UserLogin",
    "UserResponse",
    "UserSearchResponse",
    "UserStatsResponse",
]
