"""
Snippet Schemas

Request validation/normalization and response models for snippet endpoints.

Normalization (applied before anything reaches a service):
    - every free-text field is trimmed
    - tags are lowercased and trimmed, empty tags dropped, order kept
    - language is not normalized: it must be an exact ProgrammingLanguage value
    - snippetCollection defaults to "uncategorized" (also when blank)
    - isPublic defaults to false on create

Anything outside the update allowlist (author, likes, views, forks, fork
lineage) is ignored rather than rejected.
"""

from datetime import datetime
from typing import Any, ClassVar, Optional
from uuid import UUID

from pydantic import AliasChoices, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from snipshare.shared.models.enums import ProgrammingLanguage
from snipshare.shared.models.snippet import (
    COLLECTION_MAX_LENGTH,
    DEFAULT_COLLECTION,
    DESCRIPTION_MAX_LENGTH,
    TITLE_MAX_LENGTH,
    Snippet,
)
from snipshare.shared.schemas.common import BaseSchema, PaginationMeta


TAG_MAX_LENGTH = 50

_COLLECTION_ALIASES = AliasChoices("snippetCollection", "collection", "snippet_collection")


def normalize_tags(tags: list[str]) -> list[str]:
    """
    Lowercase and trim each tag, dropping empty ones.

    Duplicates are kept: ["  React ", "JavaScript", "react"] becomes
    ["react", "javascript", "react"].
    """
    normalized = [tag.strip().lower() for tag in tags]
    return [tag for tag in normalized if tag]


def parse_tag_filter(raw: Optional[str]) -> list[str]:
    """Split a comma separated ?tags= value into normalized tags."""
    if not raw:
        return []
    return normalize_tags(raw.split(","))


# ═══════════════════════════════════════════════════════════════════════════════
# REQUESTS
# ═══════════════════════════════════════════════════════════════════════════════


class SnippetFields(BaseSchema):
    """
    Field rules shared by create and update payloads.

    Every field is optional here; SnippetCreate tightens the required ones.
    """

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        alias_generator=to_camel,
        str_strip_whitespace=True,
    )

    title: Optional[str] = None
    description: Optional[str] = None
    code: Optional[str] = None
    language: Optional[ProgrammingLanguage] = None
    tags: Optional[list[str]] = None
    snippet_collection: Optional[str] = Field(default=None, validation_alias=_COLLECTION_ALIASES)
    is_public: Optional[bool] = None

    @field_validator("title")
    @classmethod
    def check_title(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value
        if not value:
            raise ValueError("Title is required")
        if len(value) > TITLE_MAX_LENGTH:
            raise ValueError(f"Title cannot exceed {TITLE_MAX_LENGTH} characters")
        return value

    @field_validator("description")
    @classmethod
    def check_description(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and len(value) > DESCRIPTION_MAX_LENGTH:
            raise ValueError(f"Description cannot exceed {DESCRIPTION_MAX_LENGTH} characters")
        return value

    @field_validator("code")
    @classmethod
    def check_code(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and not value:
            raise ValueError("Code cannot be empty")
        return value

    @field_validator("language", mode="before")
    @classmethod
    def check_language(cls, value: Any) -> Any:
        if value is None or isinstance(value, ProgrammingLanguage):
            return value
        if value not in [lang.value for lang in ProgrammingLanguage]:
            raise ValueError("Invalid programming language")
        return value

    @field_validator("tags")
    @classmethod
    def check_tags(cls, value: Optional[list[str]]) -> Optional[list[str]]:
        if value is None:
            return value
        tags = normalize_tags(value)
        too_long = [tag for tag in tags if len(tag) > TAG_MAX_LENGTH]
        if too_long:
            raise ValueError(f"Tags cannot exceed {TAG_MAX_LENGTH} characters")
        return tags

    @field_validator("snippet_collection")
    @classmethod
    def check_collection(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value
        if not value:
            return DEFAULT_COLLECTION
        if len(value) > COLLECTION_MAX_LENGTH:
            raise ValueError(f"Collection name cannot exceed {COLLECTION_MAX_LENGTH} characters")
        return value


class SnippetCreate(SnippetFields):
    """Payload for POST /snippets."""

    title: str
    code: str
    language: ProgrammingLanguage
    tags: list[str] = Field(default_factory=list)
    snippet_collection: str = Field(default=DEFAULT_COLLECTION, validation_alias=_COLLECTION_ALIASES)
    is_public: bool = False


class SnippetUpdate(SnippetFields):
    """
    Partial payload for PUT /snippets/{id}.

    Only fields present in the body (and not null) are written.
    """

    UPDATABLE_FIELDS: ClassVar[tuple[str, ...]] = (
        "title",
        "description",
        "code",
        "language",
        "tags",
        "snippet_collection",
        "is_public",
    )

    def changes(self) -> dict[str, Any]:
        """Allowlisted fields the caller actually sent."""
        sent = self.model_dump(exclude_unset=True, exclude_none=True)
        return {name: value for name, value in sent.items() if name in self.UPDATABLE_FIELDS}


# ═══════════════════════════════════════════════════════════════════════════════
# RESPONSES
# ═══════════════════════════════════════════════════════════════════════════════


class AuthorSummary(BaseSchema):
    """Minimal author projection embedded in snippet responses."""

    id: UUID
    username: str
    avatar: Optional[str] = None


class OriginalSnippetSummary(BaseSchema):
    """Origin of a fork, when it still exists."""

    id: UUID
    title: str
    author_id: UUID


class SnippetResponse(BaseSchema):
    """A snippet as returned by the API."""

    id: UUID
    title: str
    description: Optional[str] = None
    code: str
    language: ProgrammingLanguage
    tags: list[str]
    author: AuthorSummary
    is_public: bool
    is_forked: bool
    original_snippet_id: Optional[UUID] = None
    original_snippet: Optional[OriginalSnippetSummary] = None
    forks: list[UUID]
    likes: list[UUID]
    likes_count: int
    forks_count: int
    views: int
    snippet_collection: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_snippet(
        cls,
        snippet: Snippet,
        original: Optional[Snippet] = None,
    ) -> "SnippetResponse":
        """
        Build the response for `snippet`.

        `original` is the resolved origin of a fork; pass None when the
        snippet is not a fork or its origin has been deleted.
        """
        response = cls.model_validate(snippet)
        if original is not None:
            response.original_snippet = OriginalSnippetSummary.model_validate(original)
        return response


class SnippetEnvelope(BaseSchema):
    """GET /snippets/{id}."""

    snippet: SnippetResponse


class SnippetMutationResponse(BaseSchema):
    """Create, update and fork responses."""

    message: str
    snippet: SnippetResponse


class SnippetListResponse(BaseSchema):
    """Any paginated snippet listing."""

    snippets: list[SnippetResponse]
    pagination: PaginationMeta


class LikeResponse(BaseSchema):
    """POST /snippets/{id}/like."""

    message: str
    likes_count: int
    is_liked: bool


class LanguageCount(BaseSchema):
    language: ProgrammingLanguage
    count: int


class LanguageListResponse(BaseSchema):
    languages: list[LanguageCount]


class TagCount(BaseSchema):
    name: str
    count: int


class TagListResponse(BaseSchema):
    tags: list[TagCount]
