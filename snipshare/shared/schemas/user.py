"""
User Schemas

Request/response models for user, authentication and profile endpoints.
"""

import re
from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, EmailStr, Field, field_validator

from snipshare.shared.models.enums import ProgrammingLanguage
from snipshare.shared.schemas.common import BaseSchema, PaginationMeta
from snipshare.shared.schemas.snippet import SnippetResponse


USERNAME_PATTERN = re.compile(r"^[A-Za-z0-9_]{3,30}$")
PASSWORD_MIN_LENGTH = 6


# ═══════════════════════════════════════════════════════════════════════════════
# REQUESTS
# ═══════════════════════════════════════════════════════════════════════════════


class UserBase(BaseModel):
    """Base user schema."""

    email: EmailStr

    @field_validator("email")
    @classmethod
    def lowercase_email(cls, value: str) -> str:
        return value.lower()


class UserCreate(UserBase):
    """Schema for user registration."""

    username: str = Field(description="3-30 letters, digits or underscores")
    password: str = Field(
        min_length=PASSWORD_MIN_LENGTH,
        description=f"Password (minimum {PASSWORD_MIN_LENGTH} characters)",
    )

    @field_validator("username")
    @classmethod
    def check_username(cls, value: str) -> str:
        value = value.strip()
        if not USERNAME_PATTERN.match(value):
            raise ValueError(
                "Username must be 3-30 characters and contain only letters, numbers and underscores"
            )
        return value


class UserLogin(UserBase):
    """Schema for user login."""

    password: str = Field(min_length=1, description="Account password")


class ProfileUpdate(BaseModel):
    """Editable profile fields. Omitted fields are left unchanged."""

    avatar: Optional[str] = Field(default=None, max_length=500)
    bio: Optional[str] = Field(default=None, max_length=500)


# ═══════════════════════════════════════════════════════════════════════════════
# RESPONSES
# ═══════════════════════════════════════════════════════════════════════════════


class PublicUserResponse(BaseSchema):
    """What anyone may see about a user."""

    id: UUID
    username: str
    avatar: Optional[str] = None
    bio: Optional[str] = None
    created_at: datetime


class UserResponse(PublicUserResponse):
    """The acting user's own account."""

    email: str
    updated_at: datetime


class UserEnvelope(BaseSchema):
    user: UserResponse


class ProfileUpdateResponse(BaseSchema):
    message: str
    user: UserResponse


class AuthResponse(BaseSchema):
    """Register/login response."""

    message: str
    token: str
    user: UserResponse


class ProfileStats(BaseSchema):
    """Headline numbers shown on a public profile."""

    total_snippets: int = 0
    public_snippets: int = 0
    total_views: int = 0
    total_likes: int = 0


class OverallStats(ProfileStats):
    """Full totals, only visible to the user themselves."""

    private_snippets: int = 0
    total_forks: int = 0


class LanguageStat(BaseSchema):
    language: ProgrammingLanguage
    count: int


class CollectionStat(BaseSchema):
    collection: str
    count: int


class UserStatsResponse(BaseSchema):
    """GET /users/stats/{userId}."""

    overall: OverallStats
    languages: list[LanguageStat]
    collections: list[CollectionStat]


class ProfileResponse(BaseSchema):
    """GET /users/profile/{username}."""

    user: PublicUserResponse
    snippets: list[SnippetResponse]
    pagination: PaginationMeta
    stats: ProfileStats


class UserSearchResponse(BaseSchema):
    users: list[PublicUserResponse]
