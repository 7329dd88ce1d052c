"""
Common Schemas

Shared schemas used across the application for consistent API responses.

Schema Types:
=============
- BaseSchema: camelCase JSON, buildable from ORM objects
- Pagination: query parameters and response metadata
- Generic Responses: MessageResponse, HealthResponse

Usage:
======
    from snipshare.shared.schemas.common import PaginationMeta, PaginationParams

    params = PaginationParams(page=2, limit=10)
    meta = PaginationMeta.create(page=params.page, limit=params.limit, total=25)
    # meta.total_pages == 3, meta.has_next is True, meta.has_prev is True
"""

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class BaseSchema(BaseModel):
    """
    Base schema with common configuration.

    - from_attributes: build from ORM models
    - alias_generator: snake_case fields are exposed as camelCase JSON
    - populate_by_name: accept either spelling on input
    """

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )


# ═══════════════════════════════════════════════════════════════════════════════
# PAGINATION
# ═══════════════════════════════════════════════════════════════════════════════


class PaginationParams(BaseModel):
    """
    1-indexed page number and page size.

    Pages past the end are valid and simply come back empty.
    """

    page: int = Field(default=1, ge=1, description="Page number (1-indexed)")
    limit: int = Field(default=10, ge=1, le=100, description="Items per page")

    @property
    def offset(self) -> int:
        """Rows to skip for this page."""
        return (self.page - 1) * self.limit


class PaginationMeta(BaseSchema):
    """
    Pagination metadata in listing responses.

    Serialized as:
        {"currentPage": 1, "totalPages": 3, "totalSnippets": 25,
         "hasNext": true, "hasPrev": false}
    """

    current_page: int = Field(description="Current page number")
    total_pages: int = Field(description="ceil(total / limit)")
    total_snippets: int = Field(description="Total number of matching items")
    has_next: bool
    has_prev: bool

    @classmethod
    def create(cls, page: int, limit: int, total: int) -> "PaginationMeta":
        """
        Build metadata from the requested page, page size and match count.
        """
        total_pages = (total + limit - 1) // limit if limit > 0 else 0
        return cls(
            current_page=page,
            total_pages=total_pages,
            total_snippets=total,
            has_next=page < total_pages,
            has_prev=page > 1,
        )


# ═══════════════════════════════════════════════════════════════════════════════
# STANDARD RESPONSES
# ═══════════════════════════════════════════════════════════════════════════════


class MessageResponse(BaseModel):
    """Simple message response for success confirmations."""

    message: str


# ═══════════════════════════════════════════════════════════════════════════════
# HEALTH CHECK
# ═══════════════════════════════════════════════════════════════════════════════


class HealthResponse(BaseModel):
    """Health check response schema."""

    status: str = "healthy"
    service: str = "snipshare"
    version: str = "1.0.0"
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
