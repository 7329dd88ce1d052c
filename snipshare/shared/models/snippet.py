"""
Snippet Entity Model

The central entity: a unit of code with metadata, visibility, likes and
fork lineage.

Model Hierarchy:
================
    Snippet
       ├── author (User)                  - many-to-one, required, immutable
       ├── original_snippet_id (UUID)     - origin of a fork, plain reference
       └── forks (UUID[])                 - children forked from this snippet

FORK LINEAGE:
- original_snippet_id has no foreign-key constraint. A fork outlives the
  deletion of its origin; the reference then simply no longer resolves.
- is_forked is true exactly when original_snippet_id is set.

LIKES / FORKS:
- likes and forks are PostgreSQL arrays. Their counts are the array
  cardinality, so there is no separate counter to keep in sync.

SAMPLE SNIPPET RECORD:
┌──────────────────────────────────────────────────────────────────────────────┐
│ id                  │ 2f1c...                                               │
│ title               │ "Debounce helper"                                     │
│ language            │ javascript                                            │
│ tags                │ {"react","hooks"}                                     │
│ author_id           │ 550e8400-...                                          │
│ is_public           │ true                                                  │
│ is_forked           │ false                                                 │
│ original_snippet_id │ NULL                                                  │
│ forks               │ {9a0b...}                                             │
│ likes               │ {550e...,77aa...}                                     │
│ views               │ 128                                                   │
│ snippet_collection  │ "uncategorized"                                       │
└──────────────────────────────────────────────────────────────────────────────┘
"""

from typing import TYPE_CHECKING, Optional
import uuid

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Computed,
    Enum as SQLEnum,
    ForeignKey,
    Index,
    Integer,
    String,
    Text,
    text,
)
from sqlalchemy.dialects.postgresql import ARRAY, TSVECTOR, UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship

from snipshare.shared.models.base import Base, TimestampMixin
from snipshare.shared.models.enums import ProgrammingLanguage


if TYPE_CHECKING:
    from snipshare.shared.models.user import User


TITLE_MAX_LENGTH = 100
DESCRIPTION_MAX_LENGTH = 500
COLLECTION_MAX_LENGTH = 50
DEFAULT_COLLECTION = "uncategorized"
FORK_COLLECTION = "forks"
FORK_TITLE_SUFFIX = " (Fork)"

# Expression backing the full-text index over title + description
SEARCH_DOCUMENT = (
    "to_tsvector('english', coalesce(title, '') || ' ' || coalesce(description, ''))"
)


class Snippet(Base, TimestampMixin):
    """
    A stored unit of code.

    Attributes:
        id: Unique identifier (UUID v4)
        title: 1-100 characters
        description: Up to 500 characters
        code: Non-empty source text
        language: One of ProgrammingLanguage
        tags: Lowercase, trimmed labels
        author_id: Owning user
        is_public: Visible to everyone when true
        is_forked: True for snippets created by forking
        original_snippet_id: Origin of a fork
        forks: Ids of snippets forked from this one (append-only)
        likes: Ids of users who like this snippet (set semantics)
        views: Detail reads so far
        snippet_collection: Free-text grouping label
        search_vector: Generated tsvector over title + description

    Relationships:
        author: The owning user, always loaded with the snippet
    """

    __tablename__ = "snippets"

    # ═══════════════════════════════════════════════════════════════════════════
    # PRIMARY KEY
    # ═══════════════════════════════════════════════════════════════════════════

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # CONTENT
    # ═══════════════════════════════════════════════════════════════════════════

    title: Mapped[str] = mapped_column(
        String(TITLE_MAX_LENGTH),
        nullable=False,
    )

    description: Mapped[Optional[str]] = mapped_column(
        String(DESCRIPTION_MAX_LENGTH),
        nullable=True,
    )

    code: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )

    language: Mapped[ProgrammingLanguage] = mapped_column(
        SQLEnum(
            ProgrammingLanguage,
            name="programminglanguage",
            values_callable=lambda enum: [member.value for member in enum],
        ),
        nullable=False,
        index=True,
    )

    tags: Mapped[list[str]] = mapped_column(
        ARRAY(String(50)),
        nullable=False,
        default=list,
        server_default=text("'{}'"),
    )

    snippet_collection: Mapped[str] = mapped_column(
        String(COLLECTION_MAX_LENGTH),
        nullable=False,
        default=DEFAULT_COLLECTION,
        server_default=DEFAULT_COLLECTION,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # OWNERSHIP & VISIBILITY
    # ═══════════════════════════════════════════════════════════════════════════

    author_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("users.id"),
        nullable=False,
        index=True,
    )

    is_public: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=False,
        server_default=text("false"),
        index=True,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # FORK LINEAGE
    # ═══════════════════════════════════════════════════════════════════════════

    is_forked: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=False,
        server_default=text("false"),
    )

    # No FK: the reference is allowed to dangle once the origin is deleted
    original_snippet_id: Mapped[Optional[uuid.UUID]] = mapped_column(
        UUID(as_uuid=True),
        nullable=True,
    )

    forks: Mapped[list[uuid.UUID]] = mapped_column(
        ARRAY(UUID(as_uuid=True)),
        nullable=False,
        default=list,
        server_default=text("'{}'"),
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # ENGAGEMENT
    # ═══════════════════════════════════════════════════════════════════════════

    likes: Mapped[list[uuid.UUID]] = mapped_column(
        ARRAY(UUID(as_uuid=True)),
        nullable=False,
        default=list,
        server_default=text("'{}'"),
    )

    views: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=0,
        server_default=text("0"),
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # SEARCH
    # ═══════════════════════════════════════════════════════════════════════════

    search_vector: Mapped[Optional[str]] = mapped_column(
        TSVECTOR,
        Computed(SEARCH_DOCUMENT, persisted=True),
        nullable=True,
        deferred=True,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # RELATIONSHIPS
    # ═══════════════════════════════════════════════════════════════════════════

    author: Mapped["User"] = relationship(
        "User",
        back_populates="snippets",
        lazy="joined",
    )

    __table_args__ = (
        Index("ix_snippets_created_at", "created_at"),
        Index("ix_snippets_tags", "tags", postgresql_using="gin"),
        Index("ix_snippets_search_vector", "search_vector", postgresql_using="gin"),
        CheckConstraint("views >= 0", name="ck_snippets_views_non_negative"),
        CheckConstraint(
            "is_forked = (original_snippet_id IS NOT NULL)",
            name="ck_snippets_fork_lineage",
        ),
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # DERIVED VALUES
    # ═══════════════════════════════════════════════════════════════════════════

    @property
    def likes_count(self) -> int:
        return len(self.likes or [])

    @property
    def forks_count(self) -> int:
        return len(self.forks or [])

    def is_owned_by(self, user_id: Optional[uuid.UUID]) -> bool:
        """True when `user_id` is this snippet's author."""
        return user_id is not None and self.author_id == user_id

    def is_liked_by(self, user_id: Optional[uuid.UUID]) -> bool:
        return user_id is not None and user_id in (self.likes or [])

    @staticmethod
    def fork_title(title: str) -> str:
        """
        Title for a fork of a snippet called `title`.

        The base title is cut so the suffixed result still fits the column.
        """
        room = TITLE_MAX_LENGTH - len(FORK_TITLE_SUFFIX)
        return f"{title[:room].rstrip()}{FORK_TITLE_SUFFIX}"

    def __repr__(self) -> str:
        return f"<Snippet(id={self.id}, title={self.title!r}, public={self.is_public})>"
