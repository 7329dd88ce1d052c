"""
User Entity Model

Represents a registered author.

Model Hierarchy:
================
    User
       └── snippets (Snippet[]) - Snippets authored by this user

SAMPLE USER RECORD:
┌──────────────────────────────────────────────────────────────────────────────┐
│ id               │ 550e8400-e29b-41d4-a716-446655440000                      │
│ username         │ "ada_l"                                                   │
│ email            │ "ada@example.com"                                         │
│ password_hash    │ "$2b$12$..."                                              │
│ avatar           │ "https://cdn.example.com/a/ada.png"                       │
│ bio              │ "Analytical engines, mostly."                             │
│ created_at       │ 2024-01-01T00:00:00Z                                      │
└──────────────────────────────────────────────────────────────────────────────┘
"""

from typing import TYPE_CHECKING, Optional
import uuid

from sqlalchemy import String, Text
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship

from snipshare.shared.models.base import Base, TimestampMixin


if TYPE_CHECKING:
    from snipshare.shared.models.snippet import Snippet


class User(Base, TimestampMixin):
    """
    A registered author.

    Users are created at registration and updated through the profile
    endpoint. They are never hard-deleted.

    Attributes:
        id: Unique identifier (UUID v4)
        username: Public handle (unique, indexed)
        email: Login address (unique, indexed, stored lowercase)
        password_hash: Bcrypt hash, never serialized
        avatar: Optional avatar URL
        bio: Optional short biography
    """

    __tablename__ = "users"

    # ═══════════════════════════════════════════════════════════════════════════
    # PRIMARY KEY
    # ═══════════════════════════════════════════════════════════════════════════

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # IDENTITY
    # ═══════════════════════════════════════════════════════════════════════════

    username: Mapped[str] = mapped_column(
        String(30),
        unique=True,
        nullable=False,
        index=True,
    )

    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        nullable=False,
        index=True,
    )

    password_hash: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # PROFILE
    # ═══════════════════════════════════════════════════════════════════════════

    avatar: Mapped[Optional[str]] = mapped_column(
        String(500),
        nullable=True,
    )

    bio: Mapped[Optional[str]] = mapped_column(
        String(500),
        nullable=True,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # RELATIONSHIPS
    # ═══════════════════════════════════════════════════════════════════════════

    snippets: Mapped[list["Snippet"]] = relationship(
        "Snippet",
        back_populates="author",
        lazy="raise",
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id}, username={self.username})>"
