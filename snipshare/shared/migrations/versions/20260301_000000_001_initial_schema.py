# pylint: skip-file
# ruff: noqa
"""Initial schema - users and snippets

Revision ID: 001
Revises:
Create Date: 2026-03-01 00:00:00

Tables created:
- users: Accounts (username, email, password hash, avatar, bio)
- snippets: Code snippets with tags, likes and fork lineage

Enums created:
- programminglanguage: the 25 supported languages

Indexes:
- btree on snippets.author_id, language, is_public, created_at
- GIN on snippets.tags (tag overlap filter)
- GIN on snippets.search_vector (full-text search)
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


LANGUAGES = (
    "javascript",
    "python",
    "java",
    "cpp",
    "c",
    "csharp",
    "php",
    "ruby",
    "go",
    "rust",
    "typescript",
    "html",
    "css",
    "sql",
    "bash",
    "powershell",
    "swift",
    "kotlin",
    "scala",
    "r",
    "perl",
    "lua",
    "dart",
    "elixir",
    "haskell",
)

programming_language_enum = postgresql.ENUM(
    *LANGUAGES,
    name="programminglanguage",
    create_type=False,
)

SEARCH_DOCUMENT = (
    "to_tsvector('english', coalesce(title, '') || ' ' || coalesce(description, ''))"
)


def upgrade() -> None:
    """Upgrade database schema."""
    # Create enum types
    op.execute(
        "CREATE TYPE programminglanguage AS ENUM ("
        + ", ".join(f"'{language}'" for language in LANGUAGES)
        + ")"
    )

    # Create users table
    op.create_table(
        "users",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("username", sa.String(30), nullable=False, unique=True, index=True),
        sa.Column("email", sa.String(255), nullable=False, unique=True, index=True),
        sa.Column("password_hash", sa.Text(), nullable=False),
        sa.Column("avatar", sa.String(500), nullable=True),
        sa.Column("bio", sa.String(500), nullable=True),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
    )

    # Create snippets table
    op.create_table(
        "snippets",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("title", sa.String(100), nullable=False),
        sa.Column("description", sa.String(500), nullable=True),
        sa.Column("code", sa.Text(), nullable=False),
        sa.Column("language", programming_language_enum, nullable=False, index=True),
        sa.Column(
            "tags",
            postgresql.ARRAY(sa.String(50)),
            nullable=False,
            server_default=sa.text("'{}'"),
        ),
        sa.Column(
            "snippet_collection",
            sa.String(50),
            nullable=False,
            server_default="uncategorized",
        ),
        sa.Column(
            "author_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("users.id"),
            nullable=False,
            index=True,
        ),
        sa.Column(
            "is_public",
            sa.Boolean(),
            nullable=False,
            server_default=sa.text("false"),
            index=True,
        ),
        sa.Column("is_forked", sa.Boolean(), nullable=False, server_default=sa.text("false")),
        # Plain reference: a fork outlives its origin
        sa.Column("original_snippet_id", postgresql.UUID(as_uuid=True), nullable=True),
        sa.Column(
            "forks",
            postgresql.ARRAY(postgresql.UUID(as_uuid=True)),
            nullable=False,
            server_default=sa.text("'{}'"),
        ),
        sa.Column(
            "likes",
            postgresql.ARRAY(postgresql.UUID(as_uuid=True)),
            nullable=False,
            server_default=sa.text("'{}'"),
        ),
        sa.Column("views", sa.Integer(), nullable=False, server_default=sa.text("0")),
        sa.Column(
            "search_vector",
            postgresql.TSVECTOR(),
            sa.Computed(SEARCH_DOCUMENT, persisted=True),
            nullable=True,
        ),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
        sa.CheckConstraint("views >= 0", name="ck_snippets_views_non_negative"),
        sa.CheckConstraint(
            "is_forked = (original_snippet_id IS NOT NULL)",
            name="ck_snippets_fork_lineage",
        ),
    )
    op.create_index("ix_snippets_created_at", "snippets", ["created_at"])
    op.create_index("ix_snippets_tags", "snippets", ["tags"], postgresql_using="gin")
    op.create_index(
        "ix_snippets_search_vector", "snippets", ["search_vector"], postgresql_using="gin"
    )


def downgrade() -> None:
    """Downgrade database schema."""
    # Drop tables in reverse order (respect foreign keys)
    op.drop_index("ix_snippets_search_vector", table_name="snippets")
    op.drop_index("ix_snippets_tags", table_name="snippets")
    op.drop_index("ix_snippets_created_at", table_name="snippets")
    op.drop_table("snippets")
    op.drop_table("users")

    # Drop enum types
    op.execute("DROP TYPE IF EXISTS programminglanguage")
