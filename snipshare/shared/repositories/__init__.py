"""
Repository Pattern Implementations

Repositories encapsulate SQL and give services a small, typed API.

Repository Hierarchy:
=====================
    BaseRepository[ModelType]     ← Generic CRUD operations
         │
         ├── UserRepository       ← Lookup by email/username, search
         └── SnippetRepository    ← Listings, atomic updates, aggregates

Usage Example:
==============
    from snipshare.shared.repositories import SnippetRepository, SnippetFilters

    repo = SnippetRepository(db)
    page = await repo.list_page(SnippetFilters(is_public=True), limit=10)
"""

from snipshare.shared.repositories.base import BaseRepository
from snipshare.shared.repositories.user_repository import UserRepository
from snipshare.shared.repositories.snippet_repository import (
    SnippetFilters,
    SnippetRepository,
)

__all__ = [
    "BaseRepository",
    "UserRepository",
    "SnippetRepository",
    "SnippetFilters",
]
