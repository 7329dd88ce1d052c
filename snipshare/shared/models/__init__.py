"""
Snipshare SQLAlchemy Models

Model Hierarchy:
================
    User
       └── snippets (Snippet[])

    Snippet
       ├── author (User)
       ├── original_snippet_id → Snippet (plain reference)
       └── forks → Snippet[] (array of ids)

Models Overview:
================
- Base: Base class and timestamp mixin
- User: Registered author
- Snippet: Code snippet with tags, visibility, likes and fork lineage

Usage:
======
    from snipshare.shared.models import User, Snippet, ProgrammingLanguage
"""

from snipshare.shared.models.base import Base, TimestampMixin
from snipshare.shared.models.enums import (
    ProgrammingLanguage,
    SortField,
    SortOrder,
)
from snipshare.shared.models.user import User
from snipshare.shared.models.snippet import Snippet

__all__ = [
    # Base classes and mixins
    "Base",
    "TimestampMixin",
    # Enums
    "ProgrammingLanguage",
    "SortField",
    "SortOrder",
    # Core models
    "User",
    "Snippet",
]
