"""
Business Logic Services

Services coordinate repositories and enforce the domain rules; handlers
stay thin and only translate HTTP to service calls.

Services:
=========
- AuthService: registration, login, profile updates
- SnippetService: listings, detail reads, create/update/delete, fork, likes
- UserService: public profiles, user search, statistics, liked snippets
- access: pure visibility/ownership checks shared by the services

Usage:
======
    from snipshare.shared.services import SnippetService

    service = SnippetService(db)
    snippet, original = await service.get_for_viewer(snippet_id, viewer_id=None)
"""

from snipshare.shared.services.access import ensure_can_view, ensure_owner, ensure_public
from snipshare.shared.services.auth_service import AuthService
from snipshare.shared.services.snippet_service import (
    LikeToggle,
    SnippetPage,
    SnippetService,
    record_snippet_view,
)
from snipshare.shared.services.user_service import UserProfile, UserService, UserStats

__all__ = [
    "ensure_can_view",
    "ensure_owner",
    "ensure_public",
    "AuthService",
    "LikeToggle",
    "SnippetPage",
    "SnippetService",
    "record_snippet_view",
    "UserProfile",
    "UserService",
    "UserStats",
]
