"""
Access Rules

Visibility and ownership checks for snippets. Plain functions over a
loaded Snippet and the acting user id (None for anonymous callers), so
they can be exercised without HTTP or a database.

    ensure_can_view(snippet, viewer_id)   → private snippets: author only
    ensure_owner(snippet, user_id)        → update/delete
    ensure_public(snippet, action)        → fork/like
"""

from typing import Optional
from uuid import UUID

from snipshare.shared.core.exceptions import AuthorizationError
from snipshare.shared.models.snippet import Snippet


def ensure_can_view(snippet: Snippet, viewer_id: Optional[UUID]) -> None:
    """
    Allow public snippets to anyone and private ones to their author.

    Anonymous callers get the same 403 as other users, so a private
    snippet's existence is not hidden behind a 401.
    """
    if snippet.is_public:
        return
    if not snippet.is_owned_by(viewer_id):
        raise AuthorizationError("This snippet is private")


def ensure_owner(snippet: Snippet, user_id: Optional[UUID]) -> None:
    if not snippet.is_owned_by(user_id):
        raise AuthorizationError("You can only modify your own snippets")


def ensure_public(snippet: Snippet, action: str) -> None:
    """Forking and liking are only possible on public snippets, even for the author."""
    if not snippet.is_public:
        raise AuthorizationError(f"Cannot {action} a private snippet")
