"""
Database Dependency

FastAPI dependency for database sessions.

The session is committed when the handler returns and rolled back if it
raises (see snipshare.shared.db.session.get_db), so multi-step writes such
as a fork and its parent update are all-or-nothing.

Usage:
======
    from snipshare.api.dependencies.database import DbSession

    @router.get("/snippets/{snippet_id}")
    async def get_snippet(snippet_id: UUID, db: DbSession):
        return await SnippetRepository(db).get(snippet_id)
"""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from snipshare.shared.db import get_db


# Type alias for cleaner route signatures
DbSession = Annotated[AsyncSession, Depends(get_db)]

__all__ = ["get_db", "DbSession"]
