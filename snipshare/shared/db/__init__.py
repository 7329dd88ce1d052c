"""
Database Module

Database connectivity and session management.

Architecture Overview:
======================
    FastAPI Route
        │  Depends(get_db)
        ▼
    AsyncSession (one per request, commit on success / rollback on error)
        │
        ▼
    Repositories (UserRepository, SnippetRepository)
        │
        ▼
    PostgreSQL

Usage in FastAPI:
=================
    from fastapi import Depends
    from snipshare.shared.db import get_db
    from snipshare.shared.repositories import SnippetRepository

    @app.get("/snippets/{snippet_id}")
    async def get_snippet(snippet_id: UUID, db: AsyncSession = Depends(get_db)):
        return await SnippetRepository(db).get(snippet_id)
"""

from snipshare.shared.db.session import (
    get_db,
    init_db,
    close_db,
    check_connection,
    AsyncSessionLocal,
    engine,
)

__all__ = [
    "get_db",
    "init_db",
    "close_db",
    "check_connection",
    "AsyncSessionLocal",
    "engine",
]
