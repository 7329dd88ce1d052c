"""
Shared Module

Domain code used by the API and by migrations:
- Models: SQLAlchemy ORM models
- Repositories: Data access layer
- Services: Business logic layer
- Schemas: Pydantic request/response models
- Core: Logging, exceptions

Package Structure:
==================
    shared/
    ├── core/           ← Logging, exceptions
    ├── db/             ← Database session management
    ├── models/         ← SQLAlchemy models
    ├── repositories/   ← Data access layer
    ├── services/       ← Business logic
    ├── schemas/        ← Pydantic schemas
    ├── migrations/     ← Alembic environment and revisions
    └── utils/          ← Password hashing, tokens

Usage:
======
    from snipshare.shared.models import User, Snippet
    from snipshare.shared.repositories import SnippetRepository
    from snipshare.shared.services import SnippetService
    from snipshare.shared.schemas import SnippetCreate, SnippetResponse
    from snipshare.shared.core import logger, SnipshareException
"""
