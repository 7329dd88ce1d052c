"""
Base Repository

Generic CRUD operations shared by every entity repository.

What This Provides:
===================
- get(id)        → Fetch single record by UUID
- create()       → Insert a new record
- update()       → Apply a partial update
- delete()       → Hard delete a record

Generic Type Pattern:
=====================
    class SnippetRepository(BaseRepository[Snippet]):
        ...

    repo = SnippetRepository(db)
    snippet = await repo.get(snippet_id)  # typed as Snippet

flush() vs commit():
====================
Repository methods only flush(). The transaction belongs to the request:
get_db() commits once the handler returns, or rolls everything back if
it raised. Multi-step mutations therefore either land together or not at
all.
"""

from typing import Any, Generic, Optional, Type, TypeVar
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from snipshare.shared.models.base import Base


ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """
    Generic base repository providing common CRUD operations.

    Attributes:
        model: The SQLAlchemy model class
        session: The async database session of the current request
    """

    def __init__(self, model: Type[ModelType], session: AsyncSession) -> None:
        self.model = model
        self.session = session

    # ═══════════════════════════════════════════════════════════════════════════
    # READ OPERATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def get(self, record_id: UUID) -> Optional[ModelType]:
        """
        Get a single record by its UUID, or None.

        SQL Generated:
            SELECT * FROM snippets WHERE id = '2f1c...'
        """
        result = await self.session.execute(select(self.model).where(self.model.id == record_id))
        return result.scalar_one_or_none()

    # ═══════════════════════════════════════════════════════════════════════════
    # CREATE OPERATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def create(self, **kwargs: Any) -> ModelType:
        """
        Insert a new record and return it with database-generated values.

        flush() sends the INSERT inside the request transaction; refresh()
        reloads server defaults (timestamps, counters) and eager relationships.
        """
        instance = self.model(**kwargs)
        self.session.add(instance)
        await self.session.flush()
        await self.session.refresh(instance)
        return instance

    # ═══════════════════════════════════════════════════════════════════════════
    # UPDATE OPERATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def update(
        self,
        record_id: UUID,
        **kwargs: Any,
    ) -> Optional[ModelType]:
        """
        Apply a partial update to a record.

        None values are skipped so callers can pass optional fields through
        unchanged. Callers are responsible for restricting which fields
        may be written.

        Returns:
            Updated model instance, or None if not found
        """
        instance = await self.get(record_id)
        if not instance:
            return None

        for field, value in kwargs.items():
            if hasattr(instance, field) and value is not None:
                setattr(instance, field, value)

        await self.session.flush()
        await self.session.refresh(instance)
        return instance

    # ═══════════════════════════════════════════════════════════════════════════
    # DELETE OPERATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def delete(self, record_id: UUID) -> bool:
        """
        Hard delete a record by ID.

        Returns:
            True if deleted, False if not found
        """
        instance = await self.get(record_id)
        if not instance:
            return False

        await self.session.delete(instance)
        await self.session.flush()
        return True
