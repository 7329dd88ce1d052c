"""
User Repository

Database operations specific to the User model.

Common Operations:
==================
- get_by_email()       → Login lookup (case-insensitive)
- get_by_username()    → Profile lookup
- email_exists() / username_exists() → Registration uniqueness checks
- search_by_username() → Substring search for the user directory
"""

from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from snipshare.shared.repositories.base import BaseRepository
from snipshare.shared.models.user import User


def _escape_like(term: str) -> str:
    """Escape LIKE wildcards so user input matches literally."""
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class UserRepository(BaseRepository[User]):
    """
    Repository for User database operations.
    """

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(User, session)

    # ═══════════════════════════════════════════════════════════════════════════
    # LOOKUP METHODS
    # ═══════════════════════════════════════════════════════════════════════════

    async def get_by_email(self, email: str) -> Optional[User]:
        """
        Get user by email address, ignoring case.

        SQL Generated:
            SELECT * FROM users WHERE lower(email) = 'ada@example.com'
        """
        result = await self.session.execute(
            select(User).where(func.lower(User.email) == email.lower())
        )
        return result.scalar_one_or_none()

    async def get_by_username(self, username: str) -> Optional[User]:
        """Get user by exact username."""
        result = await self.session.execute(select(User).where(User.username == username))
        return result.scalar_one_or_none()

    async def email_exists(self, email: str) -> bool:
        return await self.get_by_email(email) is not None

    async def username_exists(self, username: str) -> bool:
        return await self.get_by_username(username) is not None

    # ═══════════════════════════════════════════════════════════════════════════
    # SEARCH
    # ═══════════════════════════════════════════════════════════════════════════

    async def search_by_username(self, term: str, limit: int = 10) -> list[User]:
        """
        Case-insensitive substring match on username.

        SQL Generated:
            SELECT * FROM users WHERE username ILIKE '%ad%' ESCAPE '\\'
            ORDER BY username LIMIT 10
        """
        pattern = f"%{_escape_like(term)}%"
        result = await self.session.execute(
            select(User)
            .where(User.username.ilike(pattern, escape="\\"))
            .order_by(User.username)
            .limit(limit)
        )
        return list(result.scalars().all())
