"""
Request session lifecycle: commit on success, rollback on error.
"""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from snipshare.shared.db import session as session_module


def _factory():
    session = MagicMock()
    session.__aenter__.return_value = session
    session.__aexit__.return_value = False
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    return MagicMock(return_value=session), session


class TestGetDb:

    @pytest.mark.asyncio
    async def test_commits_after_success(self):
        factory, session = _factory()
        with patch.object(session_module, "AsyncSessionLocal", factory):
            dependency = session_module.get_db()
            assert await dependency.__anext__() is session
            with pytest.raises(StopAsyncIteration):
                await dependency.__anext__()

        session.commit.assert_awaited_once()
        session.rollback.assert_not_awaited()
        session.close.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_rolls_back_when_handler_fails(self):
        """A fork whose parent update fails leaves no child behind."""
        factory, session = _factory()
        with patch.object(session_module, "AsyncSessionLocal", factory):
            dependency = session_module.get_db()
            await dependency.__anext__()
            with pytest.raises(RuntimeError):
                await dependency.athrow(RuntimeError("append failed"))

        session.rollback.assert_awaited_once()
        session.commit.assert_not_awaited()
        session.close.assert_awaited_once()
