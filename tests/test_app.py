"""
Application wiring: probes and request ids.
"""

from unittest.mock import AsyncMock, patch

import pytest
from sqlalchemy.exc import OperationalError

from snipshare.api.handlers import health_handler


class TestProbes:

    @pytest.mark.asyncio
    async def test_health(self, api_client):
        response = await api_client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    @pytest.mark.asyncio
    async def test_live(self, api_client):
        response = await api_client.get("/live")
        assert response.json() == {"status": "alive"}

    @pytest.mark.asyncio
    async def test_ready(self, api_client):
        with patch.object(health_handler, "check_connection", AsyncMock()):
            response = await api_client.get("/ready")
        assert response.status_code == 200

    @pytest.mark.asyncio
    async def test_not_ready_when_database_is_down(self, api_client):
        failing = AsyncMock(side_effect=OperationalError("SELECT 1", {}, Exception("refused")))
        with patch.object(health_handler, "check_connection", failing):
            response = await api_client.get("/ready")
        assert response.status_code == 503
        assert response.json() == {"status": "unavailable"}


class TestRequestId:

    @pytest.mark.asyncio
    async def test_incoming_id_is_echoed(self, api_client):
        response = await api_client.get("/health", headers={"X-Request-ID": "abc123"})
        assert response.headers["X-Request-ID"] == "abc123"

    @pytest.mark.asyncio
    async def test_id_is_generated(self, api_client):
        response = await api_client.get("/live")
        assert len(response.headers["X-Request-ID"]) == 8

    @pytest.mark.asyncio
    async def test_error_responses_carry_id(self, api_client):
        response = await api_client.get("/snippets/my")
        assert response.status_code == 401
        assert response.headers["X-Request-ID"]
