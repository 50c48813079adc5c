"""
AI Notes Backend — Application-Level Tests
==========================================

What we test:
    ✅ GET /health reports connected / disconnected
    ✅ X-Request-ID is echoed (or generated) and appears in error bodies
    ✅ DatabaseError → 500 server_error with a generic message
    ✅ Configuration checks on the JWT secret
"""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from ainotes.config import DEFAULT_JWT_SECRET, Settings
from ainotes.exceptions import DatabaseError
from ainotes.services.document_service import document_service


class TestHealth:

    @pytest.mark.asyncio
    async def test_healthy(self, test_client):
        response = await test_client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["database"] == "connected"
        assert body["uptime_seconds"] >= 0

    @pytest.mark.asyncio
    async def test_database_down(self, test_client):
        broken = MagicMock()
        broken.connect.side_effect = OSError("connection refused")

        with patch("ainotes.routes.health.engine", broken):
            response = await test_client.get("/health")

        assert response.status_code == 503
        assert response.json()["status"] == "unhealthy"
        assert response.json()["database"] == "disconnected"


class TestRequestId:

    @pytest.mark.asyncio
    async def test_client_id_is_echoed(self, test_client):
        response = await test_client.get("/health", headers={"X-Request-ID": "trace-abc"})

        assert response.headers["X-Request-ID"] == "trace-abc"

    @pytest.mark.asyncio
    async def test_id_is_generated(self, test_client):
        response = await test_client.get("/health")

        assert len(response.headers["X-Request-ID"]) == 8

    @pytest.mark.asyncio
    async def test_error_body_carries_request_id(self, test_client):
        response = await test_client.post(
            "/api/actions/listDocuments", json={}, headers={"X-Request-ID": "trace-401"}
        )

        assert response.status_code == 401
        assert response.json()["request_id"] == "trace-401"


class TestServerErrors:

    @pytest.mark.asyncio
    async def test_database_error_is_generic_500(self, call_action):
        failing = AsyncMock(
            side_effect=DatabaseError(context={"sql": "SELECT secret FROM somewhere"})
        )

        with patch.object(document_service, "list_documents", failing):
            response = await call_action("listDocuments")

        assert response.status_code == 500
        body = response.json()
        assert body["error"] == "server_error"
        assert "secret" not in response.text
        assert "details" not in body


class TestSettings:

    def test_default_secret_fails_production_check(self):
        with pytest.raises(ValueError, match="JWT_SECRET"):
            Settings(jwt_secret=DEFAULT_JWT_SECRET).validate_required_for_production()

    def test_custom_secret_passes(self):
        Settings(jwt_secret="a" * 32).validate_required_for_production()

    def test_cors_origins_are_split(self):
        settings = Settings(cors_origins="http://a.test, http://b.test,")
        assert settings.cors_origins_list == ["http://a.test", "http://b.test"]

    def test_log_level_is_normalized(self):
        assert Settings(log_level="debug").log_level == "DEBUG"
