"""
Tests for health and utility endpoints.
"""

from unittest.mock import patch

import pytest
from httpx import ASGITransport, AsyncClient

from core.config import settings
from models.badge import BadgeTier


@pytest.mark.unit
class TestHealthEndpoints:
    """Test health check endpoints."""

    async def test_health_check(self, client: AsyncClient) -> None:
        """Test basic health check endpoint returns 200."""
        response = await client.get("/health")
        assert response.status_code == 200
        data = response.json()
        assert data == {"status": "healthy", "service": "pinit-badges-api"}

    async def test_root_endpoint(self, client: AsyncClient) -> None:
        """Test root endpoint reports the configured app name and version."""
        response = await client.get("/")
        assert response.status_code == 200
        data = response.json()
        assert data["name"] == settings.APP_NAME
        assert data["version"] == "1.0.0"

    async def test_badge_router_mounted(self, client: AsyncClient) -> None:
        """Test that the badge router is served under /api/v1 when enabled."""
        assert settings.ENABLE_GAMIFICATION is True

        response = await client.get("/api/v1/badges/tiers")
        assert response.status_code == 200
        assert response.json() == [tier.value for tier in BadgeTier]

    async def test_health_without_gamification(self) -> None:
        """Test that health stays up when the badge router is switched off."""
        from main import create_application

        with patch.object(settings, "ENABLE_GAMIFICATION", False):
            app = create_application()

        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
            health = await ac.get("/health")
            badges = await ac.get("/api/v1/badges/tiers")

        assert health.status_code == 200
        assert health.json()["status"] == "healthy"
        assert badges.status_code == 404


@pytest.mark.unit
class TestAPIDocumentation:
    """Test API documentation endpoints."""

    async def test_openapi_schema_available(self, client: AsyncClient) -> None:
        """Test OpenAPI schema is accessible (only in debug mode)."""
        response = await client.get("/openapi.json")
        if settings.DEBUG:
            assert response.status_code == 200
            data = response.json()
            assert "openapi" in data
            assert "paths" in data
        else:
            # Docs disabled in production
            assert response.status_code == 404
