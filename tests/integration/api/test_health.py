"""Tests for health check endpoints."""

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from api.routes.health import get_database_status
from infrastructure.database.session import ping


class TestHealthEndpoint:
    """Tests for the health check endpoint."""

    async def test_health_returns_200(self, client: AsyncClient) -> None:
        response = await client.get("/health")

        assert response.status_code == 200

    async def test_health_returns_correct_structure(self, client: AsyncClient) -> None:
        data = (await client.get("/health")).json()

        assert data["status"] == "healthy"
        assert data["version"] == "1.0.0"
        assert "timestamp" in data
        assert "environment" in data

    async def test_security_and_request_id_headers(self, client: AsyncClient) -> None:
        response = await client.get("/health")

        assert response.headers["x-content-type-options"] == "nosniff"
        assert "x-request-id" in response.headers


class TestDetailedHealthEndpoint:
    """Tests for the readiness endpoint."""

    @pytest.mark.parametrize(("database", "status"), [("healthy", "healthy"), ("unhealthy: down", "degraded")])
    async def test_status_follows_database(self, database: str, status: str) -> None:
        from main import create_app

        app = create_app()
        app.dependency_overrides[get_database_status] = lambda: database
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as c:
            data = (await c.get("/health/detailed")).json()

        assert data["status"] == status
        assert data["database"] == database
        assert "captcha" in data

    async def test_ping_against_test_store(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> None:
        assert await ping(session_factory) == "healthy"
