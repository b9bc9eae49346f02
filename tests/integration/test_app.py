"""Integration tests for the FastAPI host."""

import pytest
from httpx import ASGITransport, AsyncClient

from src.api.app import app


class TestHealthEndpoint:
    """Tests for GET /health."""

    @pytest.fixture
    async def client(self) -> AsyncClient:
        """Create async HTTP client with ASGI transport."""
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            yield client

    async def test_health_reports_healthy(self, client: AsyncClient) -> None:
        response = await client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "service": "citation-chat"}

    async def test_wrong_http_method_returns_405(self, client: AsyncClient) -> None:
        response = await client.post("/health")

        assert response.status_code == 405

    async def test_cors_headers_present(self, client: AsyncClient) -> None:
        response = await client.get("/health", headers={"Origin": "http://localhost:3000"})

        assert "access-control-allow-origin" in response.headers
