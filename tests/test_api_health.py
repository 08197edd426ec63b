"""Tests for health check endpoint."""

from httpx import ASGITransport, AsyncClient

from proxifier.main import app


class TestHealthEndpoint:
    async def test_health_returns_healthy(self) -> None:
        """Liveness probe returns healthy."""
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            response = await client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}
