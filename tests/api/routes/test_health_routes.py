"""Tests for the health and environment endpoints and middleware headers."""

from __future__ import annotations

import pytest
from httpx import ASGITransport, AsyncClient

from courtlens.config import get_settings
from courtlens.main import app


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
async def client():
    """Create an async test client."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac


@pytest.mark.anyio
async def test_health_returns_200(client: AsyncClient):
    """Health endpoint should return 200 with status fields."""
    response = await client.get("/health")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["version"] == "0.1.0"
    assert data["mode"] == get_settings().app_mode
    assert data["environment"]["features"]["simulated_cases"] is True


@pytest.mark.anyio
async def test_environment_endpoint(client: AsyncClient):
    response = await client.get("/api/v1/environment")

    assert response.status_code == 200
    data = response.json()
    assert set(data) == {
        "mode",
        "app_env",
        "version",
        "llm_provider",
        "case_schema_variant",
        "features",
    }


@pytest.mark.anyio
async def test_response_headers(client: AsyncClient):
    """Middleware should tag every response."""
    response = await client.get("/health")

    assert response.headers["x-courtlens-env"] == get_settings().app_mode
    assert response.headers["x-content-type-options"] == "nosniff"
    assert response.headers["x-frame-options"] == "DENY"
    assert response.headers["x-request-id"]


@pytest.mark.anyio
async def test_request_id_is_echoed(client: AsyncClient):
    response = await client.get("/health", headers={"X-Request-ID": "abc-123"})

    assert response.headers["x-request-id"] == "abc-123"


def test_app_starts_with_lifespan(sync_client):
    """The sync TestClient runs startup validation."""
    response = sync_client.get("/health")
    assert response.status_code == 200
