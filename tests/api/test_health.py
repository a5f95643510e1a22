"""Health endpoint tests."""

import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_health_check(client: AsyncClient):
    """Test basic health check endpoint."""
    response = await client.get("/api/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


@pytest.mark.asyncio
async def test_health_check_db(client: AsyncClient):
    """Test health check with database connectivity."""
    response = await client.get("/api/health/db")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["database"] == "connected"


@pytest.mark.asyncio
async def test_request_id_is_echoed(client: AsyncClient):
    """Test that a supplied request ID comes back on the response."""
    response = await client.get("/api/health", headers={"X-Request-ID": "abc-123"})
    assert response.headers["X-Request-ID"] == "abc-123"


@pytest.mark.asyncio
async def test_request_id_is_generated(client: AsyncClient):
    """Test that a request ID is generated when none is supplied."""
    response = await client.get("/api/health")
    assert response.headers["X-Request-ID"]
