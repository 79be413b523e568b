"""Smoke tests for health and app wiring."""

from httpx import AsyncClient


async def test_health_returns_ok(client: AsyncClient) -> None:
    """GET /api/v1/health returns 200 and status ok."""
    response = await client.get("/api/v1/health")
    assert response.status_code == 200
    data = response.json()
    assert data.get("status") == "ok"


async def test_readiness_without_database(client: AsyncClient, settings_env) -> None:
    """GET /api/v1/health/ready is ok and reports database not_configured without DATABASE_URL."""
    settings_env(database_url="")
    response = await client.get("/api/v1/health/ready")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "database": "not_configured"}


async def test_participant_routes_require_auth(client: AsyncClient) -> None:
    """Participant routes are mounted under /api/v1 and reject anonymous callers."""
    response = await client.get("/api/v1/participants", headers={"X-Tenant-ID": "t1"})
    assert response.status_code == 401
