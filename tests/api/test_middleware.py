"""API tests for request ID, correlation ID and security headers middleware."""

from httpx import AsyncClient

HEALTH_URL = "/api/v1/health"


async def test_request_id_is_generated(client: AsyncClient) -> None:
    response = await client.get(HEALTH_URL)
    assert response.headers.get("X-Request-ID")


async def test_request_id_is_echoed(client: AsyncClient) -> None:
    response = await client.get(HEALTH_URL, headers={"X-Request-ID": "req-123_abc"})
    assert response.headers["X-Request-ID"] == "req-123_abc"


async def test_unsafe_request_id_is_replaced(client: AsyncClient) -> None:
    response = await client.get(HEALTH_URL, headers={"X-Request-ID": "bad id;drop"})
    echoed = response.headers["X-Request-ID"]
    assert echoed != "bad id;drop"
    assert len(echoed) == 36


async def test_correlation_id_defaults_to_request_id(client: AsyncClient) -> None:
    response = await client.get(HEALTH_URL, headers={"X-Request-ID": "req-42"})
    assert response.headers["X-Correlation-ID"] == "req-42"


async def test_correlation_id_is_forwarded(client: AsyncClient) -> None:
    response = await client.get(
        HEALTH_URL,
        headers={"X-Request-ID": "req-42", "X-Correlation-ID": "flow-7"},
    )
    assert response.headers["X-Correlation-ID"] == "flow-7"


async def test_security_headers_are_set(client: AsyncClient) -> None:
    response = await client.get(HEALTH_URL)
    assert response.headers["X-Content-Type-Options"] == "nosniff"
    assert response.headers["X-Frame-Options"] == "DENY"
    assert response.headers["Cache-Control"] == "no-store"
    assert "default-src 'none'" in response.headers["Content-Security-Policy"]


async def test_docs_skip_content_security_policy(client: AsyncClient) -> None:
    response = await client.get("/openapi.json")
    assert response.status_code == 200
    assert "Content-Security-Policy" not in response.headers
    assert response.headers["X-Content-Type-Options"] == "nosniff"
