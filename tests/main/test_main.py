# tests/main/test_main.py
"""Tests for the application-level endpoints and middleware."""

from httpx import AsyncClient


async def test_health(client: AsyncClient) -> None:
    response = await client.get("/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "ok"
    assert body["database"] == "connected"
    assert body["version"] == "1.0.0"


async def test_request_id_generated(client: AsyncClient) -> None:
    response = await client.get("/health")
    assert response.headers["X-Request-ID"]


async def test_request_id_echoed(client: AsyncClient) -> None:
    response = await client.get("/health", headers={"X-Request-ID": "req-42"})
    assert response.headers["X-Request-ID"] == "req-42"


async def test_security_headers(client: AsyncClient) -> None:
    response = await client.get("/health")
    assert response.headers["X-Content-Type-Options"] == "nosniff"
    assert response.headers["X-Frame-Options"] == "DENY"


async def test_metrics_count_requests(client: AsyncClient) -> None:
    await client.get("/users")

    response = await client.get("/metrics")

    assert response.status_code == 200
    api_metrics = response.json()["api_metrics"]
    assert api_metrics["request_counts"]["/users/list"] == 1
    assert "system_metrics" in response.json()
