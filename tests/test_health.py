"""Smoke tests for health and app wiring."""

from httpx import AsyncClient


async def test_healthz_returns_ok(client: AsyncClient) -> None:
    """GET /healthz returns 200 and plain-text OK."""
    response = await client.get("/healthz")
    assert response.status_code == 200
    assert response.text == "OK"
    assert "text/plain" in response.headers.get("content-type", "")


async def test_unknown_route_returns_error_body(client: AsyncClient) -> None:
    """Unknown paths still answer with an {"error": ...} body."""
    response = await client.get("/api/does-not-exist")
    assert response.status_code == 404
    assert response.json() == {"error": "Not Found"}
