"""End-to-end tests for tenant-scoped routes (tenant, analytics, users, chat)."""

import logging

import pytest
from fastapi.testclient import TestClient
from httpx import AsyncClient
from opentelemetry.sdk.metrics import MeterProvider

from gateway.core.config import get_settings
from gateway.core.services import GatewayServices, build_services
from gateway.main import create_app
from gateway.shared.telemetry import MeterTimingSink, get_telemetry
from tests.conftest import CountingDirectory


def _h(tenant_id: str) -> dict[str, str]:
    return {"x-tenant-id": tenant_id}


async def test_get_tenant_returns_acme(client: AsyncClient) -> None:
    response = await client.get("/api/tenant", headers=_h("1"))
    assert response.status_code == 200
    data = response.json()
    assert data["id"] == 1
    assert data["name"] == "ACME Corporation"
    assert data["domain"] == "acme.example.com"
    assert data["config"]["theme"] == "light"
    assert data["config"]["primaryColor"] == "#3b82f6"
    assert data["config"]["features"]["chat"] is True


async def test_get_tenant_missing_header_returns_400(client: AsyncClient) -> None:
    response = await client.get("/api/tenant")
    assert response.status_code == 400
    assert response.json() == {"error": "Tenant ID is required"}


async def test_get_tenant_empty_header_returns_400(client: AsyncClient) -> None:
    response = await client.get("/api/tenant", headers=_h(""))
    assert response.status_code == 400
    assert response.json() == {"error": "Tenant ID is required"}


async def test_get_tenant_non_numeric_header_returns_400(client: AsyncClient) -> None:
    response = await client.get("/api/tenant", headers=_h("acme"))
    assert response.status_code == 400


async def test_get_tenant_unknown_returns_404(client: AsyncClient) -> None:
    response = await client.get("/api/tenant", headers=_h("999"))
    assert response.status_code == 404
    assert response.json() == {"error": "Tenant not found"}


async def test_tenant_lookups_are_cached(
    client: AsyncClient, directory: CountingDirectory
) -> None:
    for _ in range(3):
        assert (await client.get("/api/tenant", headers=_h("2"))).status_code == 200
    assert directory.calls == 1


async def test_header_name_is_case_insensitive(client: AsyncClient) -> None:
    response = await client.get("/api/tenant", headers={"X-Tenant-ID": "3"})
    assert response.status_code == 200
    assert response.json()["name"] == "Quantum Industries"


async def test_chat_allowed_for_acme(client: AsyncClient) -> None:
    response = await client.get("/api/chat", headers=_h("1"))
    assert response.status_code == 200
    assert response.json() == {"tenantId": 1, "room": "1", "joinEvent": "joinTenantRoom"}


async def test_chat_forbidden_for_startx(client: AsyncClient) -> None:
    response = await client.get("/api/chat", headers=_h("2"))
    assert response.status_code == 403
    assert response.json() == {"error": "chat not enabled for this tenant"}


async def test_analytics_returns_payload_and_caches_it(
    client: AsyncClient, services: GatewayServices
) -> None:
    response = await client.get("/api/analytics", headers=_h("1"))
    assert response.status_code == 200
    data = response.json()
    assert data["tenantId"] == 1
    assert data["activeUsers"] == 1890
    assert len(data["monthlyActiveUsers"]) == 6
    assert services.resource_cache.get("analytics_1") == data
    again = await client.get("/api/analytics", headers=_h("1"))
    assert again.json() == data


async def test_analytics_forbidden_for_quantum(client: AsyncClient) -> None:
    response = await client.get("/api/analytics", headers=_h("3"))
    assert response.status_code == 403
    assert response.json() == {"error": "analytics not enabled for this tenant"}


async def test_analytics_provider_failure_returns_500(
    client: AsyncClient, services: GatewayServices, monkeypatch: pytest.MonkeyPatch
) -> None:
    async def broken(tenant):
        raise RuntimeError("warehouse unreachable")

    monkeypatch.setattr(services.analytics, "summarize", broken)
    response = await client.get("/api/analytics", headers=_h("2"))
    assert response.status_code == 500
    assert response.json() == {
        "error": "Failed to retrieve analytics data",
        "message": "warehouse unreachable",
    }


async def test_internal_error_details_can_be_hidden(
    client: AsyncClient, services: GatewayServices, monkeypatch: pytest.MonkeyPatch
) -> None:
    async def broken(tenant):
        raise RuntimeError("secret dsn")

    monkeypatch.setenv("EXPOSE_ERROR_DETAILS", "false")
    get_settings.cache_clear()
    monkeypatch.setattr(services.users, "list_users", broken)
    response = await client.get("/api/users", headers=_h("1"))
    assert response.status_code == 500
    assert response.json() == {"error": "Failed to retrieve users data"}


async def test_directory_failure_returns_500(
    client: AsyncClient, directory: CountingDirectory
) -> None:
    directory.error = TimeoutError("directory timed out")
    response = await client.get("/api/tenant", headers=_h("1"))
    assert response.status_code == 500
    assert response.json()["error"] == "Internal server error"


async def test_users_returns_tenant_users(client: AsyncClient) -> None:
    response = await client.get("/api/users", headers=_h("2"))
    assert response.status_code == 200
    users = response.json()
    assert [u["name"] for u in users] == ["Dan Brown", "Eve Davis"]
    assert users[0] == {
        "id": 4,
        "name": "Dan Brown",
        "email": "dan@startx.example.com",
        "role": "admin",
        "active": True,
    }


async def test_users_missing_header_returns_400(client: AsyncClient) -> None:
    response = await client.get("/api/users")
    assert response.status_code == 400
    assert response.json() == {"error": "Tenant ID is required"}


async def test_request_timing_is_logged(
    client: AsyncClient, caplog: pytest.LogCaptureFixture
) -> None:
    with caplog.at_level(logging.INFO, logger="gateway.timing"):
        await client.get("/api/tenant", headers=_h("1"))
    messages = [r.getMessage() for r in caplog.records if r.name == "gateway.timing"]
    assert any(m.startswith("[GET] /api/tenant - 200 - Response time:") for m in messages)


def test_telemetry_lifespan_reports_request_timing_to_meter_sink(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setenv("TELEMETRY_ENABLED", "true")
    monkeypatch.setenv("TELEMETRY_EXPORTER", "none")
    get_settings.cache_clear()
    recorded = []
    monkeypatch.setattr(MeterTimingSink, "record", lambda self, timing: recorded.append(timing))

    app = create_app(build_services(get_settings()))
    with TestClient(app) as tc:
        telemetry = get_telemetry()
        assert telemetry is not None
        assert isinstance(telemetry.meter_provider, MeterProvider)
        assert tc.get("/api/tenant", headers=_h("1")).status_code == 200

    assert [(t.method, t.path, t.status_code) for t in recorded] == [
        ("GET", "/api/tenant", 200)
    ]
    assert get_telemetry() is None
