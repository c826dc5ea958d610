"""Pytest configuration and fixtures for the tenant gateway.

Each test gets its own service container and app (create_app(services)),
so caches and bus state never leak between tests. HTTP tests use httpx
AsyncClient over ASGITransport; WebSocket tests use Starlette's TestClient.
"""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator, Iterator

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from gateway.core.config import get_settings
from gateway.core.services import GatewayServices, build_services
from gateway.domain.entities import Tenant
from gateway.infrastructure.cache import TTLCache
from gateway.infrastructure.directory import InMemoryTenantDirectory
from gateway.main import create_app

TTL = 300.0


class FakeClock:
    """Manually advanced monotonic clock for TTL tests."""

    def __init__(self, start: float = 1_000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class CountingDirectory(InMemoryTenantDirectory):
    """In-memory directory that counts lookups and can be slowed down or broken."""

    def __init__(self, delay: float = 0.0, error: Exception | None = None) -> None:
        super().__init__()
        self.calls = 0
        self.delay = delay
        self.error = error

    async def lookup(self, tenant_id: str) -> Tenant | None:
        self.calls += 1
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error is not None:
            raise self.error
        return await super().lookup(tenant_id)


@pytest.fixture(autouse=True)
def _fresh_settings() -> Iterator[None]:
    """Drop cached settings so env overrides in a test take effect."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def cache(clock: FakeClock) -> TTLCache:
    return TTLCache(TTL, name="test", clock=clock)


@pytest.fixture
def directory() -> CountingDirectory:
    return CountingDirectory()


@pytest.fixture
def services(directory: CountingDirectory) -> GatewayServices:
    """Service container over the counting in-memory directory."""
    return build_services(get_settings(), directory=directory)


@pytest.fixture
def app(services: GatewayServices) -> FastAPI:
    return create_app(services)


@pytest.fixture
async def client(app: FastAPI) -> AsyncIterator[AsyncClient]:
    """Async HTTP client against the FastAPI app (ASGI)."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
