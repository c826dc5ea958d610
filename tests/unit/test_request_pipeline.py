"""Tests for RequestPipeline: error mapping, feature gating, resource caching."""

from typing import Any

import pytest

from gateway.application.pipeline import RequestPipeline
from gateway.application.services import FeatureGate, TenantResolver
from gateway.domain.entities import Tenant
from gateway.domain.exceptions import (
    FeatureDisabledException,
    InternalException,
    TenantNotFoundException,
    ValidationException,
)
from gateway.infrastructure.cache import TTLCache
from tests.conftest import TTL, CountingDirectory, FakeClock


class CountingHandler:
    def __init__(self, error: Exception | None = None) -> None:
        self.calls = 0
        self.error = error

    async def __call__(self, tenant: Tenant) -> dict[str, Any]:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return {"tenant": tenant.id, "call": self.calls}


@pytest.fixture
def resource_cache(clock: FakeClock) -> TTLCache:
    return TTLCache(TTL, name="resource", clock=clock)


@pytest.fixture
def pipeline(
    directory: CountingDirectory, cache: TTLCache, resource_cache: TTLCache
) -> RequestPipeline:
    return RequestPipeline(TenantResolver(directory, cache), FeatureGate(), resource_cache)


@pytest.mark.parametrize("raw", [None, "", 1, ["1"]])
async def test_missing_or_non_string_tenant_id(pipeline: RequestPipeline, raw: object) -> None:
    with pytest.raises(ValidationException) as exc_info:
        await pipeline.run(raw, CountingHandler())
    assert exc_info.value.message == "Tenant ID is required"


async def test_unknown_tenant_propagates_not_found(pipeline: RequestPipeline) -> None:
    with pytest.raises(TenantNotFoundException):
        await pipeline.run("999", CountingHandler())


async def test_resolver_infrastructure_failure_becomes_internal_error(
    cache: TTLCache, resource_cache: TTLCache
) -> None:
    directory = CountingDirectory(error=RuntimeError("connection reset"))
    pipeline = RequestPipeline(TenantResolver(directory, cache), FeatureGate(), resource_cache)
    with pytest.raises(InternalException) as exc_info:
        await pipeline.run("1", CountingHandler())
    assert exc_info.value.message == "Internal server error"
    assert exc_info.value.details["reason"] == "connection reset"


async def test_feature_gate_short_circuits_handler(pipeline: RequestPipeline) -> None:
    handler = CountingHandler()
    with pytest.raises(FeatureDisabledException) as exc_info:
        await pipeline.run("2", handler, feature="chat")
    assert exc_info.value.message == "chat not enabled for this tenant"
    assert handler.calls == 0


async def test_handler_receives_resolved_tenant(pipeline: RequestPipeline) -> None:
    result = await pipeline.run("1", CountingHandler(), feature="chat")
    assert result == {"tenant": 1, "call": 1}


async def test_resource_result_is_cached_per_tenant(
    pipeline: RequestPipeline, resource_cache: TTLCache
) -> None:
    handler = CountingHandler()
    first = await pipeline.run("1", handler, resource="analytics")
    second = await pipeline.run("1", handler, resource="analytics")
    other = await pipeline.run("2", handler, resource="analytics")
    assert first == second
    assert other["tenant"] == 2
    assert handler.calls == 2
    assert resource_cache.get("analytics_1") == first
    assert resource_cache.get("analytics_2") == other


async def test_resource_cache_expires_with_ttl(
    pipeline: RequestPipeline, clock: FakeClock
) -> None:
    handler = CountingHandler()
    await pipeline.run("1", handler, resource="users")
    clock.advance(TTL + 1)
    await pipeline.run("1", handler, resource="users")
    assert handler.calls == 2


async def test_uncached_route_calls_handler_every_time(pipeline: RequestPipeline) -> None:
    handler = CountingHandler()
    await pipeline.run("1", handler)
    await pipeline.run("1", handler)
    assert handler.calls == 2


async def test_handler_failure_becomes_internal_error_and_is_not_cached(
    pipeline: RequestPipeline, resource_cache: TTLCache
) -> None:
    handler = CountingHandler(error=KeyError("series"))
    with pytest.raises(InternalException) as exc_info:
        await pipeline.run("1", handler, resource="analytics")
    assert exc_info.value.message == "Failed to retrieve analytics data"
    assert "series" in exc_info.value.details["reason"]
    assert len(resource_cache) == 0


async def test_handler_domain_errors_pass_through(pipeline: RequestPipeline) -> None:
    handler = CountingHandler(error=ValidationException("bad input"))
    with pytest.raises(ValidationException):
        await pipeline.run("1", handler)
