"""Service container (composition root for non-HTTP collaborators).

Builds explicit instances of the caches, resolver, gate, pipeline and
notification bus for one application. Nothing here is module-global: each
create_app() call gets its own container on app.state.services.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from gateway.application.interfaces import (
    AnalyticsProvider,
    TenantDirectory,
    UserProvider,
)
from gateway.application.pipeline import RequestPipeline
from gateway.application.services import FeatureGate, TenantResolver
from gateway.core.config import Settings
from gateway.domain.entities import Tenant
from gateway.infrastructure.cache import TTLCache
from gateway.infrastructure.directory import (
    InMemoryAnalyticsProvider,
    InMemoryTenantDirectory,
    InMemoryUserProvider,
)
from gateway.infrastructure.messaging import NotificationBus


@dataclass
class GatewayServices:
    """Everything a request or connection handler needs, wired once per app."""

    tenant_cache: TTLCache[str, Tenant]
    resource_cache: TTLCache[str, Any]
    directory: TenantDirectory
    users: UserProvider
    analytics: AnalyticsProvider
    resolver: TenantResolver
    gate: FeatureGate
    pipeline: RequestPipeline
    bus: NotificationBus

    @property
    def caches(self) -> tuple[TTLCache[str, Any], ...]:
        return (self.tenant_cache, self.resource_cache)

    def start(self) -> None:
        """Start the cache sweep timers (requires a running event loop)."""
        for cache in self.caches:
            cache.start()

    async def stop(self) -> None:
        """Stop the cache sweep timers."""
        for cache in self.caches:
            await cache.stop()


def build_services(
    settings: Settings,
    *,
    directory: TenantDirectory | None = None,
    users: UserProvider | None = None,
    analytics: AnalyticsProvider | None = None,
) -> GatewayServices:
    """Wire the service container; collaborators default to in-memory ones."""
    tenant_cache: TTLCache[str, Tenant] = TTLCache(
        settings.cache_ttl_seconds,
        name="tenant",
        sweep_interval=settings.cache_sweep_interval_seconds,
    )
    resource_cache: TTLCache[str, Any] = TTLCache(
        settings.cache_ttl_seconds,
        name="resource",
        sweep_interval=settings.cache_sweep_interval_seconds,
    )
    directory = directory or InMemoryTenantDirectory()
    resolver = TenantResolver(directory, tenant_cache)
    gate = FeatureGate()
    return GatewayServices(
        tenant_cache=tenant_cache,
        resource_cache=resource_cache,
        directory=directory,
        users=users or InMemoryUserProvider(),
        analytics=analytics or InMemoryAnalyticsProvider(),
        resolver=resolver,
        gate=gate,
        pipeline=RequestPipeline(resolver, gate, resource_cache),
        bus=NotificationBus(),
    )
