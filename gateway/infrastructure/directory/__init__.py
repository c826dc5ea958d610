"""Directory backends for tenants, users and analytics."""

from gateway.infrastructure.directory.in_memory import (
    DEFAULT_TENANTS,
    DEFAULT_USERS,
    InMemoryAnalyticsProvider,
    InMemoryTenantDirectory,
    InMemoryUserProvider,
)

__all__ = [
    "DEFAULT_TENANTS",
    "DEFAULT_USERS",
    "InMemoryAnalyticsProvider",
    "InMemoryTenantDirectory",
    "InMemoryUserProvider",
]
