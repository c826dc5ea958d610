"""Collaborator interfaces (ports) for tenant-scoped data.

Protocols define the single lookup capability each dataset offers, so the
core can run against the in-memory implementations in tests and a real
backing store in production (DIP).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from gateway.domain.entities import Tenant, User


class TenantDirectory(Protocol):
    """Protocol for tenant lookup by directory identifier."""

    async def lookup(self, tenant_id: str) -> Tenant | None:
        """Return the tenant whose id matches tenant_id, or None if unknown."""
        ...


class UserProvider(Protocol):
    """Protocol for the user list of a tenant."""

    async def list_users(self, tenant: Tenant) -> list[User]:
        """Return all users belonging to tenant."""
        ...


class AnalyticsProvider(Protocol):
    """Protocol for the analytics summary of a tenant (JSON-serializable)."""

    async def summarize(self, tenant: Tenant) -> dict[str, Any]:
        """Return the analytics payload for tenant."""
        ...
