"""In-memory tenant directory, user provider and analytics provider.

Seeded with the demo tenants (ACME, StartX, Quantum). Used by default in
development and as fakes in tests; production deployments inject their
own implementations of the protocols in gateway.application.interfaces.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from gateway.domain.entities import Tenant, User
from gateway.domain.enums import UserRole

logger = logging.getLogger(__name__)

DEFAULT_TENANTS: list[dict[str, Any]] = [
    {
        "id": 1,
        "name": "ACME Corporation",
        "domain": "acme.example.com",
        "logo": "🏢",
        "config": {
            "theme": "light",
            "primaryColor": "#3b82f6",
            "features": {
                "analytics": True,
                "userManagement": True,
                "chat": True,
                "notifications": True,
            },
        },
    },
    {
        "id": 2,
        "name": "StartX Ventures",
        "domain": "startx.example.com",
        "logo": "🚀",
        "config": {
            "theme": "dark",
            "primaryColor": "#10b981",
            "features": {
                "analytics": True,
                "userManagement": True,
                "chat": False,
                "notifications": False,
            },
        },
    },
    {
        "id": 3,
        "name": "Quantum Industries",
        "domain": "quantum.example.com",
        "logo": "⚛️",
        "config": {
            "theme": "dark",
            "primaryColor": "#8b5cf6",
            "features": {
                "analytics": False,
                "userManagement": True,
                "chat": True,
                "notifications": True,
            },
        },
    },
]

# tenant id -> users
DEFAULT_USERS: dict[int, list[User]] = {
    1: [
        User(1, "Alice Johnson", "alice@acme.example.com", UserRole.ADMIN),
        User(2, "Bob Smith", "bob@acme.example.com", UserRole.MANAGER),
        User(3, "Carol White", "carol@acme.example.com", UserRole.MEMBER, active=False),
    ],
    2: [
        User(4, "Dan Brown", "dan@startx.example.com", UserRole.ADMIN),
        User(5, "Eve Davis", "eve@startx.example.com", UserRole.MEMBER),
    ],
    3: [
        User(6, "Frank Miller", "frank@quantum.example.com", UserRole.ADMIN),
        User(7, "Grace Lee", "grace@quantum.example.com", UserRole.MEMBER),
    ],
}

# tenant id -> monthly active users for the last six months
_MONTHLY_ACTIVE_USERS: dict[int, list[int]] = {
    1: [1200, 1350, 1420, 1580, 1710, 1890],
    2: [140, 210, 260, 330, 395, 470],
    3: [610, 590, 640, 655, 700, 720],
}
_MONTHS = ["Jan", "Feb", "Mar", "Apr", "May", "Jun"]


class InMemoryTenantDirectory:
    """Tenant directory backed by a dict keyed by numeric id."""

    def __init__(self, records: Iterable[Mapping[str, Any]] | None = None) -> None:
        """Load tenants from records (defaults to DEFAULT_TENANTS).

        Raises:
            ValidationException: If a record violates tenant invariants.
        """
        self._tenants: dict[int, Tenant] = {}
        for record in DEFAULT_TENANTS if records is None else records:
            self.add(Tenant.from_dict(record))

    def add(self, tenant: Tenant) -> None:
        """Register or replace a tenant."""
        self._tenants[tenant.id] = tenant

    def remove(self, tenant_id: int) -> None:
        """Forget a tenant; unknown ids are ignored."""
        self._tenants.pop(tenant_id, None)

    async def lookup(self, tenant_id: str) -> Tenant | None:
        try:
            numeric_id = int(tenant_id)
        except (TypeError, ValueError):
            return None
        tenant = self._tenants.get(numeric_id)
        logger.debug("Directory lookup %s: %s", tenant_id, "hit" if tenant else "miss")
        return tenant


class InMemoryUserProvider:
    """User lists keyed by tenant id."""

    def __init__(self, users: Mapping[int, list[User]] | None = None) -> None:
        self._users = dict(DEFAULT_USERS if users is None else users)

    async def list_users(self, tenant: Tenant) -> list[User]:
        return list(self._users.get(tenant.id, []))


class InMemoryAnalyticsProvider:
    """Analytics summary built from seeded monthly-active-user series."""

    def __init__(self, series: Mapping[int, list[int]] | None = None) -> None:
        self._series = dict(_MONTHLY_ACTIVE_USERS if series is None else series)

    async def summarize(self, tenant: Tenant) -> dict[str, Any]:
        values = self._series.get(tenant.id, [])
        latest = values[-1] if values else 0
        previous = values[-2] if len(values) > 1 else 0
        growth = round((latest - previous) / previous * 100, 1) if previous else 0.0
        return {
            "tenantId": tenant.id,
            "activeUsers": latest,
            "growthPercent": growth,
            "monthlyActiveUsers": [
                {"month": month, "value": value}
                for month, value in zip(_MONTHS, values)
            ],
        }
