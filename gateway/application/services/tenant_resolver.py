"""Cache-aware tenant resolution over a TenantDirectory.

Successful lookups are cached under ``tenant_{id}`` for the cache TTL.
Failed lookups are never cached, so a tenant created after a miss is
visible on the next request. Concurrent misses for the same id share one
directory call.
"""

from __future__ import annotations

import asyncio
import functools
import logging

from gateway.application.interfaces import TenantDirectory
from gateway.core.constants import TENANT_ID_REQUIRED_MESSAGE
from gateway.core.tenant_validation import is_valid_tenant_id_format
from gateway.domain.entities import Tenant
from gateway.domain.exceptions import TenantNotFoundException, ValidationException
from gateway.infrastructure.cache import CacheProtocol, tenant_key

logger = logging.getLogger(__name__)


class TenantResolver:
    """Resolve tenant ids to Tenant records, reading through a TTL cache."""

    def __init__(
        self, directory: TenantDirectory, cache: CacheProtocol[str, Tenant]
    ) -> None:
        self._directory = directory
        self._cache = cache
        self._inflight: dict[str, asyncio.Task[Tenant]] = {}

    async def resolve(self, tenant_id: str) -> Tenant:
        """Return the tenant for tenant_id.

        Args:
            tenant_id: Directory identifier as a decimal string (e.g. "1").

        Returns:
            The cached or freshly looked-up Tenant.

        Raises:
            ValidationException: If tenant_id is empty or not numeric.
            TenantNotFoundException: If the directory has no such tenant.
        """
        if not isinstance(tenant_id, str) or not tenant_id:
            raise ValidationException(TENANT_ID_REQUIRED_MESSAGE, field="tenant_id")
        if not is_valid_tenant_id_format(tenant_id):
            raise ValidationException(
                "Invalid tenant ID format (expected a numeric identifier)",
                field="tenant_id",
            )

        key = tenant_key(tenant_id)
        cached = self._cache.get(key)
        if cached is not None:
            return cached

        pending = self._inflight.get(key)
        if pending is None:
            # The fetch runs as its own task: cancelling one caller leaves
            # the lookup (and every other caller awaiting it) untouched.
            pending = asyncio.ensure_future(self._fetch(tenant_id, key))
            pending.add_done_callback(functools.partial(self._fetch_done, key))
            self._inflight[key] = pending
        return await asyncio.shield(pending)

    def _fetch_done(self, key: str, task: asyncio.Task[Tenant]) -> None:
        if self._inflight.get(key) is task:
            del self._inflight[key]
        if not task.cancelled():
            # Mark retrieved: every caller may have been cancelled already.
            task.exception()

    async def _fetch(self, tenant_id: str, key: str) -> Tenant:
        tenant = await self._directory.lookup(tenant_id)
        if tenant is None:
            logger.info("Tenant not found: %s", tenant_id)
            raise TenantNotFoundException(tenant_id)
        self._cache.set(key, tenant)
        logger.info("Tenant %s loaded from directory and cached", tenant_id)
        return tenant

    def invalidate(self, tenant_id: str) -> bool:
        """Drop the cached record for tenant_id. Returns True if one was cached."""
        return self._cache.delete(tenant_key(tenant_id))
