"""Request pipeline for tenant-scoped routes.

Orchestrates, per request: tenant id extraction check, tenant resolution,
optional feature gate, and handler invocation with an optional
resource-scoped cache. Every failure surfaces as a GatewayException
subclass that the exception handlers map to an HTTP status.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

from gateway.application.services import FeatureGate, TenantResolver
from gateway.core.constants import TENANT_ID_REQUIRED_MESSAGE
from gateway.domain.entities import Tenant
from gateway.domain.exceptions import (
    GatewayException,
    InternalException,
    ValidationException,
)
from gateway.infrastructure.cache import CacheProtocol, resource_key

logger = logging.getLogger(__name__)

T = TypeVar("T")

TenantHandler = Callable[[Tenant], Awaitable[T]]


class RequestPipeline:
    """Resolve -> gate -> handle, for one tenant-scoped request at a time.

    Stateless apart from its collaborators; one instance serves all
    concurrent requests.
    """

    def __init__(
        self,
        resolver: TenantResolver,
        gate: FeatureGate,
        resource_cache: CacheProtocol[str, Any],
    ) -> None:
        self.resolver = resolver
        self.gate = gate
        self.resource_cache = resource_cache

    async def resolve_tenant(self, raw_tenant_id: object) -> Tenant:
        """Validate the extracted tenant id and resolve it.

        Raises:
            ValidationException: If the id is absent, empty or not a string.
            TenantNotFoundException: If the directory has no such tenant.
            InternalException: On any other resolver failure.
        """
        if not raw_tenant_id or not isinstance(raw_tenant_id, str):
            raise ValidationException(TENANT_ID_REQUIRED_MESSAGE, field="tenant_id")
        try:
            return await self.resolver.resolve(raw_tenant_id)
        except GatewayException:
            raise
        except Exception as exc:
            logger.exception("Tenant resolution failed for %s", raw_tenant_id)
            raise InternalException("Internal server error", reason=str(exc)) from exc

    async def run(
        self,
        raw_tenant_id: object,
        handler: TenantHandler[T],
        *,
        feature: str | None = None,
        resource: str | None = None,
    ) -> T:
        """Run the full pipeline for one request.

        Args:
            raw_tenant_id: Value of the tenant header (None when absent).
            handler: Coroutine function producing the response payload.
            feature: Feature flag the route requires, if any.
            resource: Resource name; when set the handler result is cached
                under "{resource}_{tenant_id}".

        Returns:
            Handler result (possibly served from the resource cache).
        """
        tenant = await self.resolve_tenant(raw_tenant_id)
        if feature is not None:
            self.gate.check(tenant, feature)
        # resolve_tenant guarantees a non-empty str here
        return await self.invoke(str(raw_tenant_id), tenant, handler, resource=resource)

    async def invoke(
        self,
        tenant_id: str,
        tenant: Tenant,
        handler: TenantHandler[T],
        *,
        resource: str | None = None,
    ) -> T:
        """Invoke handler for an already resolved (and gated) tenant."""
        key = resource_key(resource, tenant_id) if resource else None
        if key is not None:
            cached = self.resource_cache.get(key)
            if cached is not None:
                return cached
        try:
            result = await handler(tenant)
        except GatewayException:
            raise
        except Exception as exc:
            logger.exception("Handler failed for %s (tenant %s)", resource or "request", tenant_id)
            raise InternalException(
                f"Failed to retrieve {resource or 'tenant'} data", reason=str(exc)
            ) from exc
        if key is not None:
            self.resource_cache.set(key, result)
        return result
