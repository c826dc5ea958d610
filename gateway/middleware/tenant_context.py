"""Tenant context middleware.

Sets the current tenant ID in context from the tenant header so that log
records emitted while the request is served carry it. Does not validate
the id; resolution happens in the request pipeline.
"""

from __future__ import annotations

from typing import Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from gateway.core.config import get_settings
from gateway.core.tenant_context import set_tenant_id


def TenantContextMiddleware(app: Callable) -> Callable:
    """Set tenant context (for logging) from the tenant header before route runs."""

    class _Middleware(BaseHTTPMiddleware):
        async def dispatch(self, request: Request, call_next: Callable) -> Response:
            set_tenant_id(request.headers.get(get_settings().tenant_header_name))
            try:
                return await call_next(request)
            finally:
                set_tenant_id(None)

    return _Middleware(app)
