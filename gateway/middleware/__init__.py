"""HTTP middleware: request timing and tenant context.

Applied in main app; order matters (last added = outermost).
Import and use from gateway.main.
"""

from gateway.middleware.tenant_context import TenantContextMiddleware
from gateway.middleware.timing import TimingMiddleware

__all__ = [
    "TenantContextMiddleware",
    "TimingMiddleware",
]
