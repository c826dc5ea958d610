"""Domain entities."""

from gateway.domain.entities.tenant import Tenant, TenantConfig
from gateway.domain.entities.user import User

__all__ = ["Tenant", "TenantConfig", "User"]
