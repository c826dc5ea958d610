"""Domain layer: entities, enums, and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from gateway.domain.entities import Tenant, TenantConfig, User
from gateway.domain.enums import Theme, UserRole
from gateway.domain.exceptions import (
    FeatureDisabledException,
    GatewayException,
    InternalException,
    TenantNotFoundException,
    ValidationException,
)

__all__ = [
    # Entities
    "Tenant",
    "TenantConfig",
    "User",
    # Enums
    "Theme",
    "UserRole",
    # Exceptions
    "FeatureDisabledException",
    "GatewayException",
    "InternalException",
    "TenantNotFoundException",
    "ValidationException",
]
