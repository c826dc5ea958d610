"""Application services: tenant resolution and feature gating."""

from gateway.application.services.feature_gate import FeatureGate
from gateway.application.services.tenant_resolver import TenantResolver

__all__ = ["FeatureGate", "TenantResolver"]
