"""Feature gate: decides whether a tenant's feature flags allow a feature."""

from gateway.domain.entities import Tenant
from gateway.domain.exceptions import FeatureDisabledException


class FeatureGate:
    """Pure decision over ``tenant.config.features``.

    A missing flag is treated exactly like an explicit False.
    """

    @staticmethod
    def allows(tenant: Tenant, feature: str) -> bool:
        """Return True iff the tenant's flag for feature is present and truthy."""
        return bool(tenant.config.features.get(feature, False))

    def check(self, tenant: Tenant, feature: str) -> None:
        """Raise FeatureDisabledException when feature is not allowed.

        Raises:
            FeatureDisabledException: With message "{feature} not enabled for this tenant".
        """
        if not self.allows(tenant, feature):
            raise FeatureDisabledException(feature)
