"""Tenant API schemas (camelCase on the wire)."""

from pydantic import BaseModel, ConfigDict, Field

from gateway.domain.entities import Tenant
from gateway.domain.enums import Theme


class TenantConfigResponse(BaseModel):
    """Presentation settings and feature flags."""

    model_config = ConfigDict(populate_by_name=True)

    theme: Theme
    primary_color: str = Field(..., alias="primaryColor")
    features: dict[str, bool]


class TenantResponse(BaseModel):
    """Response for GET /api/tenant."""

    id: int
    name: str
    domain: str
    logo: str | None = None
    config: TenantConfigResponse

    @classmethod
    def from_entity(cls, tenant: Tenant) -> "TenantResponse":
        return cls(
            id=tenant.id,
            name=tenant.name,
            domain=tenant.domain,
            logo=tenant.logo,
            config=TenantConfigResponse(
                theme=tenant.config.theme,
                primary_color=tenant.config.primary_color,
                features=dict(tenant.config.features),
            ),
        )
