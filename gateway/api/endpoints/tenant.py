"""Tenant API: the resolved tenant's profile and configuration."""

from typing import Annotated

from fastapi import APIRouter, Depends

from gateway.api.dependencies import get_pipeline, get_tenant_header
from gateway.application.pipeline import RequestPipeline
from gateway.schemas.tenant import TenantResponse

router = APIRouter()


@router.get("", response_model=TenantResponse)
async def get_tenant(
    tenant_id: Annotated[str | None, Depends(get_tenant_header)],
    pipeline: Annotated[RequestPipeline, Depends(get_pipeline)],
) -> TenantResponse:
    """Return the tenant identified by the x-tenant-id header."""
    tenant = await pipeline.resolve_tenant(tenant_id)
    return TenantResponse.from_entity(tenant)
