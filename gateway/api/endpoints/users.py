"""Users API: tenant user list (feature ``userManagement``, cached)."""

from typing import Annotated, Any

from fastapi import APIRouter, Depends

from gateway.api.dependencies import get_pipeline, get_tenant_header, get_user_provider
from gateway.application.interfaces import UserProvider
from gateway.application.pipeline import RequestPipeline
from gateway.core.constants import CACHE_PREFIX_USERS, FEATURE_USER_MANAGEMENT
from gateway.domain.entities import Tenant
from gateway.schemas.user import UserResponse

router = APIRouter()


@router.get("", response_model=list[UserResponse])
async def list_users(
    tenant_id: Annotated[str | None, Depends(get_tenant_header)],
    pipeline: Annotated[RequestPipeline, Depends(get_pipeline)],
    provider: Annotated[UserProvider, Depends(get_user_provider)],
) -> list[dict[str, Any]]:
    """Return the tenant's users; served from cache within the TTL."""

    async def load(tenant: Tenant) -> list[dict[str, Any]]:
        users = await provider.list_users(tenant)
        return [UserResponse.from_entity(u).model_dump(mode="json") for u in users]

    return await pipeline.run(
        tenant_id,
        load,
        feature=FEATURE_USER_MANAGEMENT,
        resource=CACHE_PREFIX_USERS,
    )
