"""Analytics API: tenant analytics summary (feature ``analytics``, cached)."""

from typing import Annotated, Any

from fastapi import APIRouter, Depends

from gateway.api.dependencies import (
    get_analytics_provider,
    get_pipeline,
    get_tenant_header,
)
from gateway.application.interfaces import AnalyticsProvider
from gateway.application.pipeline import RequestPipeline
from gateway.core.constants import CACHE_PREFIX_ANALYTICS, FEATURE_ANALYTICS

router = APIRouter()


@router.get("")
async def get_analytics(
    tenant_id: Annotated[str | None, Depends(get_tenant_header)],
    pipeline: Annotated[RequestPipeline, Depends(get_pipeline)],
    provider: Annotated[AnalyticsProvider, Depends(get_analytics_provider)],
) -> dict[str, Any]:
    """Return the analytics payload for the tenant; served from cache within the TTL."""
    return await pipeline.run(
        tenant_id,
        provider.summarize,
        feature=FEATURE_ANALYTICS,
        resource=CACHE_PREFIX_ANALYTICS,
    )
