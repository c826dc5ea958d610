"""Chat API: real-time channel details for tenants with ``chat`` enabled."""

from typing import Annotated

from fastapi import APIRouter, Depends

from gateway.api.dependencies import get_pipeline, get_tenant_header
from gateway.application.pipeline import RequestPipeline
from gateway.core.constants import EVENT_JOIN_TENANT_ROOM, FEATURE_CHAT
from gateway.domain.entities import Tenant
from gateway.schemas.notification import ChatChannelResponse

router = APIRouter()


async def _channel_for(tenant: Tenant) -> ChatChannelResponse:
    return ChatChannelResponse(
        tenant_id=tenant.id, room=tenant.key, join_event=EVENT_JOIN_TENANT_ROOM
    )


@router.get("", response_model=ChatChannelResponse)
async def get_chat_channel(
    tenant_id: Annotated[str | None, Depends(get_tenant_header)],
    pipeline: Annotated[RequestPipeline, Depends(get_pipeline)],
) -> ChatChannelResponse:
    """Return the room a chat client should join over /ws."""
    return await pipeline.run(tenant_id, _channel_for, feature=FEATURE_CHAT)
