"""Notifications API: publish to a tenant topic and inspect bus state."""

from typing import Annotated

from fastapi import APIRouter, Depends

from gateway.api.dependencies import get_bus
from gateway.domain.exceptions import ValidationException
from gateway.infrastructure.messaging import NotificationBus
from gateway.schemas.notification import (
    NotificationSendRequest,
    NotificationSendResponse,
    NotificationStatusResponse,
)

router = APIRouter()


@router.post("/send", response_model=NotificationSendResponse)
async def send_notification(
    bus: Annotated[NotificationBus, Depends(get_bus)],
    body: NotificationSendRequest | None = None,
) -> NotificationSendResponse:
    """Publish message to every connection joined to tenantId's room.

    Delivery is best-effort to the connections present right now; nothing
    is stored for clients that join later.
    """
    if body is None or body.tenant_id in (None, "") or body.message in (None, ""):
        raise ValidationException("Tenant ID and message are required")
    delivered = await bus.publish(str(body.tenant_id), body.message)
    return NotificationSendResponse(delivered=delivered)


@router.get("/status", response_model=NotificationStatusResponse)
async def notification_status(
    bus: Annotated[NotificationBus, Depends(get_bus)],
) -> NotificationStatusResponse:
    """Return the number of registered connections and active topics."""
    return NotificationStatusResponse(
        total_connections=await bus.connection_count(),
        total_topics=await bus.topic_count(),
    )
