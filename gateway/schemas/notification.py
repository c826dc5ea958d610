"""Notification API schemas."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class NotificationSendRequest(BaseModel):
    """Body of POST /api/notifications/send.

    Fields are optional here so that missing values produce the 400
    "Tenant ID and message are required" response rather than a 422.
    """

    model_config = ConfigDict(populate_by_name=True)

    tenant_id: str | int | None = Field(default=None, alias="tenantId")
    message: Any = None


class NotificationSendResponse(BaseModel):
    """Acknowledgement: the message was handed to the bus (best-effort)."""

    status: str = Field(default="Notification sent")
    delivered: int = Field(..., description="Connections the message was delivered to")


class NotificationStatusResponse(BaseModel):
    """Response for GET /api/notifications/status."""

    total_connections: int = Field(..., description="Connections in at least one topic")
    total_topics: int = Field(..., description="Topics with at least one member")


class ChatChannelResponse(BaseModel):
    """Response for GET /api/chat: where the tenant's real-time channel lives."""

    model_config = ConfigDict(populate_by_name=True)

    tenant_id: int = Field(..., alias="tenantId")
    room: str
    join_event: str = Field(..., alias="joinEvent")
