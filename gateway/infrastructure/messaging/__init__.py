"""Messaging: tenant-scoped in-process notification pub/sub."""

from gateway.infrastructure.messaging.notification_bus import (
    Connection,
    NotificationBus,
    NotificationMessage,
)

__all__ = ["Connection", "NotificationBus", "NotificationMessage"]
