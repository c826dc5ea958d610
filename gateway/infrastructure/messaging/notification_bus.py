"""Topic-scoped notification bus with a connection registry.

Topics are tenant ids. Connections join topics explicitly and are removed
on leave, on disconnect, or when a send to them fails. Publishing delivers
to the members registered at the moment of the call: no backlog, no
acknowledgement, no retry. State is process-local.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Protocol

from gateway.core.constants import EVENT_NOTIFICATION

logger = logging.getLogger(__name__)


class Connection(Protocol):
    """Transport-level handle able to push an event to one client.

    Implementations must be hashable (identity hashing is fine).
    """

    async def send(self, event: str, data: Any) -> None:
        """Deliver event with data; raise on transport failure."""
        ...


@dataclass(frozen=True)
class NotificationMessage:
    """A payload addressed to one tenant topic. Not stored after delivery."""

    topic: str
    payload: Any


class NotificationBus:
    """Manages topic membership and fan-out with tenant isolation.

    - join/leave/disconnect/publish are serialized on one asyncio.Lock.
    - publish snapshots members under the lock and sends outside it, so a
      slow client never blocks membership changes.
    - A connection may belong to any number of topics.
    """

    def __init__(self) -> None:
        """Initialize with empty registries."""
        self._members_by_topic: dict[str, set[Connection]] = {}
        self._topics_by_connection: dict[Connection, set[str]] = {}
        self._lock = asyncio.Lock()

    async def join(self, connection: Connection, topic: str) -> None:
        """Register connection under topic. Joining twice has no extra effect."""
        async with self._lock:
            self._members_by_topic.setdefault(topic, set()).add(connection)
            self._topics_by_connection.setdefault(connection, set()).add(topic)
        logger.debug("Connection joined topic %s", topic)

    async def leave(self, connection: Connection, topic: str) -> None:
        """Remove connection from topic; no-op when not a member."""
        async with self._lock:
            self._remove_membership(connection, topic)
        logger.debug("Connection left topic %s", topic)

    async def disconnect(self, connection: Connection) -> None:
        """Remove connection from every topic it is registered under."""
        async with self._lock:
            self._remove_connection(connection)

    async def publish(self, topic: str, message: Any) -> int:
        """Send message as a notification event to every member of topic.

        Args:
            topic: Tenant id addressed by the publish.
            message: JSON-serializable payload.

        Returns:
            Number of connections the message was delivered to.
        """
        notification = NotificationMessage(topic=topic, payload=message)
        async with self._lock:
            snapshot = list(self._members_by_topic.get(topic, ()))
        delivered = await self._send_to_list(snapshot, notification)
        logger.info(
            "Published notification to topic %s: %s/%s delivered",
            topic,
            delivered,
            len(snapshot),
        )
        return delivered

    async def _send_to_list(
        self, connections: list[Connection], notification: NotificationMessage
    ) -> int:
        """Send to each connection; drop the ones whose send fails."""
        dead: list[Connection] = []
        for connection in connections:
            try:
                await connection.send(EVENT_NOTIFICATION, notification.payload)
            except Exception:
                logger.warning(
                    "Dropping connection after failed send on topic %s",
                    notification.topic,
                    exc_info=True,
                )
                dead.append(connection)
        if dead:
            async with self._lock:
                for connection in dead:
                    self._remove_connection(connection)
        return len(connections) - len(dead)

    def _remove_membership(self, connection: Connection, topic: str) -> None:
        members = self._members_by_topic.get(topic)
        if members is not None:
            members.discard(connection)
            if not members:
                del self._members_by_topic[topic]
        topics = self._topics_by_connection.get(connection)
        if topics is not None:
            topics.discard(topic)
            if not topics:
                del self._topics_by_connection[connection]

    def _remove_connection(self, connection: Connection) -> None:
        for topic in self._topics_by_connection.pop(connection, set()):
            members = self._members_by_topic.get(topic)
            if members is None:
                continue
            members.discard(connection)
            if not members:
                del self._members_by_topic[topic]

    async def topics_for(self, connection: Connection) -> set[str]:
        """Return the topics connection is currently registered under."""
        async with self._lock:
            return set(self._topics_by_connection.get(connection, ()))

    async def topic_size(self, topic: str) -> int:
        """Return the number of connections registered under topic."""
        async with self._lock:
            return len(self._members_by_topic.get(topic, ()))

    async def connection_count(self) -> int:
        """Return the number of connections registered under at least one topic."""
        async with self._lock:
            return len(self._topics_by_connection)

    async def topic_count(self) -> int:
        """Return the number of topics with at least one member."""
        async with self._lock:
            return len(self._members_by_topic)
