"""WebSocket endpoint: real-time tenant notifications over /ws.

Uses the notification bus from the app's service container. Clients send
``{"event": "joinTenantRoom", "data": "<tenantId>"}`` to subscribe and
receive ``{"event": "notification", "data": <message>}`` frames. Any client
may join any tenant's room; see DESIGN.md.
"""

import logging

from fastapi import APIRouter, WebSocket, WebSocketDisconnect

from gateway.api.websocket import WebSocketConnection
from gateway.core.constants import (
    EVENT_ERROR,
    EVENT_JOIN_TENANT_ROOM,
    EVENT_LEAVE_TENANT_ROOM,
    TENANT_ID_REQUIRED_MESSAGE,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["websocket"])


@router.websocket("")
async def websocket_endpoint(websocket: WebSocket):
    """Accept the socket, dispatch room events, and unregister on disconnect."""
    bus = websocket.app.state.services.bus
    await websocket.accept()
    connection = WebSocketConnection(websocket)
    try:
        while True:
            try:
                event, data = await connection.receive()
            except ValueError:
                await connection.send(EVENT_ERROR, {"error": "Malformed frame"})
                continue
            if event in (EVENT_JOIN_TENANT_ROOM, EVENT_LEAVE_TENANT_ROOM):
                if not isinstance(data, str) or not data:
                    await connection.send(EVENT_ERROR, {"error": TENANT_ID_REQUIRED_MESSAGE})
                    continue
                if event == EVENT_JOIN_TENANT_ROOM:
                    await bus.join(connection, data)
                    logger.info("Socket joined tenant room %s", data)
                else:
                    await bus.leave(connection, data)
            else:
                await connection.send(EVENT_ERROR, {"error": f"Unknown event: {event}"})
    except WebSocketDisconnect:
        pass
    finally:
        await bus.disconnect(connection)
