"""WebSocket adapter for the notification bus.

Used by the WebSocket endpoint to register client sockets as bus connections.
"""

from gateway.api.websocket.connection import WebSocketConnection

__all__ = ["WebSocketConnection"]
