"""Bus connection backed by a FastAPI WebSocket.

Frames are JSON objects ``{"event": <name>, "data": <payload>}`` in both
directions.
"""

from __future__ import annotations

import json
from typing import Any

from fastapi import WebSocket, WebSocketDisconnect


class WebSocketConnection:
    """Wraps one accepted WebSocket; hashed by identity."""

    def __init__(self, websocket: WebSocket) -> None:
        self.websocket = websocket

    async def send(self, event: str, data: Any) -> None:
        await self.websocket.send_json({"event": event, "data": data})

    async def receive(self) -> tuple[str | None, Any]:
        """Return (event, data) from the next client frame.

        Raises:
            WebSocketDisconnect: When the client goes away.
            ValueError: If the frame is binary or not valid JSON.
        """
        message = await self.websocket.receive()
        if message["type"] == "websocket.disconnect":
            raise WebSocketDisconnect(message.get("code", 1000), message.get("reason"))
        text = message.get("text")
        if text is None:
            raise ValueError("Binary frames are not supported")
        frame = json.loads(text)
        if not isinstance(frame, dict):
            return None, frame
        event = frame.get("event")
        return (event if isinstance(event, str) else None), frame.get("data")
