"""HTTP and WebSocket API."""

from gateway.api.router import api_router, ws_router

__all__ = ["api_router", "ws_router"]
