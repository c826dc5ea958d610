"""API router aggregation.

Includes all endpoint modules with consistent prefix and tags. All routes
use dependencies from gateway.api.dependencies (no manual service construction).
"""

from fastapi import APIRouter

from gateway.api.endpoints import (
    analytics,
    chat,
    notifications,
    tenant,
    users,
    websocket as ws_endpoint,
)

api_router = APIRouter()

api_router.include_router(tenant.router, prefix="/tenant", tags=["tenant"])
api_router.include_router(analytics.router, prefix="/analytics", tags=["analytics"])
api_router.include_router(users.router, prefix="/users", tags=["users"])
api_router.include_router(chat.router, prefix="/chat", tags=["chat"])
api_router.include_router(
    notifications.router, prefix="/notifications", tags=["notifications"]
)

# Mounted by the app under /ws (a route path and prefix cannot both be empty).
ws_router = ws_endpoint.router
