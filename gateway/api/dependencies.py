"""Presentation-layer dependency injection.

Provides FastAPI Depends() accessors for the per-app service container
(app.state.services). Routes depend only on these, never on module globals.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from gateway.application.interfaces import AnalyticsProvider, UserProvider
from gateway.application.pipeline import RequestPipeline
from gateway.core.config import get_settings
from gateway.core.services import GatewayServices
from gateway.infrastructure.messaging import NotificationBus


def get_services(request: Request) -> GatewayServices:
    """Service container built in create_app()."""
    return request.app.state.services


def get_pipeline(
    services: Annotated[GatewayServices, Depends(get_services)],
) -> RequestPipeline:
    return services.pipeline


def get_bus(
    services: Annotated[GatewayServices, Depends(get_services)],
) -> NotificationBus:
    return services.bus


def get_user_provider(
    services: Annotated[GatewayServices, Depends(get_services)],
) -> UserProvider:
    return services.users


def get_analytics_provider(
    services: Annotated[GatewayServices, Depends(get_services)],
) -> AnalyticsProvider:
    return services.analytics


def get_tenant_header(request: Request) -> str | None:
    """Raw tenant id from the configured header (None when absent).

    Validation is left to the request pipeline so every route reports
    the same 400 body.
    """
    return request.headers.get(get_settings().tenant_header_name)
