"""Ports (protocols) for the application layer."""

from gateway.application.interfaces.providers import (
    AnalyticsProvider,
    TenantDirectory,
    UserProvider,
)

__all__ = ["AnalyticsProvider", "TenantDirectory", "UserProvider"]
