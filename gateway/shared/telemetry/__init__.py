"""Shared telemetry: logging setup, OpenTelemetry config, and request timing sinks."""

from gateway.shared.telemetry.logging import TenantContextFilter, setup_logging
from gateway.shared.telemetry.telemetry import (
    TelemetryConfig,
    get_telemetry,
    instrument_app,
    set_telemetry,
)
from gateway.shared.telemetry.timing import (
    LoggingTimingSink,
    MeterTimingSink,
    RequestTiming,
    TimingSink,
)

__all__ = [
    "setup_logging",
    "TenantContextFilter",
    "TelemetryConfig",
    "get_telemetry",
    "instrument_app",
    "set_telemetry",
    "LoggingTimingSink",
    "MeterTimingSink",
    "RequestTiming",
    "TimingSink",
]
