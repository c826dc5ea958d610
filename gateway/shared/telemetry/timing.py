"""Request timing sinks.

TimingMiddleware measures each request from start to response start and
hands a RequestTiming to every configured sink.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Protocol

from opentelemetry import metrics

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RequestTiming:
    """Wall-clock duration of one HTTP request."""

    method: str
    path: str
    status_code: int
    duration_ms: float


class TimingSink(Protocol):
    """Receives one RequestTiming per completed request."""

    def record(self, timing: RequestTiming) -> None: ...


class LoggingTimingSink:
    """Logs ``[METHOD] /path - Response time: Nms``."""

    def __init__(self, logger_name: str = "gateway.timing") -> None:
        self._logger = logging.getLogger(logger_name)

    def record(self, timing: RequestTiming) -> None:
        self._logger.info(
            "[%s] %s - %s - Response time: %.1fms",
            timing.method,
            timing.path,
            timing.status_code,
            timing.duration_ms,
        )


class MeterTimingSink:
    """Records durations on an OpenTelemetry histogram.

    Without an explicit meter_provider the global one is used; instruments
    taken from it before TelemetryConfig installs the SDK provider start
    recording once it is installed.
    """

    def __init__(
        self,
        meter_name: str = "gateway",
        meter_provider: metrics.MeterProvider | None = None,
    ) -> None:
        meter = metrics.get_meter(meter_name, meter_provider=meter_provider)
        self._histogram = meter.create_histogram(
            "http.server.request.duration",
            unit="ms",
            description="Wall-clock duration from request start to response start",
        )

    def record(self, timing: RequestTiming) -> None:
        self._histogram.record(
            timing.duration_ms,
            attributes={
                "http.request.method": timing.method,
                "url.path": timing.path,
                "http.response.status_code": timing.status_code,
            },
        )
