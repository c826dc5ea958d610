"""Request timing middleware.

Measures wall-clock time from request start to the response start message
and reports it to the injected timing sinks. Wraps the send callable only;
responses pass through unmodified.
Uses raw ASGI (no BaseHTTPMiddleware) for production-safe streaming and background tasks.
"""

import logging
import time
from collections.abc import Sequence
from typing import Callable

from gateway.shared.telemetry.timing import RequestTiming, TimingSink

logger = logging.getLogger(__name__)


def _report(sinks: Sequence[TimingSink], timing: RequestTiming) -> None:
    for sink in sinks:
        try:
            sink.record(timing)
        except Exception:
            logger.exception("Timing sink %r failed", sink)


def TimingMiddleware(app: Callable, sinks: Sequence[TimingSink] = ()) -> Callable:
    """Report per-request duration to sinks. Raw ASGI."""

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return
        started = time.perf_counter()
        reported = False

        def emit(status_code: int) -> None:
            nonlocal reported
            if reported:
                return
            reported = True
            _report(
                sinks,
                RequestTiming(
                    method=scope.get("method", ""),
                    path=scope.get("path", ""),
                    status_code=status_code,
                    duration_ms=(time.perf_counter() - started) * 1000,
                ),
            )

        async def send_wrapper(message: dict) -> None:
            if message["type"] == "http.response.start":
                emit(message["status"])
            await send(message)

        try:
            await app(scope, receive, send_wrapper)
        except Exception:
            emit(500)
            raise

    return asgi_app
