"""Application lifespan: startup and shutdown.

Single place for all startup/shutdown logic (SRP). Used by main.py; the
service container itself is built in create_app(), here its sweep timers
are started and stopped, and telemetry is wired.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from gateway.core.config import get_settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown.

    Startup order: cache sweep timers, telemetry (if enabled).
    Shutdown order: cache sweep timers, telemetry shutdown.
    """
    settings = get_settings()

    # ---- Startup ----
    services = app.state.services
    services.start()

    if settings.telemetry_enabled:
        from gateway.shared.telemetry.telemetry import TelemetryConfig, set_telemetry

        telemetry = TelemetryConfig(
            service_name=settings.app_name,
            service_version=settings.app_version,
            environment=settings.telemetry_environment,
        )
        telemetry.setup_telemetry(
            exporter_type=settings.telemetry_exporter,
            otlp_endpoint=settings.telemetry_otlp_endpoint,
            sample_rate=settings.telemetry_sample_rate,
        )
        set_telemetry(telemetry)
        logger.info("Telemetry initialized")

    logger.info("%s %s started", settings.app_name, settings.app_version)

    yield

    # ---- Shutdown ----
    await services.stop()
    logger.info("Cache sweep timers stopped")

    from gateway.shared.telemetry.telemetry import get_telemetry, set_telemetry

    telemetry_instance = get_telemetry()
    if telemetry_instance is not None:
        telemetry_instance.shutdown()
        set_telemetry(None)
