"""FastAPI application entry point.

Wiring only: lifespan, exception handlers, middleware, routers.
No business logic here (SRP). See gateway.core.lifespan and
gateway.core.exception_handlers.

Settings are loaded inside create_app() so that tests can set env (and optionally
clear get_settings cache) before importing or calling create_app().
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from gateway.api import api_router, ws_router
from gateway.core.config import get_settings
from gateway.core.exception_handlers import register_exception_handlers
from gateway.core.lifespan import create_lifespan
from gateway.core.services import GatewayServices, build_services
from gateway.middleware import TenantContextMiddleware, TimingMiddleware
from gateway.shared.telemetry import (
    LoggingTimingSink,
    MeterTimingSink,
    TimingSink,
    instrument_app,
    setup_logging,
)


def create_app(services: GatewayServices | None = None) -> FastAPI:
    """Build and return the FastAPI application.

    Args:
        services: Pre-built service container (tests inject fakes here);
            built from settings when omitted.
    """
    settings = get_settings()
    setup_logging()
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        lifespan=create_lifespan,
    )
    app.state.services = services or build_services(settings)

    register_exception_handlers(app)

    sinks: list[TimingSink] = [LoggingTimingSink()]
    if settings.telemetry_enabled:
        sinks.append(MeterTimingSink())
        instrument_app(app)

    # Middleware: first added = innermost. Order: timing -> CORS -> tenant context.
    app.add_middleware(TenantContextMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.split_csv(settings.allowed_origins),
        allow_credentials=True,
        allow_methods=settings.split_csv(settings.allowed_methods),
        allow_headers=settings.split_csv(settings.allowed_headers),
    )
    app.add_middleware(TimingMiddleware, sinks=sinks)

    app.include_router(api_router, prefix="/api")
    app.include_router(ws_router, prefix="/ws")

    @app.get("/healthz", response_class=PlainTextResponse)
    def healthz() -> str:
        """Liveness probe."""
        return "OK"

    return app


app = create_app()
