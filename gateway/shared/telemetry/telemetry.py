"""OpenTelemetry tracing and metrics for the gateway.

The tracer and meter providers share one resource and one exporter choice
(console, otlp or none) and are installed as the global providers in the
application lifespan. FastAPI instrumentation and MeterTimingSink are
created earlier, in create_app(), against the global proxies, so they pick
up the providers once the lifespan installs them.
"""

import logging
import threading
from collections.abc import Sequence

from fastapi import FastAPI
from opentelemetry import metrics, trace
from opentelemetry.exporter.otlp.proto.grpc.metric_exporter import OTLPMetricExporter
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.sdk.metrics import MeterProvider
from opentelemetry.sdk.metrics.export import (
    ConsoleMetricExporter,
    MetricReader,
    PeriodicExportingMetricReader,
)
from opentelemetry.sdk.resources import SERVICE_NAME, SERVICE_VERSION, Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import (
    BatchSpanProcessor,
    ConsoleSpanExporter,
    SpanExporter,
)
from opentelemetry.sdk.trace.sampling import TraceIdRatioBased

logger = logging.getLogger(__name__)

# Probes are not traced.
EXCLUDED_URLS = "/healthz"


def instrument_app(app: FastAPI) -> None:
    """Trace every HTTP request of app through the global tracer provider.

    Must run before the app starts serving (Starlette refuses new
    middleware afterwards), hence it is called from create_app().
    """
    FastAPIInstrumentor.instrument_app(app, excluded_urls=EXCLUDED_URLS)
    logger.info("FastAPI instrumentation enabled")


class TelemetryConfig:
    """Tracer and meter providers for one gateway process."""

    def __init__(
        self,
        service_name: str,
        service_version: str,
        environment: str = "development",
    ) -> None:
        self.resource = Resource(
            attributes={
                SERVICE_NAME: service_name,
                SERVICE_VERSION: service_version,
                "deployment.environment": environment,
            }
        )
        self.tracer_provider: TracerProvider | None = None
        self.meter_provider: MeterProvider | None = None

    def setup_telemetry(
        self,
        exporter_type: str = "console",
        otlp_endpoint: str | None = None,
        sample_rate: float = 1.0,
        metric_readers: Sequence[MetricReader] = (),
    ) -> None:
        """Create both providers and install them globally.

        Args:
            exporter_type: "console", "otlp", or "none" (providers are
                installed but nothing is exported).
            otlp_endpoint: OTLP gRPC endpoint (e.g. http://localhost:4317);
                "otlp" without an endpoint falls back to console.
            sample_rate: Trace sampling ratio 0.0-1.0.
            metric_readers: Extra readers attached to the meter provider
                (e.g. a Prometheus or in-memory reader).
        """
        span_exporter, metric_exporter = self._exporters(exporter_type, otlp_endpoint)

        self.tracer_provider = TracerProvider(
            resource=self.resource, sampler=TraceIdRatioBased(sample_rate)
        )
        if span_exporter is not None:
            self.tracer_provider.add_span_processor(BatchSpanProcessor(span_exporter))

        readers = list(metric_readers)
        if metric_exporter is not None:
            readers.append(PeriodicExportingMetricReader(metric_exporter))
        self.meter_provider = MeterProvider(resource=self.resource, metric_readers=readers)

        trace.set_tracer_provider(self.tracer_provider)
        metrics.set_meter_provider(self.meter_provider)
        logger.info(
            "OpenTelemetry initialized: exporter=%s, sample_rate=%s, metric_readers=%d",
            exporter_type,
            sample_rate,
            len(readers),
        )

    @staticmethod
    def _exporters(exporter_type: str, otlp_endpoint: str | None):
        if exporter_type == "none":
            return None, None
        if exporter_type == "otlp" and otlp_endpoint:
            insecure = otlp_endpoint.startswith("http://")
            logger.info("Using OTLP exporters: %s", otlp_endpoint)
            return (
                OTLPSpanExporter(endpoint=otlp_endpoint, insecure=insecure),
                OTLPMetricExporter(endpoint=otlp_endpoint, insecure=insecure),
            )
        if exporter_type != "console":
            logger.warning("Unknown or incomplete exporter '%s', using console", exporter_type)
        span_exporter: SpanExporter = ConsoleSpanExporter()
        return span_exporter, ConsoleMetricExporter()

    def shutdown(self) -> None:
        """Flush and shut down both providers."""
        for provider in (self.tracer_provider, self.meter_provider):
            if provider is None:
                continue
            try:
                provider.shutdown()
            except Exception as e:
                logger.exception("Error during telemetry shutdown: %s", e)
        self.tracer_provider = None
        self.meter_provider = None
        logger.info("Telemetry shutdown complete")


_telemetry: TelemetryConfig | None = None
_telemetry_lock = threading.RLock()


def get_telemetry() -> TelemetryConfig | None:
    """Return the telemetry instance installed by the lifespan, if any."""
    with _telemetry_lock:
        return _telemetry


def set_telemetry(telemetry: TelemetryConfig | None) -> None:
    """Set (or clear, with None) the process telemetry instance."""
    global _telemetry
    with _telemetry_lock:
        _telemetry = telemetry
