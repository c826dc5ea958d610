"""Application configuration (settings and environment).

Single source of truth for all configuration. Uses pydantic-settings
with .env support. Values are validated at load time.
"""

from functools import lru_cache

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment and .env."""

    # App
    app_name: str = "tenant-gateway"
    app_version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"

    # CORS (full verb set; see DESIGN.md open questions)
    allowed_origins: str = "https://dashbro.netlify.app"
    allowed_methods: str = "GET,POST,PUT,DELETE,OPTIONS,PATCH"
    allowed_headers: str = "Content-Type,Authorization,x-tenant-id"

    # Tenant
    tenant_header_name: str = "x-tenant-id"

    # In-process TTL caches (tenant records and tenant-scoped resources)
    cache_ttl_seconds: float = 300.0
    # None = sweep on the same period as the TTL
    cache_sweep_interval_seconds: float | None = None

    # Surface the underlying reason of 500 errors in the response body.
    expose_error_details: bool = True

    # OpenTelemetry
    telemetry_enabled: bool = False
    telemetry_exporter: str = "console"
    telemetry_otlp_endpoint: str | None = None
    telemetry_sample_rate: float = 1.0
    telemetry_environment: str = "development"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @model_validator(mode="after")
    def validate_cache_and_telemetry(self) -> "Settings":
        """Validate cache timings and telemetry sampling bounds."""
        if self.cache_ttl_seconds <= 0:
            raise ValueError(
                f"CACHE_TTL_SECONDS must be positive, got: {self.cache_ttl_seconds!r}"
            )
        if (
            self.cache_sweep_interval_seconds is not None
            and self.cache_sweep_interval_seconds <= 0
        ):
            raise ValueError(
                "CACHE_SWEEP_INTERVAL_SECONDS must be positive when set, got: "
                f"{self.cache_sweep_interval_seconds!r}"
            )
        if not 0.0 <= self.telemetry_sample_rate <= 1.0:
            raise ValueError(
                f"TELEMETRY_SAMPLE_RATE must be between 0 and 1, got: {self.telemetry_sample_rate!r}"
            )
        return self

    @staticmethod
    def split_csv(value: str) -> list[str]:
        """Split a comma-separated setting into stripped, non-empty items."""
        return [item.strip() for item in value.split(",") if item.strip()]


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings (single instance per process).

    Validation runs on first call, not at import time. In tests, call
    get_settings.cache_clear() before overriding env vars so the next
    get_settings() uses the new values.

    Returns:
        Loaded and validated Settings instance.
    """
    return Settings()
