"""Tests for Settings loading and validation."""

import pytest
from pydantic import ValidationError

from gateway.core.config import Settings, get_settings


def test_defaults() -> None:
    settings = Settings()
    assert settings.tenant_header_name == "x-tenant-id"
    assert settings.cache_ttl_seconds == 300
    assert settings.cache_sweep_interval_seconds is None
    assert settings.expose_error_details is True


def test_env_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CACHE_TTL_SECONDS", "60")
    monkeypatch.setenv("ALLOWED_ORIGINS", "https://a.example, https://b.example,")
    settings = get_settings()
    assert settings.cache_ttl_seconds == 60
    assert settings.split_csv(settings.allowed_origins) == [
        "https://a.example",
        "https://b.example",
    ]


@pytest.mark.parametrize(
    ("env", "value"),
    [
        ("CACHE_TTL_SECONDS", "0"),
        ("CACHE_SWEEP_INTERVAL_SECONDS", "-5"),
        ("TELEMETRY_SAMPLE_RATE", "1.5"),
    ],
)
def test_invalid_values_rejected(monkeypatch: pytest.MonkeyPatch, env: str, value: str) -> None:
    monkeypatch.setenv(env, value)
    with pytest.raises(ValidationError):
        Settings()


def test_build_services_uses_configured_ttl(monkeypatch: pytest.MonkeyPatch) -> None:
    from gateway.core.services import build_services

    monkeypatch.setenv("CACHE_TTL_SECONDS", "30")
    monkeypatch.setenv("CACHE_SWEEP_INTERVAL_SECONDS", "5")
    services = build_services(get_settings())
    assert services.tenant_cache.ttl == 30
    assert services.resource_cache.sweep_interval == 5
