"""Tests for domain entities (Tenant, TenantConfig, User) and enums."""

from dataclasses import FrozenInstanceError

import pytest

from gateway.domain.entities import Tenant, TenantConfig, User
from gateway.domain.enums import Theme, UserRole
from gateway.domain.exceptions import ValidationException
from gateway.infrastructure.directory import DEFAULT_TENANTS


def _config(**overrides) -> TenantConfig:
    values = {"theme": Theme.LIGHT, "primary_color": "#3b82f6", "features": {"chat": True}}
    values.update(overrides)
    return TenantConfig(**values)


def test_theme_values() -> None:
    assert Theme.values() == ["light", "dark"]


def test_user_role_is_str_enum() -> None:
    assert UserRole.ADMIN == "admin"


def test_tenant_from_dict_maps_camel_case_record() -> None:
    tenant = Tenant.from_dict(DEFAULT_TENANTS[0])
    assert tenant.id == 1
    assert tenant.key == "1"
    assert tenant.name == "ACME Corporation"
    assert tenant.config.theme is Theme.LIGHT
    assert tenant.config.primary_color == "#3b82f6"
    assert tenant.config.features["chat"] is True
    assert tenant.logo == "🏢"


def test_tenant_is_immutable() -> None:
    tenant = Tenant(id=1, name="A", domain="a.example.com", config=_config())
    with pytest.raises(FrozenInstanceError):
        tenant.name = "B"  # type: ignore[misc]


def test_tenant_features_are_read_only() -> None:
    source = {"chat": True}
    config = _config(features=source)
    with pytest.raises(TypeError):
        config.features["chat"] = False  # type: ignore[index]
    source["chat"] = False
    assert config.features["chat"] is True


@pytest.mark.parametrize("color", ["blue", "#fff", "#12345g", ""])
def test_invalid_primary_color_rejected(color: str) -> None:
    with pytest.raises(ValidationException) as exc_info:
        _config(primary_color=color)
    assert exc_info.value.details == {"field": "primaryColor"}


@pytest.mark.parametrize(
    ("kwargs", "field"),
    [
        ({"id": -1}, "id"),
        ({"name": "  "}, "name"),
        ({"domain": ""}, "domain"),
    ],
)
def test_tenant_validation(kwargs: dict, field: str) -> None:
    values = {"id": 1, "name": "A", "domain": "a.example.com", "config": _config()}
    values.update(kwargs)
    with pytest.raises(ValidationException) as exc_info:
        Tenant(**values)
    assert exc_info.value.details == {"field": field}


def test_unknown_theme_rejected() -> None:
    record = {**DEFAULT_TENANTS[0], "config": {**DEFAULT_TENANTS[0]["config"], "theme": "neon"}}
    with pytest.raises(ValueError):
        Tenant.from_dict(record)


def test_user_defaults_to_active() -> None:
    user = User(1, "Alice", "alice@example.com", UserRole.MEMBER)
    assert user.active is True
