"""Tenant domain entity.

Represents a customer organization as loaded from the tenant directory,
independent of storage. Immutable once constructed.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from gateway.domain.enums import Theme
from gateway.domain.exceptions import ValidationException

_COLOR_RE = re.compile(r"^#[0-9a-fA-F]{6}$")


@dataclass(frozen=True)
class TenantConfig:
    """Presentation settings and feature flags of a tenant.

    The feature mapping is wrapped read-only on construction so a cached
    tenant cannot be mutated through a shared reference.
    """

    theme: Theme
    primary_color: str
    features: Mapping[str, bool] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not _COLOR_RE.fullmatch(self.primary_color):
            raise ValidationException(
                f"Invalid primary color: {self.primary_color!r}", field="primaryColor"
            )
        object.__setattr__(self, "features", MappingProxyType(dict(self.features)))


@dataclass(frozen=True)
class Tenant:
    """Domain entity for a tenant.

    Identified by a numeric id; looked up by its decimal string form.
    Validation runs on construction.
    """

    id: int
    name: str
    domain: str
    config: TenantConfig
    logo: str | None = None

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """Validate tenant invariants. Raises ValidationException if invalid."""
        if self.id < 0:
            raise ValidationException("Tenant ID must be non-negative", field="id")
        if not self.name or not self.name.strip():
            raise ValidationException("Tenant name is required", field="name")
        if not self.domain or not self.domain.strip():
            raise ValidationException("Tenant domain is required", field="domain")

    @property
    def key(self) -> str:
        """Directory identifier in string form (as passed in x-tenant-id)."""
        return str(self.id)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Tenant:
        """Build a tenant from a directory record (camelCase keys as stored)."""
        config = data["config"]
        return cls(
            id=int(data["id"]),
            name=data["name"],
            domain=data["domain"],
            logo=data.get("logo"),
            config=TenantConfig(
                theme=Theme(config["theme"]),
                primary_color=config["primaryColor"],
                features=dict(config.get("features", {})),
            ),
        )
