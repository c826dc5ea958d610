"""Domain enumerations for the tenant gateway."""

from enum import Enum


class Theme(str, Enum):
    """UI theme configured per tenant."""

    LIGHT = "light"
    DARK = "dark"

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid theme values as strings."""
        return [theme.value for theme in cls]


class UserRole(str, Enum):
    """Role of a user inside a tenant."""

    ADMIN = "admin"
    MANAGER = "manager"
    MEMBER = "member"
