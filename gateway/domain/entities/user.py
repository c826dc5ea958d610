"""User domain entity (tenant-scoped user list entries)."""

from dataclasses import dataclass

from gateway.domain.enums import UserRole


@dataclass(frozen=True)
class User:
    """A user belonging to one tenant."""

    id: int
    name: str
    email: str
    role: UserRole
    active: bool = True
