"""User API schemas."""

from pydantic import BaseModel

from gateway.domain.entities import User
from gateway.domain.enums import UserRole


class UserResponse(BaseModel):
    """One entry of GET /api/users."""

    id: int
    name: str
    email: str
    role: UserRole
    active: bool

    @classmethod
    def from_entity(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id,
            name=user.name,
            email=user.email,
            role=user.role,
            active=user.active,
        )
