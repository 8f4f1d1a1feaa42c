"""Data Transfer Objects for user management."""
from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from app.domain.entities.role import Role
from app.domain.entities.user import User


@dataclass
class CreateUserRequest:
    username: str
    password: str
    role: Role


@dataclass
class UserResponse:
    """User without credentials."""
    id: UUID
    username: str
    role: Role
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id,
            username=user.username,
            role=user.role,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )
