"""User aggregate root."""
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional
from uuid import UUID

from app.constants import USERNAME_MAX_LENGTH, USERNAME_MIN_LENGTH
from app.domain.entities.role import Role
from app.domain.exceptions import InvalidArgumentError


def _require_text(value: Optional[str], message: str) -> None:
    if value is None or not isinstance(value, str) or not value.strip():
        raise InvalidArgumentError(message)


def _require_username(username: Optional[str]) -> None:
    _require_text(username, "Username cannot be blank")
    if not USERNAME_MIN_LENGTH <= len(username) <= USERNAME_MAX_LENGTH:
        raise InvalidArgumentError(
            f"Username must be between {USERNAME_MIN_LENGTH} and {USERNAME_MAX_LENGTH} characters"
        )


@dataclass(frozen=True, eq=False)
class User:
    """User aggregate.

    ``update_information`` and ``change_password`` are the only mutations;
    both move ``updated_at`` strictly forward. Equality is by identifier.
    """
    username: str
    password_hash: str
    role: Role
    created_at: datetime
    updated_at: datetime
    id: Optional[UUID] = None

    @classmethod
    def create(cls, username: str, password_hash: str, role: Role) -> "User":
        _require_username(username)
        _require_text(password_hash, "Password hash cannot be blank")
        if not isinstance(role, Role):
            raise InvalidArgumentError("Role is required")

        now = datetime.now(timezone.utc)
        return cls(
            username=username,
            password_hash=password_hash,
            role=role,
            created_at=now,
            updated_at=now,
        )

    @classmethod
    def restore(
        cls,
        id: UUID,
        username: str,
        password_hash: str,
        role: Role,
        created_at: datetime,
        updated_at: datetime,
    ) -> "User":
        """Rebuild a persisted user from storage."""
        user = cls(
            username=username,
            password_hash=password_hash,
            role=role,
            created_at=created_at,
            updated_at=max(updated_at, created_at),
        )
        user.assign_id(id)
        return user

    def assign_id(self, user_id: UUID) -> None:
        """Attach the storage-generated identifier (storage adapters only)."""
        if user_id is None:
            raise InvalidArgumentError("ID cannot be None")
        if self.id is not None and self.id != user_id:
            raise InvalidArgumentError(f"User already has id {self.id}")
        object.__setattr__(self, "id", user_id)

    @property
    def is_persisted(self) -> bool:
        return self.id is not None

    def update_information(self, username: str) -> None:
        _require_username(username)
        object.__setattr__(self, "username", username)
        self._touch()

    def change_password(self, password_hash: str) -> None:
        _require_text(password_hash, "Password hash cannot be blank")
        object.__setattr__(self, "password_hash", password_hash)
        self._touch()

    def _touch(self) -> None:
        # Clock reads can repeat within the same microsecond
        now = datetime.now(timezone.utc)
        floor = self.updated_at + timedelta(microseconds=1)
        object.__setattr__(self, "updated_at", now if now >= floor else floor)

    def __eq__(self, other) -> bool:
        if self is other:
            return True
        if not isinstance(other, User):
            return NotImplemented
        return self.id is not None and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id) if self.id is not None else id(self)

    def __repr__(self) -> str:
        return (
            f"User(id={self.id!r}, username={self.username!r}, role={self.role.value}, "
            f"created_at={self.created_at!r}, updated_at={self.updated_at!r})"
        )
