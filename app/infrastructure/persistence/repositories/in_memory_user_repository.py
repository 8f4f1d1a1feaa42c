"""In-memory implementation of UserRepository for testing."""
import uuid
from typing import Dict, Optional
from uuid import UUID

from app.domain.entities.user import User
from app.domain.exceptions import InvalidArgumentError, UsernameAlreadyExistsError
from app.domain.repositories.user_repository import UserRepository


class InMemoryUserRepository(UserRepository):
    """In-memory implementation; usernames are unique."""

    def __init__(self):
        self._users: Dict[UUID, User] = {}

    async def save(self, user: User) -> User:
        if user is None:
            raise InvalidArgumentError("User cannot be None")

        # Check for duplicate username held by another user
        for existing in self._users.values():
            if existing.username == user.username and existing.id != user.id:
                raise UsernameAlreadyExistsError(user.username)

        if not user.is_persisted:
            user.assign_id(uuid.uuid4())
        self._users[user.id] = user
        return user

    async def find_by_id(self, user_id: UUID) -> Optional[User]:
        if user_id is None:
            raise InvalidArgumentError("ID cannot be None")
        return self._users.get(user_id)

    async def find_by_username(self, username: str) -> Optional[User]:
        if username is None:
            raise InvalidArgumentError("Username cannot be None")
        return next((u for u in self._users.values() if u.username == username), None)

    async def exists_by_username(self, username: str) -> bool:
        return await self.find_by_username(username) is not None
