"""User repository interface - abstraction for data access."""
from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from app.domain.entities.user import User


class UserRepository(ABC):
    """Storage port for the User aggregate."""

    @abstractmethod
    async def save(self, user: User) -> User:
        """Insert or update a user and return it with its identifier."""
        pass

    @abstractmethod
    async def find_by_id(self, user_id: UUID) -> Optional[User]:
        """Get user by ID."""
        pass

    @abstractmethod
    async def find_by_username(self, username: str) -> Optional[User]:
        """Get user by username."""
        pass

    @abstractmethod
    async def exists_by_username(self, username: str) -> bool:
        """Check whether a username is taken."""
        pass
