"""Use case: user management (admin-facing)."""
import logging
from uuid import UUID

from app.application.dto.user_dto import CreateUserRequest, UserResponse
from app.application.ports.password_hasher import PasswordHasher
from app.domain.entities.role import Role
from app.domain.entities.user import User
from app.domain.exceptions import UserNotFoundError, UsernameAlreadyExistsError
from app.domain.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)


class UserUseCase:
    """Register users and apply the two permitted user mutations."""

    def __init__(self, repository: UserRepository, password_hasher: PasswordHasher):
        self._repository = repository
        self._hasher = password_hasher

    async def create_user(self, request: CreateUserRequest) -> UserResponse:
        """Register a user.

        Raises:
            UsernameAlreadyExistsError: username is taken
            InvalidArgumentError: blank username/password or unknown role
        """
        if await self._repository.exists_by_username(request.username):
            logger.warning(f"Username already taken: {request.username}")
            raise UsernameAlreadyExistsError(request.username)

        user = User.create(
            username=request.username,
            password_hash=self._hasher.hash(request.password),
            role=Role.parse(request.role),
        )
        saved = await self._repository.save(user)
        logger.info(f"Created user {saved.id} ({saved.username}, {saved.role.value})")
        return UserResponse.from_user(saved)

    async def find_by_id(self, user_id: UUID) -> UserResponse:
        return UserResponse.from_user(await self._load(user_id))

    async def rename(self, user_id: UUID, new_username: str) -> UserResponse:
        user = await self._load(user_id)
        if new_username != user.username and await self._repository.exists_by_username(new_username):
            raise UsernameAlreadyExistsError(new_username)

        user.update_information(new_username)
        saved = await self._repository.save(user)
        logger.info(f"Renamed user {user_id} to {new_username}")
        return UserResponse.from_user(saved)

    async def change_password(self, user_id: UUID, new_password: str) -> UserResponse:
        user = await self._load(user_id)
        user.change_password(self._hasher.hash(new_password))
        saved = await self._repository.save(user)
        logger.info(f"Changed password for user {user_id}")
        return UserResponse.from_user(saved)

    async def _load(self, user_id: UUID) -> User:
        user = await self._repository.find_by_id(user_id)
        if user is None:
            logger.warning(f"User {user_id} not found")
            raise UserNotFoundError(user_id)
        return user
