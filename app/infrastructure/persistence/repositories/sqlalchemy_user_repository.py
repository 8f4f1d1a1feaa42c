"""SQLAlchemy implementation of UserRepository."""
import logging
import uuid
from typing import Optional
from uuid import UUID

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from app.domain.entities.role import Role
from app.domain.entities.user import User as UserEntity
from app.domain.exceptions import InvalidArgumentError, UsernameAlreadyExistsError
from app.domain.repositories.user_repository import UserRepository
from app.infrastructure.persistence import models
from app.infrastructure.persistence.repositories.sqlalchemy_alcohol_shop_repository import as_utc

logger = logging.getLogger(__name__)


def _to_entity(row: models.User) -> UserEntity:
    return UserEntity.restore(
        id=row.id,
        username=row.username,
        password_hash=row.password,
        role=Role(row.role),
        created_at=as_utc(row.created_at),
        updated_at=as_utc(row.updated_at),
    )


class SQLAlchemyUserRepository(UserRepository):
    """User repository using SQLAlchemy."""

    def __init__(self, session: Session):
        self.session = session

    async def save(self, user: UserEntity) -> UserEntity:
        if user is None:
            raise InvalidArgumentError("User cannot be None")

        row = self.session.get(models.User, user.id) if user.is_persisted else None
        if row is None:
            row = models.User(id=user.id or uuid.uuid4(), created_at=user.created_at)
            self.session.add(row)

        row.username = user.username
        row.password = user.password_hash
        row.role = user.role.value
        row.updated_at = user.updated_at

        try:
            self.session.commit()
        except IntegrityError as e:
            self.session.rollback()
            raise UsernameAlreadyExistsError(user.username) from e
        except SQLAlchemyError as e:
            self.session.rollback()
            logger.error(f"User transaction rolled back: {e}")
            raise

        self.session.refresh(row)
        user.assign_id(row.id)
        return _to_entity(row)

    async def find_by_id(self, user_id: UUID) -> Optional[UserEntity]:
        if user_id is None:
            raise InvalidArgumentError("ID cannot be None")
        row = self.session.get(models.User, user_id)
        return _to_entity(row) if row else None

    async def find_by_username(self, username: str) -> Optional[UserEntity]:
        if username is None:
            raise InvalidArgumentError("Username cannot be None")
        row = self.session.query(models.User).filter(models.User.username == username).first()
        return _to_entity(row) if row else None

    async def exists_by_username(self, username: str) -> bool:
        return await self.find_by_username(username) is not None
