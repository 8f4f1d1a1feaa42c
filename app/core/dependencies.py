"""Dependency injection for FastAPI routes.
Follows Dependency Inversion Principle - routes depend on abstractions."""
from functools import lru_cache

from fastapi import Depends
from sqlalchemy.orm import Session

from app.application.ports.password_hasher import PasswordHasher
from app.application.use_cases.alcohol_shop_use_case import AlcoholShopUseCase
from app.application.use_cases.user_use_case import UserUseCase
from app.config import settings
from app.domain.repositories.alcohol_shop_repository import AlcoholShopRepository
from app.domain.repositories.user_repository import UserRepository
from app.infrastructure.persistence.db import get_db
from app.infrastructure.persistence.repositories.in_memory_alcohol_shop_repository import (
    InMemoryAlcoholShopRepository,
)
from app.infrastructure.persistence.repositories.in_memory_user_repository import (
    InMemoryUserRepository,
)
from app.infrastructure.persistence.repositories.sqlalchemy_alcohol_shop_repository import (
    SQLAlchemyAlcoholShopRepository,
)
from app.infrastructure.persistence.repositories.sqlalchemy_user_repository import (
    SQLAlchemyUserRepository,
)
from app.infrastructure.security.bcrypt_password_hasher import BcryptPasswordHasher


# In-memory stores live for the whole process
@lru_cache()
def _in_memory_shop_repository() -> InMemoryAlcoholShopRepository:
    return InMemoryAlcoholShopRepository()


@lru_cache()
def _in_memory_user_repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


def get_alcohol_shop_repository(db: Session = Depends(get_db)) -> AlcoholShopRepository:
    """Get shop repository instance.

    - Default: in-memory (fast tests/dev)
    - If USE_DB_REPOS=true: SQLAlchemy repository on the request's session
    """
    if settings.USE_DB_REPOS:
        return SQLAlchemyAlcoholShopRepository(db)
    return _in_memory_shop_repository()


def get_user_repository(db: Session = Depends(get_db)) -> UserRepository:
    """Get user repository instance."""
    if settings.USE_DB_REPOS:
        return SQLAlchemyUserRepository(db)
    return _in_memory_user_repository()


@lru_cache()
def get_password_hasher() -> PasswordHasher:
    return BcryptPasswordHasher(rounds=settings.BCRYPT_ROUNDS)


# Use case instances
def get_alcohol_shop_use_case(
    repository: AlcoholShopRepository = Depends(get_alcohol_shop_repository),
) -> AlcoholShopUseCase:
    """Get shop catalog use case."""
    return AlcoholShopUseCase(repository=repository)


def get_user_use_case(
    repository: UserRepository = Depends(get_user_repository),
    password_hasher: PasswordHasher = Depends(get_password_hasher),
) -> UserUseCase:
    """Get user management use case."""
    return UserUseCase(repository=repository, password_hasher=password_hasher)
