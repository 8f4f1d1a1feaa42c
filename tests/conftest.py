"""
Pytest configuration and shared fixtures for backend tests.

This module provides test fixtures for:
- Database sessions (in-memory SQLite for fast tests)
- Repositories and use cases wired to in-memory storage
- FastAPI test client with isolated dependencies
- Test data factories
"""

import os

# Must be set before app.infrastructure.persistence.db builds its engine
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")

from typing import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from app.application.dto.shop_dto import CoordinatesDTO, CreateAlcoholShopRequest
from app.application.use_cases.alcohol_shop_use_case import AlcoholShopUseCase
from app.application.use_cases.user_use_case import UserUseCase
from app.core import dependencies
from app.domain.entities.shop_type import ShopType
from app.infrastructure.persistence import models  # noqa: F401
from app.infrastructure.persistence.db import Base
from app.infrastructure.persistence.repositories.in_memory_alcohol_shop_repository import (
    InMemoryAlcoholShopRepository,
)
from app.infrastructure.persistence.repositories.in_memory_user_repository import (
    InMemoryUserRepository,
)
from app.infrastructure.security.bcrypt_password_hasher import BcryptPasswordHasher
from app.main import app

TEST_ADMIN_KEY = "test_admin_key"


# ==============================================================================
# DATABASE FIXTURES
# ==============================================================================

@pytest.fixture(scope="function")
def test_db_engine():
    """Create an in-memory SQLite database for testing."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    Base.metadata.create_all(bind=engine)

    yield engine

    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture(scope="function")
def test_db_session(test_db_engine) -> Generator[Session, None, None]:
    """Create a database session for testing."""
    TestingSessionLocal = sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=test_db_engine
    )

    session = TestingSessionLocal()

    try:
        yield session
    finally:
        session.rollback()
        session.close()


# ==============================================================================
# REPOSITORY & USE CASE FIXTURES
# ==============================================================================

@pytest.fixture
def shop_repository() -> InMemoryAlcoholShopRepository:
    return InMemoryAlcoholShopRepository()


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def password_hasher() -> BcryptPasswordHasher:
    # Minimum cost keeps tests fast
    return BcryptPasswordHasher(rounds=4)


@pytest.fixture
def shop_use_case(shop_repository) -> AlcoholShopUseCase:
    return AlcoholShopUseCase(repository=shop_repository)


@pytest.fixture
def user_use_case(user_repository, password_hasher) -> UserUseCase:
    return UserUseCase(repository=user_repository, password_hasher=password_hasher)


# ==============================================================================
# API FIXTURES
# ==============================================================================

@pytest.fixture(scope="function")
def client(shop_use_case, user_use_case) -> Generator[TestClient, None, None]:
    """Create a FastAPI test client backed by fresh in-memory repositories."""
    app.dependency_overrides[dependencies.get_alcohol_shop_use_case] = lambda: shop_use_case
    app.dependency_overrides[dependencies.get_user_use_case] = lambda: user_use_case

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def admin_headers(monkeypatch):
    """Headers with admin key for user-management requests."""
    monkeypatch.setenv("ADMIN_KEY", TEST_ADMIN_KEY)
    return {"X-Admin-Key": TEST_ADMIN_KEY}


@pytest.fixture
def invalid_admin_headers(monkeypatch):
    """Headers with a wrong admin key for testing auth failures."""
    monkeypatch.setenv("ADMIN_KEY", TEST_ADMIN_KEY)
    return {"X-Admin-Key": "invalid_key_12345"}


# ==============================================================================
# TEST DATA FACTORIES
# ==============================================================================

@pytest.fixture
def sample_shop_payload():
    """Sample shop creation body as the API receives it."""
    return {
        "name": "Wine Cellar",
        "address": "Moscow, Tverskaya st. 1",
        "coordinates": {"latitude": 55.7558, "longitude": 37.6173},
        "phone_number": "+79991234567",
        "working_hours": "9:00-22:00",
        "shop_type": "SPECIALTY",
    }


@pytest.fixture
def make_shop_request():
    """Factory for CreateAlcoholShopRequest with overridable fields."""
    def _make(**overrides) -> CreateAlcoholShopRequest:
        fields = dict(
            name="Wine Cellar",
            address="Moscow, Tverskaya st. 1",
            coordinates=CoordinatesDTO(latitude=55.7558, longitude=37.6173),
            phone_number="+79991234567",
            working_hours="9:00-22:00",
            shop_type=ShopType.SPECIALTY,
        )
        fields.update(overrides)
        return CreateAlcoholShopRequest(**fields)

    return _make


@pytest.fixture(autouse=True)
def reset_environment():
    """Reset environment variables after each test."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)


# ==============================================================================
# MARKERS
# ==============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "unit: Mark test as a unit test"
    )
    config.addinivalue_line(
        "markers", "integration: Mark test as an integration test"
    )
