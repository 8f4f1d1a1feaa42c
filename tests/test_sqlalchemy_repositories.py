"""Integration tests for the SQLAlchemy repositories on in-memory SQLite."""
from dataclasses import replace
from unittest.mock import MagicMock
from uuid import uuid4

import pytest
from sqlalchemy.exc import DataError, OperationalError

from app.domain.entities.alcohol_shop import AlcoholShop
from app.domain.entities.role import Role
from app.domain.entities.shop_type import ShopType
from app.domain.entities.user import User
from app.domain.exceptions import InvalidArgumentError, ShopNotFoundError, UsernameAlreadyExistsError
from app.domain.repositories.paging import PageRequest
from app.domain.value_objects.coordinates import Coordinates
from app.domain.value_objects.phone_number import PhoneNumber
from app.domain.value_objects.working_hours import WorkingHours
from app.infrastructure.persistence.repositories.sqlalchemy_alcohol_shop_repository import (
    SQLAlchemyAlcoholShopRepository,
)
from app.infrastructure.persistence.repositories.sqlalchemy_user_repository import (
    SQLAlchemyUserRepository,
)

pytestmark = [pytest.mark.integration, pytest.mark.asyncio]


@pytest.fixture
def shop_repo(test_db_session):
    return SQLAlchemyAlcoholShopRepository(test_db_session)


@pytest.fixture
def user_repo(test_db_session):
    return SQLAlchemyUserRepository(test_db_session)


def new_shop(name="Wine Cellar", shop_type=ShopType.SPECIALTY, **overrides):
    fields = dict(
        name=name,
        address="Moscow, Tverskaya st. 1",
        coordinates=Coordinates(55.7558, 37.6173),
        phone_number=PhoneNumber("+79991234567"),
        working_hours=WorkingHours("22:00-02:00"),
        shop_type=shop_type,
    )
    fields.update(overrides)
    return AlcoholShop.create(**fields)


class TestSQLAlchemyAlcoholShopRepository:

    async def test_save_assigns_id_and_round_trips(self, shop_repo):
        shop = new_shop()

        saved = await shop_repo.save(shop)

        assert saved.id is not None
        assert shop.id == saved.id
        loaded = await shop_repo.find_by_id(saved.id)
        assert loaded == saved
        assert loaded.name == "Wine Cellar"
        assert loaded.coordinates == Coordinates(55.7558, 37.6173)
        assert loaded.phone_number == PhoneNumber("+79991234567")
        assert loaded.working_hours == WorkingHours("22:00-02:00")
        assert loaded.shop_type is ShopType.SPECIALTY
        assert loaded.created_at == shop.created_at
        assert loaded.created_at.tzinfo is not None

    async def test_optional_fields_round_trip_as_none(self, shop_repo):
        saved = await shop_repo.save(new_shop(phone_number=None, working_hours=None, shop_type=None))

        loaded = await shop_repo.find_by_id(saved.id)

        assert loaded.phone_number is None
        assert loaded.working_hours is None
        assert loaded.shop_type is None

    async def test_save_again_updates_row(self, shop_repo):
        saved = await shop_repo.save(new_shop())
        renamed = replace(saved, name="Renamed Cellar")

        await shop_repo.save(renamed)

        loaded = await shop_repo.find_by_id(saved.id)
        assert loaded.name == "Renamed Cellar"
        page = await shop_repo.find_all(PageRequest(page=0, size=10, sort_by="name"))
        assert page.total_elements == 1

    async def test_find_missing_returns_none(self, shop_repo):
        assert await shop_repo.find_by_id(uuid4()) is None
        assert await shop_repo.exists_by_id(uuid4()) is False

    async def test_none_id_rejected(self, shop_repo):
        with pytest.raises(InvalidArgumentError):
            await shop_repo.find_by_id(None)

    async def test_find_all_sorts_and_pages(self, shop_repo):
        for name in ["Delta", "Alpha", "Charlie", "Bravo"]:
            await shop_repo.save(new_shop(name=name))

        first = await shop_repo.find_all(PageRequest(page=0, size=3, sort_by="name"))
        second = await shop_repo.find_all(PageRequest(page=1, size=3, sort_by="name"))

        assert [s.name for s in first.content] == ["Alpha", "Bravo", "Charlie"]
        assert [s.name for s in second.content] == ["Delta"]
        assert first.total_elements == second.total_elements == 4
        assert first.total_pages == 2

    async def test_find_all_empty(self, shop_repo):
        page = await shop_repo.find_all(PageRequest(page=0, size=10, sort_by="name"))
        assert page.content == []
        assert page.total_pages == 0

    async def test_find_all_unknown_sort_field(self, shop_repo):
        with pytest.raises(InvalidArgumentError):
            await shop_repo.find_all(PageRequest(page=0, size=10, sort_by="latitude"))

    async def test_delete(self, shop_repo):
        saved = await shop_repo.save(new_shop())

        await shop_repo.delete_by_id(saved.id)

        assert await shop_repo.exists_by_id(saved.id) is False
        with pytest.raises(ShopNotFoundError):
            await shop_repo.delete_by_id(saved.id)


class TestSQLAlchemyUserRepository:

    async def test_save_and_find(self, user_repo):
        user = User.create("alice", "hash", Role.ADMIN)

        saved = await user_repo.save(user)

        assert saved.id is not None
        by_id = await user_repo.find_by_id(saved.id)
        by_name = await user_repo.find_by_username("alice")
        assert by_id == by_name == saved
        assert by_id.role is Role.ADMIN
        assert by_id.password_hash == "hash"
        assert await user_repo.exists_by_username("alice")
        assert not await user_repo.exists_by_username("bob")

    async def test_duplicate_username_rejected(self, user_repo):
        await user_repo.save(User.create("alice", "hash", Role.USER))

        with pytest.raises(UsernameAlreadyExistsError):
            await user_repo.save(User.create("alice", "other", Role.USER))

        # Session is usable after the rollback
        assert await user_repo.exists_by_username("alice")

    async def test_update_persists_mutation(self, user_repo):
        saved = await user_repo.save(User.create("alice", "hash", Role.USER))
        before = saved.updated_at

        saved.update_information("alice_v2")
        await user_repo.save(saved)

        loaded = await user_repo.find_by_id(saved.id)
        assert loaded.username == "alice_v2"
        assert loaded.updated_at > before
        assert loaded.created_at == saved.created_at


class TestFailedCommit:

    @staticmethod
    def failing_session():
        session = MagicMock()
        session.get.return_value = None
        session.commit.side_effect = DataError("INSERT", {}, Exception("Data too long"))
        return session

    async def test_shop_save_rolls_back_and_reraises(self):
        session = self.failing_session()
        repo = SQLAlchemyAlcoholShopRepository(session)

        with pytest.raises(DataError):
            await repo.save(new_shop())

        session.rollback.assert_called_once()
        session.refresh.assert_not_called()

    async def test_user_save_rolls_back_and_reraises(self):
        session = self.failing_session()
        repo = SQLAlchemyUserRepository(session)

        with pytest.raises(DataError):
            await repo.save(User.create("alice", "hash", Role.USER))

        session.rollback.assert_called_once()

    async def test_session_stays_usable_after_failed_commit(self, shop_repo, test_db_session, monkeypatch):
        real_commit = test_db_session.commit
        calls = {"count": 0}

        def commit_failing_once():
            calls["count"] += 1
            if calls["count"] == 1:
                raise OperationalError("COMMIT", {}, Exception("connection lost"))
            real_commit()

        monkeypatch.setattr(test_db_session, "commit", commit_failing_once)

        with pytest.raises(OperationalError):
            await shop_repo.save(new_shop(name="Lost"))
        saved = await shop_repo.save(new_shop(name="Kept"))

        page = await shop_repo.find_all(PageRequest(page=0, size=10, sort_by="name"))
        assert [s.name for s in page.content] == ["Kept"]
        assert saved.id is not None
