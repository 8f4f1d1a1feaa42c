"""Tests for UserUseCase."""
from uuid import uuid4

import pytest

from app.application.dto.user_dto import CreateUserRequest
from app.domain.entities.role import Role
from app.domain.exceptions import (
    AlreadyExistsError,
    InvalidArgumentError,
    UserNotFoundError,
    UsernameAlreadyExistsError,
)


def request(username="alice", password="S3cret!pass", role=Role.USER):
    return CreateUserRequest(username=username, password=password, role=role)


@pytest.mark.asyncio
class TestUserUseCase:

    async def test_create_user_hashes_password(self, user_use_case, user_repository, password_hasher):
        response = await user_use_case.create_user(request())

        stored = await user_repository.find_by_id(response.id)
        assert response.username == "alice"
        assert response.role is Role.USER
        assert response.created_at == response.updated_at
        assert stored.password_hash != "S3cret!pass"
        assert password_hasher.verify("S3cret!pass", stored.password_hash)
        assert not hasattr(response, "password_hash")

    async def test_duplicate_username_already_exists(self, user_use_case):
        await user_use_case.create_user(request())

        with pytest.raises(AlreadyExistsError) as exc_info:
            await user_use_case.create_user(request(role=Role.ADMIN))

        assert isinstance(exc_info.value, UsernameAlreadyExistsError)
        assert "alice" in str(exc_info.value)

    async def test_role_given_as_text(self, user_use_case):
        response = await user_use_case.create_user(request(role="admin"))
        assert response.role is Role.ADMIN

    async def test_blank_password_rejected(self, user_use_case):
        with pytest.raises(InvalidArgumentError):
            await user_use_case.create_user(request(password="   "))

    async def test_find_missing_user(self, user_use_case):
        missing = uuid4()
        with pytest.raises(UserNotFoundError, match=str(missing)):
            await user_use_case.find_by_id(missing)

    async def test_rename_bumps_updated_at(self, user_use_case):
        created = await user_use_case.create_user(request())

        renamed = await user_use_case.rename(created.id, "alice_v2")

        assert renamed.username == "alice_v2"
        assert renamed.created_at == created.created_at
        assert renamed.updated_at > created.updated_at

    async def test_rename_to_taken_username(self, user_use_case):
        await user_use_case.create_user(request(username="bob"))
        alice = await user_use_case.create_user(request())

        with pytest.raises(UsernameAlreadyExistsError):
            await user_use_case.rename(alice.id, "bob")

    async def test_rename_to_same_username_is_allowed(self, user_use_case):
        alice = await user_use_case.create_user(request())
        renamed = await user_use_case.rename(alice.id, "alice")
        assert renamed.username == "alice"

    async def test_change_password(self, user_use_case, user_repository, password_hasher):
        created = await user_use_case.create_user(request())

        changed = await user_use_case.change_password(created.id, "N3w!password")

        stored = await user_repository.find_by_id(created.id)
        assert password_hasher.verify("N3w!password", stored.password_hash)
        assert not password_hasher.verify("S3cret!pass", stored.password_hash)
        assert changed.updated_at > created.updated_at

    async def test_change_password_for_missing_user(self, user_use_case):
        with pytest.raises(UserNotFoundError):
            await user_use_case.change_password(uuid4(), "N3w!password")
