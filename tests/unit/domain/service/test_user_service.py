"""Unit tests for UserService."""

from uuid import uuid4

import pytest

from forum.domain.repository import UserRepository
from forum.domain.service import UserService
from forum.domain.value import UserId
from tests.conftest import make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestGetUsersByIds:
    """Tests for batch loading."""

    @pytest.mark.asyncio
    async def test_returns_known_users_keyed_by_id(self, unit_env):
        # Arrange
        user_repo = await unit_env.get(UserRepository)
        user_service = await unit_env.get(UserService)
        alice = await user_repo.save(make_user("alice"))
        unknown = UserId(uuid4())

        # Act
        users = await user_service.get_users_by_ids([alice.id, unknown, alice.id])

        # Assert
        assert users == {alice.id: alice}

    @pytest.mark.asyncio
    async def test_empty_input(self, unit_env):
        user_service = await unit_env.get(UserService)

        assert await user_service.get_users_by_ids([]) == {}


class TestSearchUsers:
    """Tests for username search."""

    @pytest.mark.asyncio
    async def test_search_is_case_insensitive_and_capped(self, unit_env):
        # Arrange
        user_repo = await unit_env.get(UserRepository)
        user_service = await unit_env.get(UserService)
        for name in ["Sam", "sammy", "samir", "Samantha", "osama", "samuel", "bob"]:
            await user_repo.save(make_user(name))

        # Act
        users = await user_service.search_users("SAM")

        # Assert
        assert len(users) == 5
        assert all("sam" in u.username.root.lower() for u in users)
        assert [u.username.root for u in users] == sorted(
            u.username.root for u in users
        )

    @pytest.mark.asyncio
    async def test_blank_query_returns_nothing(self, unit_env):
        user_repo = await unit_env.get(UserRepository)
        user_service = await unit_env.get(UserService)
        await user_repo.save(make_user("alice"))

        assert await user_service.search_users("   ") == []
