"""Unit tests for UserService."""

from uuid import uuid4

import pytest

from remark.domain.repository import UserRepository
from remark.domain.service import UserService
from remark.domain.value import UserId, UserRole
from tests.conftest import make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestResolveActor:
    """Tests for UserService.resolve_actor."""

    @pytest.mark.asyncio
    async def test_known_user_becomes_actor(self, unit_env):
        # Arrange
        service = await unit_env.get(UserService)
        repo = await unit_env.get(UserRepository)
        user = await repo.save(make_user("admin", role=UserRole.ADMIN))

        # Act
        actor = await service.resolve_actor(str(user.id))

        # Assert
        assert actor.user_id == user.id
        assert actor.is_admin
        assert actor.is_active

    @pytest.mark.asyncio
    async def test_inactive_user_is_returned_inactive(self, unit_env):
        """Deactivated users are passed on so the guard can reject them."""
        # Arrange
        service = await unit_env.get(UserService)
        repo = await unit_env.get(UserRepository)
        user = await repo.save(make_user(is_active=False))

        # Act
        actor = await service.resolve_actor(str(user.id))

        # Assert
        assert actor is not None
        assert not actor.is_active

    @pytest.mark.asyncio
    @pytest.mark.parametrize("user_id", [None, "", "not-a-uuid", str(uuid4())])
    async def test_unresolvable_subject_gives_none(self, unit_env, user_id):
        service = await unit_env.get(UserService)

        assert await service.resolve_actor(user_id) is None


class TestGetAuthors:
    """Tests for UserService.get_authors."""

    @pytest.mark.asyncio
    async def test_batch_lookup_skips_unknown_and_duplicates(self, unit_env):
        # Arrange
        service = await unit_env.get(UserService)
        repo = await unit_env.get(UserRepository)
        alice = await repo.save(make_user("alice"))
        bob = await repo.save(make_user("bob"))
        unknown = UserId(uuid4())

        # Act
        authors = await service.get_authors([alice.id, bob.id, alice.id, unknown])

        # Assert
        assert set(authors) == {alice.id, bob.id}
        assert authors[bob.id].username == "bob"

    @pytest.mark.asyncio
    async def test_empty_batch(self, unit_env):
        service = await unit_env.get(UserService)

        assert await service.get_authors([]) == {}
