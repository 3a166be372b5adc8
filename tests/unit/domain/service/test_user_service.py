"""Unit tests for UserService."""

from uuid import uuid4

import pytest

from ask.domain.error import AuthenticationError, ConflictError, NotFoundError, ValidationError
from ask.domain.service import UserService
from ask.domain.value import UserId
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestRegister:
    """Tests for registration."""

    @pytest.mark.asyncio
    async def test_register_hashes_password(self, unit_env):
        user_service = await unit_env.get(UserService)

        user = await user_service.register("alice", "Alice@Example.com", "s3cret-pass")

        assert user.username.root == "alice"
        assert user.email.root == "alice@example.com"
        assert user.password_hash != "s3cret-pass"
        assert user.password_hash.startswith("$2")

    @pytest.mark.asyncio
    async def test_duplicate_username(self, unit_env):
        user_service = await unit_env.get(UserService)
        await user_service.register("alice", "alice@example.com", "password1")

        with pytest.raises(ConflictError, match="Username already taken"):
            await user_service.register("alice", "other@example.com", "password1")

    @pytest.mark.asyncio
    async def test_duplicate_email(self, unit_env):
        user_service = await unit_env.get(UserService)
        await user_service.register("alice", "alice@example.com", "password1")

        with pytest.raises(ConflictError, match="Email already registered"):
            await user_service.register("alice2", "ALICE@example.com", "password1")

    @pytest.mark.asyncio
    async def test_short_password(self, unit_env):
        user_service = await unit_env.get(UserService)

        with pytest.raises(ValidationError, match="at least 8 characters"):
            await user_service.register("alice", "alice@example.com", "short")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("username", ["", "has space", "a" * 31, "dash-name"])
    async def test_invalid_username(self, unit_env, username):
        user_service = await unit_env.get(UserService)

        with pytest.raises(ValidationError):
            await user_service.register(username, "alice@example.com", "password1")

    @pytest.mark.asyncio
    async def test_invalid_email(self, unit_env):
        user_service = await unit_env.get(UserService)

        with pytest.raises(ValidationError, match="Invalid email address"):
            await user_service.register("alice", "not-an-email", "password1")


class TestAuthenticate:
    """Tests for credential checks."""

    @pytest.mark.asyncio
    async def test_correct_credentials(self, unit_env):
        user_service = await unit_env.get(UserService)
        registered = await user_service.register("alice", "alice@example.com", "password1")

        user = await user_service.authenticate("alice@example.com", "password1")

        assert user.id == registered.id

    @pytest.mark.asyncio
    async def test_wrong_password(self, unit_env):
        user_service = await unit_env.get(UserService)
        await user_service.register("alice", "alice@example.com", "password1")

        with pytest.raises(AuthenticationError, match="Invalid credentials"):
            await user_service.authenticate("alice@example.com", "password2")

    @pytest.mark.asyncio
    async def test_unknown_email(self, unit_env):
        user_service = await unit_env.get(UserService)

        with pytest.raises(AuthenticationError, match="Invalid credentials"):
            await user_service.authenticate("nobody@example.com", "password1")


class TestLookup:
    """Tests for loading users."""

    @pytest.mark.asyncio
    async def test_get_unknown_user(self, unit_env):
        user_service = await unit_env.get(UserService)

        with pytest.raises(NotFoundError, match="User not found"):
            await user_service.get_by_id(UserId(uuid4()))

    @pytest.mark.asyncio
    async def test_get_users_by_ids_skips_missing(self, unit_env):
        user_service = await unit_env.get(UserService)
        alice = await user_service.register("alice", "alice@example.com", "password1")

        users = await user_service.get_users_by_ids([alice.id, alice.id, UserId(uuid4())])

        assert list(users) == [alice.id]
