"""Unit tests for LoginUseCase."""

from dishka import AsyncContainer
import pytest

from ask.application.usecase.auth import LoginRequest, LoginUseCase
from ask.domain.error import AuthenticationError
from ask.domain.service import JWTService, UserService
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestLoginUseCase:
    """Tests for LoginUseCase."""

    @pytest.mark.asyncio
    async def test_login_issues_token_for_user(self, unit_env: AsyncContainer):
        """Login should return a token that resolves back to the user."""
        # Arrange
        user_service = await unit_env.get(UserService)
        jwt_service = await unit_env.get(JWTService)
        login_use_case = await unit_env.get(LoginUseCase)
        user = await user_service.register("alice", "alice@example.com", "password123")

        # Act
        result = await login_use_case.execute(
            LoginRequest(email="alice@example.com", password="password123")
        )

        # Assert
        assert result.user.id == str(user.id)
        assert result.user.username == "alice"
        payload = jwt_service.verify_token(result.token)
        assert payload.user_id == str(user.id)
        assert payload.username == "alice"

    @pytest.mark.asyncio
    async def test_email_is_case_insensitive(self, unit_env: AsyncContainer):
        """Login should normalize the email like registration does."""
        user_service = await unit_env.get(UserService)
        login_use_case = await unit_env.get(LoginUseCase)
        await user_service.register("alice", "alice@example.com", "password123")

        result = await login_use_case.execute(
            LoginRequest(email="ALICE@example.com", password="password123")
        )

        assert result.user.username == "alice"

    @pytest.mark.asyncio
    async def test_wrong_password_raises(self, unit_env: AsyncContainer):
        """Login should reject a wrong password without issuing a token."""
        user_service = await unit_env.get(UserService)
        login_use_case = await unit_env.get(LoginUseCase)
        await user_service.register("alice", "alice@example.com", "password123")

        with pytest.raises(AuthenticationError):
            await login_use_case.execute(
                LoginRequest(email="alice@example.com", password="nope-nope")
            )


class TestJWTService:
    """Tests for token verification."""

    @pytest.mark.asyncio
    async def test_tampered_token_yields_no_user(self, unit_env: AsyncContainer):
        jwt_service = await unit_env.get(JWTService)
        token = jwt_service.create_token("some-user", "alice")

        assert jwt_service.get_user_id_from_token(token) == "some-user"
        assert jwt_service.get_user_id_from_token(token + "tampered") is None
        assert jwt_service.get_user_id_from_token(None) is None
