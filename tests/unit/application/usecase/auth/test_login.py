"""Unit tests for LoginUseCase."""

from dishka import AsyncContainer
import pytest

from newsdesk.application.usecase.auth.login import LoginRequest, LoginUseCase
from newsdesk.application.usecase.user import RegisterUserRequest, RegisterUserUseCase
from newsdesk.domain.error import AuthenticationError
from newsdesk.domain.service import JWTService
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestLoginUseCase:
    """Tests for LoginUseCase."""

    @pytest.mark.asyncio
    async def test_login_issues_token_for_user(self, unit_env: AsyncContainer):
        """Login should return a JWT whose subject is the account."""
        # Arrange
        register = await unit_env.get(RegisterUserUseCase)
        profile = await register.execute(
            RegisterUserRequest(
                email="a@x.com", password="secret1", password_confirmation="secret1"
            )
        )
        login = await unit_env.get(LoginUseCase)
        jwt_service = await unit_env.get(JWTService)

        # Act
        response = await login.execute(LoginRequest(email="a@x.com", password="secret1"))

        # Assert
        assert response.user_id == profile.user_id
        assert response.email == "a@x.com"
        payload = jwt_service.verify_token(response.token)
        assert payload.user_id == profile.user_id

    @pytest.mark.asyncio
    async def test_wrong_password(self, unit_env: AsyncContainer):
        register = await unit_env.get(RegisterUserUseCase)
        await register.execute(
            RegisterUserRequest(
                email="a@x.com", password="secret1", password_confirmation="secret1"
            )
        )
        login = await unit_env.get(LoginUseCase)

        with pytest.raises(AuthenticationError):
            await login.execute(LoginRequest(email="a@x.com", password="secret2"))

    @pytest.mark.asyncio
    async def test_unknown_account(self, unit_env: AsyncContainer):
        login = await unit_env.get(LoginUseCase)

        with pytest.raises(AuthenticationError):
            await login.execute(LoginRequest(email="nobody@x.com", password="secret1"))
