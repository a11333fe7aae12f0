"""Unit tests for RegisterUserUseCase."""

from dishka import AsyncContainer
import pytest

from newsdesk.application.usecase.oauth import (
    GetEntryRequest,
    GetEntryUseCase,
    ThirdPartyCallbackRequest,
    ThirdPartyCallbackUseCase,
)
from newsdesk.application.usecase.user import RegisterUserRequest, RegisterUserUseCase
from newsdesk.domain.error import ValidationError
from newsdesk.domain.repository import IdentityLinkRepository, UserRepository
from newsdesk.domain.value import Email, LinkToken
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


def form(token: str | None = None, **overrides) -> RegisterUserRequest:
    fields = {
        "email": "a@x.com",
        "password": "secret1",
        "password_confirmation": "secret1",
        "token": token,
    }
    fields.update(overrides)
    return RegisterUserRequest(**fields)


class TestRegisterUserUseCase:
    """Tests for RegisterUserUseCase."""

    @pytest.mark.asyncio
    async def test_registers_without_token(self, unit_env: AsyncContainer):
        """Should create the account and return its profile."""
        # Arrange
        use_case = await unit_env.get(RegisterUserUseCase)
        users = await unit_env.get(UserRepository)

        # Act
        profile = await use_case.execute(form())

        # Assert
        assert profile.email == "a@x.com"
        assert profile.avatar_url == "/uploads/images/avatar/default.png"
        assert await users.find_by_email(Email("a@x.com")) is not None

    @pytest.mark.asyncio
    async def test_attaches_entry_to_link(self, unit_env: AsyncContainer):
        """Should attach the new credentials to the link token."""
        # Arrange
        callback = await unit_env.get(ThirdPartyCallbackUseCase)
        use_case = await unit_env.get(RegisterUserUseCase)
        get_entry = await unit_env.get(GetEntryUseCase)
        linked = await callback.execute(
            ThirdPartyCallbackRequest(provider="qq", code="abc", state="test")
        )

        # Act
        await use_case.execute(form(token=linked.token, avatar_url=linked.avatar_url))

        # Assert
        entry = await get_entry.execute(GetEntryRequest(token=linked.token))
        assert entry.username == "a@x.com"
        assert entry.password == "secret1"

    @pytest.mark.asyncio
    async def test_entry_password_encrypted_at_rest(self, unit_env: AsyncContainer):
        callback = await unit_env.get(ThirdPartyCallbackUseCase)
        use_case = await unit_env.get(RegisterUserUseCase)
        links = await unit_env.get(IdentityLinkRepository)
        linked = await callback.execute(
            ThirdPartyCallbackRequest(provider="weibo", code="abc")
        )

        await use_case.execute(form(token=linked.token))

        link = await links.find_by_token(LinkToken(linked.token))
        assert link.entry.username == "a@x.com"
        assert link.entry.encrypted_password != "secret1"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("token", ["short", "A" * 30, "!" * 30, ""])
    async def test_bad_token_does_not_fail_registration(
        self, unit_env: AsyncContainer, token: str
    ):
        """Malformed and unknown tokens are ignored."""
        use_case = await unit_env.get(RegisterUserUseCase)

        profile = await use_case.execute(form(token=token))

        assert profile.email == "a@x.com"

    @pytest.mark.asyncio
    async def test_invalid_form_creates_nothing(self, unit_env: AsyncContainer):
        use_case = await unit_env.get(RegisterUserUseCase)
        users = await unit_env.get(UserRepository)

        with pytest.raises(ValidationError):
            await use_case.execute(form(password_confirmation="different"))

        assert await users.find_by_email(Email("a@x.com")) is None

    @pytest.mark.asyncio
    async def test_missing_password_is_required(self, unit_env: AsyncContainer):
        use_case = await unit_env.get(RegisterUserUseCase)
        users = await unit_env.get(UserRepository)

        with pytest.raises(ValidationError) as exc_info:
            await use_case.execute(form(password=None, password_confirmation=None))

        assert exc_info.value.messages == ["The password field is required."]
        assert await users.find_by_email(Email("a@x.com")) is None

    @pytest.mark.asyncio
    async def test_duplicate_email(self, unit_env: AsyncContainer):
        use_case = await unit_env.get(RegisterUserUseCase)
        await use_case.execute(form())

        with pytest.raises(ValidationError) as exc_info:
            await use_case.execute(form())

        assert exc_info.value.messages == ["The email has already been taken."]
