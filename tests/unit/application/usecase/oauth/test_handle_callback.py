"""Unit tests for ThirdPartyCallbackUseCase."""

from dishka import AsyncContainer
import pytest

from newsdesk.adapter.error import ThirdPartyAuthorizationError
from newsdesk.adapter.thirdparty.mock import INVALID_CODE
from newsdesk.application.usecase.oauth import (
    ThirdPartyCallbackRequest,
    ThirdPartyCallbackUseCase,
)
from newsdesk.domain.error import OAuthStateMismatchError, UnsupportedProviderError
from newsdesk.domain.repository import IdentityLinkRepository
from newsdesk.domain.value import LINK_TOKEN_LENGTH
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestThirdPartyCallbackUseCase:
    """Tests for ThirdPartyCallbackUseCase."""

    @pytest.mark.asyncio
    async def test_creates_link_and_returns_token(self, unit_env: AsyncContainer):
        """Should create one Link Record and hand back its token and avatar."""
        # Arrange
        use_case = await unit_env.get(ThirdPartyCallbackUseCase)
        repo = await unit_env.get(IdentityLinkRepository)

        # Act
        response = await use_case.execute(
            ThirdPartyCallbackRequest(provider="weibo", code="abc")
        )

        # Assert
        assert len(response.token) == LINK_TOKEN_LENGTH
        assert response.token.isalnum()
        assert response.avatar_url == "https://example.com/avatars/weibo-abc.jpg"
        assert repo.count() == 1

    @pytest.mark.asyncio
    async def test_repeat_callback_reuses_link(self, unit_env: AsyncContainer):
        """Should return the same token for the same external identity."""
        # Arrange
        use_case = await unit_env.get(ThirdPartyCallbackUseCase)
        repo = await unit_env.get(IdentityLinkRepository)
        request = ThirdPartyCallbackRequest(provider="qq", code="abc", state="test")

        # Act
        first = await use_case.execute(request)
        second = await use_case.execute(request)

        # Assert
        assert first.token == second.token
        assert repo.count() == 1

    @pytest.mark.asyncio
    async def test_same_open_id_on_other_provider_is_separate(
        self, unit_env: AsyncContainer
    ):
        use_case = await unit_env.get(ThirdPartyCallbackUseCase)
        repo = await unit_env.get(IdentityLinkRepository)

        weibo = await use_case.execute(
            ThirdPartyCallbackRequest(provider="weibo", code="abc")
        )
        weixin = await use_case.execute(
            ThirdPartyCallbackRequest(provider="weixin", code="abc", state="STATE")
        )

        assert weibo.token != weixin.token
        assert repo.count() == 2

    @pytest.mark.asyncio
    async def test_state_mismatch_persists_nothing(self, unit_env: AsyncContainer):
        use_case = await unit_env.get(ThirdPartyCallbackUseCase)
        repo = await unit_env.get(IdentityLinkRepository)

        with pytest.raises(OAuthStateMismatchError):
            await use_case.execute(
                ThirdPartyCallbackRequest(provider="qq", code="abc", state="forged")
            )

        assert repo.count() == 0

    @pytest.mark.asyncio
    async def test_invalid_code_persists_nothing(self, unit_env: AsyncContainer):
        use_case = await unit_env.get(ThirdPartyCallbackUseCase)
        repo = await unit_env.get(IdentityLinkRepository)

        with pytest.raises(ThirdPartyAuthorizationError):
            await use_case.execute(
                ThirdPartyCallbackRequest(provider="weibo", code=INVALID_CODE)
            )

        assert repo.count() == 0

    @pytest.mark.asyncio
    async def test_unknown_provider(self, unit_env: AsyncContainer):
        use_case = await unit_env.get(ThirdPartyCallbackUseCase)

        with pytest.raises(UnsupportedProviderError):
            await use_case.execute(
                ThirdPartyCallbackRequest(provider="github", code="abc")
            )


def test_query_string_body():
    """Should render the plain-text body the front end parses."""
    from newsdesk.application.usecase.oauth import ThirdPartyCallbackResponse

    body = ThirdPartyCallbackResponse(avatar_url=None, token="t" * 30).as_query_string()

    assert body == "QueryString ?avatar_url=&token=" + "t" * 30
