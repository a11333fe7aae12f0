"""Unit tests for the production third-party client map."""

import pytest
from dishka import Provider, Scope, from_context, make_async_container

from newsdesk.adapter.thirdparty import WeiboClient
from newsdesk.config import Settings
from newsdesk.domain.error import UnsupportedProviderError
from newsdesk.domain.service import ThirdPartyClient, ThirdPartyService
from newsdesk.domain.value import AuthProvider
from newsdesk.util.di.infrastructure.thirdparty import ProdThirdPartyProvider


class SettingsContext(Provider):
    settings = from_context(provides=Settings, scope=Scope.APP)


async def build_clients(settings: Settings) -> dict[AuthProvider, ThirdPartyClient]:
    container = make_async_container(
        SettingsContext(), ProdThirdPartyProvider(), context={Settings: settings}
    )
    try:
        return await container.get(dict[AuthProvider, ThirdPartyClient])
    finally:
        await container.close()


class TestProdThirdPartyProvider:
    """Tests for ProdThirdPartyProvider.get_third_party_clients()."""

    @pytest.mark.asyncio
    async def test_skips_providers_without_app_id(self):
        """Should leave out providers whose app_id is empty."""
        # Arrange
        settings = Settings(
            third_party={
                "weibo": {"app_id": "weibo-app"},
                "qq": {"app_id": ""},
                "weixin": {"app_id": ""},
            }
        )

        # Act
        clients = await build_clients(settings)

        # Assert
        assert list(clients) == [AuthProvider.WEIBO]
        assert isinstance(clients[AuthProvider.WEIBO], WeiboClient)

    @pytest.mark.asyncio
    async def test_unconfigured_provider_is_unsupported(self):
        """Routes for a provider without an app_id resolve as unsupported."""
        settings = Settings(
            third_party={"weibo": {"app_id": "weibo-app"}, "qq": {"app_id": ""}}
        )
        service = ThirdPartyService(await build_clients(settings))

        assert service.resolve_provider("weibo") == AuthProvider.WEIBO
        with pytest.raises(UnsupportedProviderError):
            service.resolve_provider("qq")

    @pytest.mark.asyncio
    async def test_builds_all_configured_providers(self):
        clients = await build_clients(Settings())

        assert set(clients) == {
            AuthProvider.WEIBO,
            AuthProvider.QQ,
            AuthProvider.WEIXIN,
        }
