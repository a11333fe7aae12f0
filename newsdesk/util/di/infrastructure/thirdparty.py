"""Third-party login infrastructure providers."""

from dishka import Scope, provide

from newsdesk.adapter.thirdparty import QQClient, WeiboClient, WeixinClient
from newsdesk.config import Settings, ThirdPartyAppSettings
from newsdesk.domain.service import ThirdPartyClient
from newsdesk.domain.value import AuthProvider
from newsdesk.util.di.base import ProviderBase


class ThirdPartyProvider(ProviderBase):
    """Third-party login component base."""

    __mock_component__ = "thirdparty"


class ProdThirdPartyProvider(ThirdPartyProvider):
    """Production provider talking to Weibo, QQ and WeChat."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_third_party_clients(
        self, settings: Settings
    ) -> dict[AuthProvider, ThirdPartyClient]:
        """Provide one client per configured provider.

        Providers with an empty app_id are left out, so their routes 404.

        Returns:
            Dictionary mapping AuthProvider to its client
        """
        third_party = settings.third_party

        def options(app: ThirdPartyAppSettings) -> dict:
            return {
                "app_id": app.app_id,
                "app_secret": app.app_secret,
                "callback_url": app.callback_url,
                "state": app.state,
                "timeout": third_party.timeout,
                "max_redirects": third_party.max_redirects,
            }

        clients: dict[AuthProvider, ThirdPartyClient] = {}
        if third_party.weibo.app_id:
            clients[AuthProvider.WEIBO] = WeiboClient(**options(third_party.weibo))
        if third_party.qq.app_id:
            clients[AuthProvider.QQ] = QQClient(**options(third_party.qq))
        if third_party.weixin.app_id:
            clients[AuthProvider.WEIXIN] = WeixinClient(**options(third_party.weixin))
        return clients
