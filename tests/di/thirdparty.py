"""Mock third-party login providers for testing."""

from dishka import Scope, provide

from newsdesk.adapter.thirdparty import MockThirdPartyClient
from newsdesk.config import Settings
from newsdesk.domain.service import ThirdPartyClient
from newsdesk.domain.value import AuthProvider
from newsdesk.util.di.infrastructure.thirdparty import ThirdPartyProvider


class MockThirdPartyProvider(ThirdPartyProvider):
    """Mock provider: one deterministic client per provider, same states as configured."""

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_third_party_clients(
        self, settings: Settings
    ) -> dict[AuthProvider, ThirdPartyClient]:
        """Provide mock clients."""
        third_party = settings.third_party
        return {
            AuthProvider.WEIBO: MockThirdPartyClient(
                AuthProvider.WEIBO,
                state=third_party.weibo.state,
                callback_url=third_party.weibo.callback_url,
            ),
            AuthProvider.QQ: MockThirdPartyClient(
                AuthProvider.QQ,
                state=third_party.qq.state,
                callback_url=third_party.qq.callback_url,
            ),
            AuthProvider.WEIXIN: MockThirdPartyClient(
                AuthProvider.WEIXIN,
                state=third_party.weixin.state,
                callback_url=third_party.weixin.callback_url,
            ),
        }
