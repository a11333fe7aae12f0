"""Mock third-party client for testing.

Returns deterministic data without making real API calls.
"""

from urllib.parse import urlencode

from newsdesk.adapter.error import ThirdPartyAuthorizationError
from newsdesk.domain.service.third_party_service import ThirdPartyClient
from newsdesk.domain.value import AuthProvider, ProviderProfile, ProviderToken

# Authorization code the mock provider rejects
INVALID_CODE = "invalid"


class MockThirdPartyClient(ThirdPartyClient):
    """Deterministic stand-in for a provider.

    The open id is derived from the authorization code, so two callbacks
    with the same code belong to the same external identity.
    """

    def __init__(
        self,
        provider: AuthProvider,
        state: str | None = None,
        callback_url: str = "http://localhost:8000/callback",
    ) -> None:
        self.provider = provider
        self.state = state
        self.callback_url = callback_url

    @property
    def expected_state(self) -> str | None:
        return self.state

    def authorize_url(self) -> str:
        params = {
            "client_id": "mock-app",
            "redirect_uri": self.callback_url,
            "response_type": "code",
        }
        if self.state is not None:
            params["state"] = self.state
        return f"https://{self.provider.value}.example.com/authorize?{urlencode(params)}"

    async def exchange_code(self, code: str) -> ProviderToken:
        if code == INVALID_CODE:
            raise ThirdPartyAuthorizationError(
                self.provider.value, "token exchange rejected: invalid code"
            )
        return ProviderToken(
            access_token=f"mock-token-{code}",
            open_id=f"{self.provider.value}-{code}",
        )

    async def fetch_profile(self, token: ProviderToken) -> ProviderProfile:
        return ProviderProfile(
            provider=self.provider,
            open_id=token.open_id,
            avatar_url=f"https://example.com/avatars/{token.open_id}.jpg",
            nickname=f"Mock {self.provider.value} user",
        )
