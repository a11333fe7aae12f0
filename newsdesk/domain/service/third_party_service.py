"""Third-party login domain service."""

import logfire

from newsdesk.domain.error import OAuthStateMismatchError, UnsupportedProviderError
from newsdesk.domain.value import AuthProvider, ProviderProfile, ProviderToken

from .base import Service


class ThirdPartyClient:
    """Client interface shared by every third-party login provider.

    Implementations hold only configuration; all per-request values are
    passed in as arguments.
    """

    provider: AuthProvider

    @property
    def expected_state(self) -> str | None:
        """State value the provider must echo back, None if unchecked."""
        return None

    def authorize_url(self) -> str:
        """Build the provider's authorization URL.

        Returns:
            URL to redirect the browser to
        """
        raise NotImplementedError

    async def exchange_code(self, code: str) -> ProviderToken:
        """Exchange an authorization code for an access token and open id.

        Args:
            code: Authorization code from the callback

        Returns:
            Access token and the provider's stable user id
        """
        raise NotImplementedError

    async def fetch_profile(self, token: ProviderToken) -> ProviderProfile:
        """Fetch the external profile for an access token.

        Args:
            token: Result of exchange_code

        Returns:
            External profile with the chosen avatar
        """
        raise NotImplementedError


class ThirdPartyService(Service):
    """Coordinates authorization across Weibo, QQ and WeChat clients."""

    def __init__(self, clients: dict[AuthProvider, ThirdPartyClient]) -> None:
        """Initialize third-party service.

        Args:
            clients: Map of provider to client implementation
        """
        self.clients = clients

    def resolve_provider(self, provider_key: str) -> AuthProvider:
        """Turn a route key into a configured provider.

        Raises:
            UnsupportedProviderError: If the key is unknown or not configured
        """
        try:
            provider = AuthProvider(provider_key)
        except ValueError:
            logfire.warn("Unknown third-party provider", provider=provider_key)
            raise UnsupportedProviderError(provider_key)

        if provider not in self.clients:
            logfire.warn("Third-party provider not configured", provider=provider_key)
            raise UnsupportedProviderError(provider_key)
        return provider

    def authorize_url(self, provider: AuthProvider) -> str:
        """Build the authorization URL for a provider."""
        with logfire.span(
            "third_party_service.authorize_url", provider=provider.value
        ):
            return self.clients[provider].authorize_url()

    async def authenticate(
        self, provider: AuthProvider, code: str, state: str | None
    ) -> ProviderProfile:
        """Run the callback steps that talk to the provider.

        Checks state, exchanges the code and fetches the profile. The
        access token is dropped once the profile is fetched.

        Args:
            provider: Provider the callback came from
            code: Authorization code
            state: State echoed by the provider

        Returns:
            External profile

        Raises:
            OAuthStateMismatchError: If the provider expects a state and it differs
            ThirdPartyAuthorizationError: If any provider call fails
        """
        with logfire.span(
            "third_party_service.authenticate", provider=provider.value
        ):
            client = self.clients[provider]

            expected = client.expected_state
            if expected is not None and state != expected:
                logfire.warn(
                    "Third-party callback state mismatch",
                    provider=provider.value,
                    state=state,
                )
                raise OAuthStateMismatchError(provider.value)

            token = await client.exchange_code(code)
            profile = await client.fetch_profile(token)

            logfire.info(
                "Third-party profile fetched",
                provider=provider.value,
                open_id=profile.open_id,
                has_avatar=profile.avatar_url is not None,
            )
            return profile
