"""Third-party callback use case."""

import logfire
from pydantic import BaseModel

from newsdesk.domain.service import IdentityLinkService, ThirdPartyService


class ThirdPartyCallbackRequest(BaseModel):
    """Callback parameters sent by the provider."""

    provider: str
    code: str
    state: str | None = None


class ThirdPartyCallbackResponse(BaseModel):
    """Callback result handed to the browser."""

    avatar_url: str | None
    token: str

    def as_query_string(self) -> str:
        """Plain-text body the front end parses after the callback."""
        return f"QueryString ?avatar_url={self.avatar_url or ''}&token={self.token}"


class ThirdPartyCallbackUseCase:
    """Use case for completing a third-party login.

    Steps run once, in order, and any failure stops the flow before
    anything is written.
    """

    def __init__(
        self,
        third_party_service: ThirdPartyService,
        identity_link_service: IdentityLinkService,
    ) -> None:
        """Initialize callback use case.

        Args:
            third_party_service: Third-party login domain service
            identity_link_service: Identity link domain service
        """
        self.third_party_service = third_party_service
        self.identity_link_service = identity_link_service

    async def execute(
        self, request: ThirdPartyCallbackRequest
    ) -> ThirdPartyCallbackResponse:
        """Execute callback flow.

        Steps:
        1. Resolve the provider
        2. Check state, exchange the code, fetch the profile
        3. Find or create the Link Record for (provider, open_id)
        4. Return avatar and link token

        Raises:
            UnsupportedProviderError: If the provider key is unknown
            OAuthStateMismatchError: If the state does not match
            ThirdPartyAuthorizationError: If a provider call fails
        """
        provider = self.third_party_service.resolve_provider(request.provider)

        with logfire.span("third_party_callback", provider=provider.value):
            profile = await self.third_party_service.authenticate(
                provider, request.code, request.state
            )
            link = await self.identity_link_service.link_identity(
                provider, profile.open_id
            )

            return ThirdPartyCallbackResponse(
                avatar_url=profile.avatar_url,
                token=link.token.root,
            )
