"""Get third-party authorize URL use case."""

from pydantic import BaseModel

from newsdesk.domain.service import ThirdPartyService


class GetAuthorizeUrlRequest(BaseModel):
    """Authorize URL request."""

    provider: str  # Route key, resolved against the configured providers


class GetAuthorizeUrlResponse(BaseModel):
    """Authorize URL response."""

    provider: str
    url: str


class GetAuthorizeUrlUseCase:
    """Use case for building the provider authorization URL.

    Pure construction: nothing is stored.
    """

    def __init__(self, third_party_service: ThirdPartyService) -> None:
        """Initialize use case.

        Args:
            third_party_service: Third-party login domain service
        """
        self.third_party_service = third_party_service

    async def execute(self, request: GetAuthorizeUrlRequest) -> GetAuthorizeUrlResponse:
        """Resolve the provider and build its URL.

        Raises:
            UnsupportedProviderError: If the provider key is unknown
        """
        provider = self.third_party_service.resolve_provider(request.provider)
        url = self.third_party_service.authorize_url(provider)
        return GetAuthorizeUrlResponse(provider=provider.value, url=url)
