"""Get link entry use case."""

from pydantic import BaseModel

from newsdesk.domain.service import IdentityLinkService


class GetEntryRequest(BaseModel):
    """Entry lookup request."""

    token: str


class GetEntryResponse(BaseModel):
    """Credentials attached to a link; both fields absent when unlinked."""

    username: str | None = None
    password: str | None = None


class GetEntryUseCase:
    """Use case for reading back the credentials attached to a link token."""

    def __init__(self, identity_link_service: IdentityLinkService) -> None:
        """Initialize use case.

        Args:
            identity_link_service: Identity link domain service
        """
        self.identity_link_service = identity_link_service

    async def execute(self, request: GetEntryRequest) -> GetEntryResponse:
        """Look up the entry.

        Raises:
            NotFoundError: If no link has this token
        """
        credentials = await self.identity_link_service.get_entry(request.token)
        if credentials is None:
            return GetEntryResponse()
        return GetEntryResponse(
            username=credentials.username, password=credentials.password
        )
