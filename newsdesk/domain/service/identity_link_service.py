"""Identity link domain service."""

import secrets
import string
from datetime import datetime
from uuid import uuid4

import logfire

from newsdesk.domain.error import NotFoundError
from newsdesk.domain.model.identity_link import IdentityLink, LinkEntry
from newsdesk.domain.repository import IdentityLinkRepository
from newsdesk.domain.value import (
    LINK_TOKEN_LENGTH,
    AuthProvider,
    Credentials,
    IdentityLinkId,
    LinkToken,
)
from newsdesk.util.crypto import EntryCipher

from .base import Service

TOKEN_ALPHABET = string.ascii_letters + string.digits


def generate_link_token() -> LinkToken:
    """Generate a random 30-character alphanumeric link token."""
    return LinkToken(
        "".join(secrets.choice(TOKEN_ALPHABET) for _ in range(LINK_TOKEN_LENGTH))
    )


class IdentityLinkService(Service):
    """Domain service for Link Records.

    A link is created by the third-party callback, gets site credentials
    attached at registration, and is read back by the login page.
    """

    def __init__(
        self,
        identity_link_repository: IdentityLinkRepository,
        cipher: EntryCipher,
    ) -> None:
        """Initialize identity link service.

        Args:
            identity_link_repository: Identity link repository
            cipher: Cipher for entry passwords at rest
        """
        self.identity_link_repository = identity_link_repository
        self.cipher = cipher

    async def link_identity(self, provider: AuthProvider, open_id: str) -> IdentityLink:
        """Create the Link Record for an external identity, or return the existing one.

        Args:
            provider: Third-party provider
            open_id: Provider's stable user id

        Returns:
            The single Link Record for (provider, open_id)
        """
        with logfire.span(
            "identity_link_service.link_identity",
            provider=provider.value,
            open_id=open_id,
        ):
            now = datetime.now()
            candidate = IdentityLink(
                id=IdentityLinkId(uuid4()),
                provider=provider,
                open_id=open_id,
                token=generate_link_token(),
                entry=None,
                created_at=now,
                updated_at=now,
            )

            link = await self.identity_link_repository.insert_if_absent(candidate)

            if link.id == candidate.id:
                logfire.info(
                    "Identity link created",
                    provider=provider.value,
                    open_id=open_id,
                )
            else:
                logfire.info(
                    "Identity link already exists",
                    provider=provider.value,
                    open_id=open_id,
                )
            return link

    async def attach_entry(self, token: str | None, username: str, password: str) -> bool:
        """Attach site credentials to the link with this token.

        Malformed and unknown tokens are ignored so registration never
        fails because of a stale link.

        Args:
            token: Raw token from the registration form
            username: Account email
            password: Plaintext password (stored encrypted)

        Returns:
            True if a link was updated
        """
        if not LinkToken.is_well_formed(token):
            if token:
                logfire.info("Ignoring malformed link token", length=len(token))
            return False

        with logfire.span("identity_link_service.attach_entry"):
            entry = LinkEntry(
                username=username,
                encrypted_password=self.cipher.encrypt(password),
            )
            updated = await self.identity_link_repository.update_entry(
                LinkToken(token), entry
            )
            if updated:
                logfire.info("Entry attached to identity link")
            else:
                logfire.info("No identity link for token, entry not attached")
            return updated

    async def get_entry(self, token: str) -> Credentials | None:
        """Read back the credentials attached to a link.

        Args:
            token: Link token

        Returns:
            Credentials, or None when the link exists but has no entry yet

        Raises:
            NotFoundError: If no link has this token, malformed ones included
        """
        if not LinkToken.is_well_formed(token):
            logfire.warn("Entry lookup for malformed token")
            raise NotFoundError("token", "token invalid")

        with logfire.span("identity_link_service.get_entry"):
            link = await self.identity_link_repository.find_by_token(LinkToken(token))
            if link is None:
                logfire.warn("Entry lookup for unknown token")
                raise NotFoundError("token", "token invalid")

            if link.entry is None:
                return None

            return Credentials(
                username=link.entry.username,
                password=self.cipher.decrypt(link.entry.encrypted_password),
            )

    async def rename_entry_username(self, old_username: str, new_username: str) -> int:
        """Keep entries in step with an account email change.

        Args:
            old_username: Previous email
            new_username: New email

        Returns:
            Number of links updated
        """
        with logfire.span("identity_link_service.rename_entry_username"):
            count = await self.identity_link_repository.rename_entry_username(
                old_username, new_username
            )
            logfire.info("Identity link entries renamed", count=count)
            return count
