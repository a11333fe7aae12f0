"""Identity link repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from newsdesk.domain.model.identity_link import IdentityLink, LinkEntry
from newsdesk.domain.value import AuthProvider, LinkToken


class IdentityLinkRepository(ABC):
    """Repository for Link Records.

    Records are only ever inserted or have their entry updated.
    """

    @abstractmethod
    async def find_by_token(self, token: LinkToken) -> Optional[IdentityLink]:
        """Find a link by its token.

        Args:
            token: Link token

        Returns:
            The link if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_provider(
        self, provider: AuthProvider, open_id: str
    ) -> Optional[IdentityLink]:
        """Find a link by external identity.

        Args:
            provider: Third-party provider
            open_id: Provider's stable user id

        Returns:
            The link if found, None otherwise
        """
        pass

    @abstractmethod
    async def insert_if_absent(self, link: IdentityLink) -> IdentityLink:
        """Insert a link unless one exists for the same (provider, open_id).

        Must be safe under concurrent callbacks for the same identity:
        exactly one record survives and every caller gets it back.

        Args:
            link: Candidate link with a freshly generated token

        Returns:
            The stored link (the candidate, or the existing record)
        """
        pass

    @abstractmethod
    async def update_entry(self, token: LinkToken, entry: LinkEntry) -> bool:
        """Overwrite the entry of the link with this token.

        Args:
            token: Link token
            entry: New credentials (password already encrypted)

        Returns:
            True if a link was updated, False if the token is unknown
        """
        pass

    @abstractmethod
    async def rename_entry_username(self, old_username: str, new_username: str) -> int:
        """Rewrite entry usernames after an account email change.

        Args:
            old_username: Previous email
            new_username: New email

        Returns:
            Number of links updated
        """
        pass
