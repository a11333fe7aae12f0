"""In-memory identity link repository for testing."""

from datetime import datetime
from typing import Optional

from newsdesk.domain.model import IdentityLink, LinkEntry
from newsdesk.domain.repository import IdentityLinkRepository
from newsdesk.domain.value import AuthProvider, LinkToken


class InMemoryIdentityLinkRepository(IdentityLinkRepository):
    """In-memory implementation of IdentityLinkRepository for testing."""

    def __init__(self) -> None:
        self._links: list[IdentityLink] = []

    async def find_by_token(self, token: LinkToken) -> Optional[IdentityLink]:
        """Find a link by its token."""
        for link in self._links:
            if link.token == token:
                return link
        return None

    async def find_by_provider(
        self, provider: AuthProvider, open_id: str
    ) -> Optional[IdentityLink]:
        """Find a link by external identity."""
        for link in self._links:
            if link.provider == provider and link.open_id == open_id:
                return link
        return None

    async def insert_if_absent(self, link: IdentityLink) -> IdentityLink:
        """Insert unless (provider, open_id) exists; no await between check and insert."""
        for existing in self._links:
            if existing.provider == link.provider and existing.open_id == link.open_id:
                return existing
        self._links.append(link)
        return link

    async def update_entry(self, token: LinkToken, entry: LinkEntry) -> bool:
        """Overwrite the entry of the link with this token."""
        for i, link in enumerate(self._links):
            if link.token == token:
                self._links[i] = link.model_copy(
                    update={"entry": entry, "updated_at": datetime.now()}
                )
                return True
        return False

    async def rename_entry_username(self, old_username: str, new_username: str) -> int:
        """Rewrite entry usernames after an account email change."""
        count = 0
        for i, link in enumerate(self._links):
            if link.entry is not None and link.entry.username == old_username:
                entry = link.entry.model_copy(update={"username": new_username})
                self._links[i] = link.model_copy(
                    update={"entry": entry, "updated_at": datetime.now()}
                )
                count += 1
        return count

    def count(self) -> int:
        """Number of stored links."""
        return len(self._links)
