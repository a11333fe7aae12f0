"""Identity link entity.

Ties an external (provider, open id) pair to a link token, and later to
the site credentials the visitor registered with.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from newsdesk.domain.model.common import DomainModel
from newsdesk.domain.value import AuthProvider, IdentityLinkId, LinkToken


class LinkEntry(DomainModel):
    """Credentials attached to a link, password encrypted at rest."""

    username: str
    encrypted_password: str


class IdentityLink(DomainModel):
    """Link Record.

    Business rules:
    - At most one record per (provider, open_id), enforced by a unique constraint
    - The token never changes once issued
    - Records are never deleted
    """

    id: IdentityLinkId
    provider: AuthProvider
    open_id: str = Field(min_length=1, max_length=255)
    token: LinkToken
    entry: Optional[LinkEntry] = None
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
