"""User aggregate root.

Site accounts register with email and password. A third-party login
only produces a Link Record; the account itself is always local.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from newsdesk.domain.model.common import DomainModel
from newsdesk.domain.value import Email, Gender, UserId


class User(DomainModel):
    """Registered site account."""

    id: UserId
    email: Email
    password_hash: str
    display_name: Optional[str] = Field(default=None, max_length=100)
    avatar_url: str
    gender: Optional[Gender] = None
    company: Optional[str] = Field(default=None, max_length=255)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @property
    def name(self) -> str:
        """Name shown next to the user's comments."""
        return self.display_name or str(self.email)
