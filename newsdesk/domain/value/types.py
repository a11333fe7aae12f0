"""Domain value objects for newsdesk.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

import re
from enum import Enum

from pydantic import Field, field_validator

from newsdesk.domain.value.common import RootValueObject, ValueObject

# Link tokens handed to the browser after a third-party callback
LINK_TOKEN_LENGTH = 30

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


class AuthProvider(str, Enum):
    """Supported third-party login providers."""

    WEIBO = "weibo"
    QQ = "qq"
    WEIXIN = "weixin"


class Gender(str, Enum):
    """Profile gender, stored with the labels the site displays."""

    MALE = "男"
    FEMALE = "女"


class Email(RootValueObject[str]):
    """Account email address, also the login username."""

    @field_validator("root")
    @classmethod
    def validate_email_format(cls, v: str) -> str:
        """Validate the address has a local part and a dotted domain."""
        v = v.strip()
        if len(v) > 255 or not EMAIL_PATTERN.match(v):
            raise ValueError("Email must be a valid email address")
        return v


class LinkToken(RootValueObject[str]):
    """Opaque token tying a browser to a Link Record.

    Always exactly 30 alphanumeric characters.
    """

    @field_validator("root")
    @classmethod
    def validate_token_format(cls, v: str) -> str:
        """Validate token length and alphabet."""
        if len(v) != LINK_TOKEN_LENGTH or not v.isalnum() or not v.isascii():
            raise ValueError(
                f"Link token must be {LINK_TOKEN_LENGTH} alphanumeric characters"
            )
        return v

    @classmethod
    def is_well_formed(cls, value: str | None) -> bool:
        """Check a raw string without raising."""
        if value is None:
            return False
        return (
            len(value) == LINK_TOKEN_LENGTH and value.isalnum() and value.isascii()
        )


class Page(ValueObject):
    """Page request for listings."""

    page: int = Field(default=1, ge=1)
    per_page: int = Field(default=10, ge=1, le=50)

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.per_page

    @property
    def limit(self) -> int:
        return self.per_page


class ProviderToken(ValueObject):
    """Access token and stable user id returned by a provider's token step.

    Lives only for the duration of one callback request.
    """

    access_token: str
    open_id: str


class ProviderProfile(ValueObject):
    """External profile fetched from a provider."""

    provider: AuthProvider
    open_id: str
    avatar_url: str | None = None
    nickname: str | None = None


class Credentials(ValueObject):
    """Site login credentials attached to a Link Record."""

    username: str
    password: str
