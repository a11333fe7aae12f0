"""Domain value objects for newsdesk."""

from newsdesk.domain.value.identifiers import (
    ArticleId,
    ColumnId,
    CommentId,
    IdentityLinkId,
    NotificationId,
    ReplyId,
    StarId,
    UserId,
)
from newsdesk.domain.value.types import (
    LINK_TOKEN_LENGTH,
    AuthProvider,
    Credentials,
    Email,
    Gender,
    LinkToken,
    Page,
    ProviderProfile,
    ProviderToken,
)

__all__ = [
    # Identifiers
    "ArticleId",
    "ColumnId",
    "CommentId",
    "IdentityLinkId",
    "NotificationId",
    "ReplyId",
    "StarId",
    "UserId",
    # Types
    "LINK_TOKEN_LENGTH",
    "AuthProvider",
    "Credentials",
    "Email",
    "Gender",
    "LinkToken",
    "Page",
    "ProviderProfile",
    "ProviderToken",
]
