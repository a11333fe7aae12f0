"""Strongly typed identifiers for newsdesk domain entities.

Articles and columns come from the legacy content store and keep its
integer keys. Everything created by this service is keyed by UUID.
"""

from typing import NewType
from uuid import UUID

# Content store identifiers
ArticleId = NewType("ArticleId", int)
ColumnId = NewType("ColumnId", int)

# Service-owned identifiers
UserId = NewType("UserId", UUID)
IdentityLinkId = NewType("IdentityLinkId", UUID)
CommentId = NewType("CommentId", UUID)
ReplyId = NewType("ReplyId", UUID)
StarId = NewType("StarId", UUID)
NotificationId = NewType("NotificationId", UUID)
