"""Repository interfaces for newsdesk domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from newsdesk.domain.repository.article import ArticleRepository
from newsdesk.domain.repository.column import ColumnRepository
from newsdesk.domain.repository.comment import CommentRepository, ReplyRepository
from newsdesk.domain.repository.identity_link import IdentityLinkRepository
from newsdesk.domain.repository.notification import NotificationRepository
from newsdesk.domain.repository.star import StarRepository
from newsdesk.domain.repository.user import UserRepository

__all__ = [
    "ArticleRepository",
    "ColumnRepository",
    "CommentRepository",
    "IdentityLinkRepository",
    "NotificationRepository",
    "ReplyRepository",
    "StarRepository",
    "UserRepository",
]
