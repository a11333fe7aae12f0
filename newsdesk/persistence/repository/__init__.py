"""PostgreSQL repository implementations."""

from newsdesk.persistence.repository.article import PostgresArticleRepository
from newsdesk.persistence.repository.column import PostgresColumnRepository
from newsdesk.persistence.repository.comment import (
    PostgresCommentRepository,
    PostgresReplyRepository,
)
from newsdesk.persistence.repository.identity_link import (
    PostgresIdentityLinkRepository,
)
from newsdesk.persistence.repository.notification import (
    PostgresNotificationRepository,
)
from newsdesk.persistence.repository.star import PostgresStarRepository
from newsdesk.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresArticleRepository",
    "PostgresColumnRepository",
    "PostgresCommentRepository",
    "PostgresIdentityLinkRepository",
    "PostgresNotificationRepository",
    "PostgresReplyRepository",
    "PostgresStarRepository",
    "PostgresUserRepository",
]
