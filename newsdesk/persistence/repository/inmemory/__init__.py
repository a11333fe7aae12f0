"""In-memory repository implementations for testing."""

from .article import InMemoryArticleRepository
from .column import InMemoryColumnRepository
from .comment import InMemoryCommentRepository, InMemoryReplyRepository
from .identity_link import InMemoryIdentityLinkRepository
from .notification import InMemoryNotificationRepository
from .star import InMemoryStarRepository
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryArticleRepository",
    "InMemoryColumnRepository",
    "InMemoryCommentRepository",
    "InMemoryIdentityLinkRepository",
    "InMemoryNotificationRepository",
    "InMemoryReplyRepository",
    "InMemoryStarRepository",
    "InMemoryUserRepository",
]
