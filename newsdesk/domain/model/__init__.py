"""Domain model entities for newsdesk."""

from newsdesk.domain.model.article import Article
from newsdesk.domain.model.column import Column
from newsdesk.domain.model.comment import Comment, CommentAuthor, Reply
from newsdesk.domain.model.identity_link import IdentityLink, LinkEntry
from newsdesk.domain.model.notification import Notification
from newsdesk.domain.model.star import Star
from newsdesk.domain.model.user import User

__all__ = [
    "Article",
    "Column",
    "Comment",
    "CommentAuthor",
    "IdentityLink",
    "LinkEntry",
    "Notification",
    "Reply",
    "Star",
    "User",
]
