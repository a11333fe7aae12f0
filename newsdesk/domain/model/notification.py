"""Notification entity.

Created when someone replies to a registered user's comment.
"""

from datetime import datetime

from pydantic import Field

from newsdesk.domain.model.common import DomainModel
from newsdesk.domain.value import (
    ArticleId,
    CommentId,
    NotificationId,
    ReplyId,
    UserId,
)


class Notification(DomainModel):
    """Reply notification for the comment author."""

    id: NotificationId
    user_id: UserId  # Recipient
    article_id: ArticleId
    comment_id: CommentId
    reply_id: ReplyId
    is_read: bool = False
    created_at: datetime = Field(default_factory=datetime.now)
