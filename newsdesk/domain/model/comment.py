"""Comment and reply entities.

Comments hang off articles, replies hang off comments. Both keep a
snapshot of their author so anonymous visitors need no account.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from newsdesk.domain.model.common import DomainModel
from newsdesk.domain.value import ArticleId, CommentId, ReplyId, UserId


class CommentAuthor(DomainModel):
    """Author snapshot taken when the comment is written."""

    user_id: Optional[UserId] = None  # None for anonymous visitors
    display_name: str
    avatar_url: str

    @property
    def is_anonymous(self) -> bool:
        return self.user_id is None


class Comment(DomainModel):
    """Comment on an article."""

    id: CommentId
    article_id: ArticleId
    author: CommentAuthor
    content: str = Field(min_length=1, max_length=10000)
    created_at: datetime = Field(default_factory=datetime.now)


class Reply(DomainModel):
    """Reply to a comment."""

    id: ReplyId
    comment_id: CommentId
    article_id: ArticleId
    author: CommentAuthor
    content: str = Field(min_length=1, max_length=10000)
    created_at: datetime = Field(default_factory=datetime.now)
