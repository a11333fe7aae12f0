"""Star entity.

A star bookmarks an article for a user. One star per user per article.
"""

from datetime import datetime

from pydantic import Field

from newsdesk.domain.model.common import DomainModel
from newsdesk.domain.value import ArticleId, StarId, UserId


class Star(DomainModel):
    """Starred article (enforced unique per user/article by the database)."""

    id: StarId
    user_id: UserId
    article_id: ArticleId
    created_at: datetime = Field(default_factory=datetime.now)
