"""Article entity.

Articles are authored elsewhere and only read by this service.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from newsdesk.domain.model.common import DomainModel
from newsdesk.domain.value import ArticleId, ColumnId


class Article(DomainModel):
    """Published article."""

    id: ArticleId
    title: str
    column_id: ColumnId
    origin: Optional[str] = None  # Writer / source, used for related articles
    thumbnail_url: Optional[str] = None
    has_picture: bool = False
    content: str = ""
    created_at: datetime = Field(default_factory=datetime.now)
