"""In-memory article repository for testing."""

from typing import Iterable, List, Optional, Sequence

from newsdesk.domain.model import Article
from newsdesk.domain.repository import ArticleRepository
from newsdesk.domain.value import ArticleId, ColumnId


class InMemoryArticleRepository(ArticleRepository):
    """In-memory implementation of ArticleRepository for testing."""

    def __init__(self) -> None:
        self._articles: dict[ArticleId, Article] = {}

    def add(self, *articles: Article) -> None:
        """Seed articles (the content store is read-only to the service)."""
        for article in articles:
            self._articles[article.id] = article

    def _newest_first(self, articles: Iterable[Article]) -> List[Article]:
        return sorted(articles, key=lambda a: (a.created_at, a.id), reverse=True)

    async def find_by_id(self, article_id: ArticleId) -> Optional[Article]:
        """Find an article by ID."""
        return self._articles.get(article_id)

    async def find_by_ids(self, article_ids: Sequence[ArticleId]) -> List[Article]:
        """Find several articles at once."""
        return [self._articles[aid] for aid in article_ids if aid in self._articles]

    async def find_latest_with_picture(self, limit: int) -> List[Article]:
        """Find the latest articles that carry a picture."""
        return self._newest_first(a for a in self._articles.values() if a.has_picture)[
            :limit
        ]

    async def find_latest_by_columns(
        self, column_ids: Sequence[ColumnId], limit: int
    ) -> List[Article]:
        """Find the latest articles across a set of columns."""
        wanted = set(column_ids)
        return self._newest_first(
            a for a in self._articles.values() if a.column_id in wanted
        )[:limit]

    async def find_by_origin(
        self, origin: str, exclude_id: ArticleId, limit: int
    ) -> List[Article]:
        """Find other articles by the same writer."""
        return self._newest_first(
            a
            for a in self._articles.values()
            if a.origin == origin and a.id != exclude_id
        )[:limit]
