"""Article repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from newsdesk.domain.model.article import Article
from newsdesk.domain.value import ArticleId, ColumnId


class ArticleRepository(ABC):
    """Read-only repository for articles.

    Every list method returns newest first.
    """

    @abstractmethod
    async def find_by_id(self, article_id: ArticleId) -> Optional[Article]:
        """Find an article by ID."""
        pass

    @abstractmethod
    async def find_by_ids(self, article_ids: Sequence[ArticleId]) -> List[Article]:
        """Find several articles at once, in no particular order."""
        pass

    @abstractmethod
    async def find_latest_with_picture(self, limit: int) -> List[Article]:
        """Find the latest articles that carry a picture.

        Args:
            limit: Maximum number of articles

        Returns:
            Articles, newest first
        """
        pass

    @abstractmethod
    async def find_latest_by_columns(
        self, column_ids: Sequence[ColumnId], limit: int
    ) -> List[Article]:
        """Find the latest articles across a set of columns.

        Args:
            column_ids: Columns to draw from
            limit: Maximum number of articles

        Returns:
            Articles, newest first
        """
        pass

    @abstractmethod
    async def find_by_origin(
        self, origin: str, exclude_id: ArticleId, limit: int
    ) -> List[Article]:
        """Find other articles by the same writer.

        Args:
            origin: Writer / source
            exclude_id: Article to leave out
            limit: Maximum number of articles

        Returns:
            Articles, newest first
        """
        pass
