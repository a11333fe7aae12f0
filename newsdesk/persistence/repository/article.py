"""PostgreSQL implementation of Article repository."""

from typing import List, Optional, Sequence

from sqlalchemy import and_, select
from sqlalchemy.ext.asyncio import AsyncSession

from newsdesk.domain.model import Article
from newsdesk.domain.repository import ArticleRepository
from newsdesk.domain.value import ArticleId, ColumnId
from newsdesk.persistence.mappers import row_to_article
from newsdesk.persistence.tables import articles_table


class PostgresArticleRepository(ArticleRepository):
    """PostgreSQL implementation of ArticleRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _fetch(self, stmt) -> List[Article]:
        result = await self.session.execute(stmt)
        return [row_to_article(dict(row)) for row in result.mappings().all()]

    async def find_by_id(self, article_id: ArticleId) -> Optional[Article]:
        """Find an article by ID."""
        stmt = select(articles_table).where(articles_table.c.id == article_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_article(dict(row)) if row else None

    async def find_by_ids(self, article_ids: Sequence[ArticleId]) -> List[Article]:
        """Find several articles at once."""
        if not article_ids:
            return []
        stmt = select(articles_table).where(articles_table.c.id.in_(article_ids))
        return await self._fetch(stmt)

    async def find_latest_with_picture(self, limit: int) -> List[Article]:
        """Find the latest articles that carry a picture."""
        stmt = (
            select(articles_table)
            .where(articles_table.c.has_picture.is_(True))
            .order_by(articles_table.c.created_at.desc(), articles_table.c.id.desc())
            .limit(limit)
        )
        return await self._fetch(stmt)

    async def find_latest_by_columns(
        self, column_ids: Sequence[ColumnId], limit: int
    ) -> List[Article]:
        """Find the latest articles across a set of columns."""
        if not column_ids:
            return []
        stmt = (
            select(articles_table)
            .where(articles_table.c.column_id.in_(column_ids))
            .order_by(articles_table.c.created_at.desc(), articles_table.c.id.desc())
            .limit(limit)
        )
        return await self._fetch(stmt)

    async def find_by_origin(
        self, origin: str, exclude_id: ArticleId, limit: int
    ) -> List[Article]:
        """Find other articles by the same writer."""
        stmt = (
            select(articles_table)
            .where(
                and_(
                    articles_table.c.origin == origin,
                    articles_table.c.id != exclude_id,
                )
            )
            .order_by(articles_table.c.created_at.desc(), articles_table.c.id.desc())
            .limit(limit)
        )
        return await self._fetch(stmt)
