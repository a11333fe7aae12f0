"""PostgreSQL implementation of Star repository."""

from typing import List

from sqlalchemy import and_, delete, exists, func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from newsdesk.domain.model import Star
from newsdesk.domain.repository import StarRepository
from newsdesk.domain.value import ArticleId, UserId
from newsdesk.persistence.mappers import row_to_star, star_to_dict
from newsdesk.persistence.tables import article_stars_table


class PostgresStarRepository(StarRepository):
    """PostgreSQL implementation of StarRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def exists(self, user_id: UserId, article_id: ArticleId) -> bool:
        """Check whether the user starred the article."""
        stmt = select(
            exists().where(
                and_(
                    article_stars_table.c.user_id == user_id,
                    article_stars_table.c.article_id == article_id,
                )
            )
        )
        result = await self.session.execute(stmt)
        return bool(result.scalar())

    async def save(self, star: Star) -> Star:
        """Save a star (create)."""
        stmt = insert(article_stars_table).values(**star_to_dict(star))
        await self.session.execute(stmt)
        await self.session.flush()
        return star

    async def delete_by_user_and_article(
        self, user_id: UserId, article_id: ArticleId
    ) -> bool:
        """Remove a star."""
        stmt = delete(article_stars_table).where(
            and_(
                article_stars_table.c.user_id == user_id,
                article_stars_table.c.article_id == article_id,
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def find_by_user(
        self, user_id: UserId, offset: int = 0, limit: int = 10
    ) -> List[Star]:
        """Find a user's stars, newest first."""
        stmt = (
            select(article_stars_table)
            .where(article_stars_table.c.user_id == user_id)
            .order_by(article_stars_table.c.created_at.desc())
            .offset(offset)
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [row_to_star(dict(row)) for row in result.mappings().all()]

    async def count_by_user(self, user_id: UserId) -> int:
        """Count a user's stars."""
        stmt = select(func.count()).where(article_stars_table.c.user_id == user_id)
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def find_article_ids_by_user(self, user_id: UserId) -> List[ArticleId]:
        """List every article the user starred, newest first."""
        stmt = (
            select(article_stars_table.c.article_id)
            .where(article_stars_table.c.user_id == user_id)
            .order_by(article_stars_table.c.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return [ArticleId(article_id) for article_id in result.scalars().all()]
