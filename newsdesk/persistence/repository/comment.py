"""PostgreSQL implementation of Comment and Reply repositories."""

from typing import List, Optional, Sequence

from sqlalchemy import func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from newsdesk.domain.model import Comment, Reply
from newsdesk.domain.repository import CommentRepository, ReplyRepository
from newsdesk.domain.value import ArticleId, CommentId, ReplyId, UserId
from newsdesk.persistence.mappers import (
    comment_to_dict,
    reply_to_dict,
    row_to_comment,
    row_to_reply,
)
from newsdesk.persistence.tables import article_comments_table, comment_replies_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(article_comments_table).where(
            article_comments_table.c.id == comment_id
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_comment(dict(row)) if row else None

    async def find_by_ids(self, comment_ids: Sequence[CommentId]) -> List[Comment]:
        """Find several comments at once."""
        if not comment_ids:
            return []
        stmt = select(article_comments_table).where(
            article_comments_table.c.id.in_(comment_ids)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(dict(row)) for row in result.mappings().all()]

    async def find_by_article(
        self, article_id: ArticleId, offset: int = 0, limit: int = 10
    ) -> List[Comment]:
        """Find comments on an article, newest first."""
        stmt = (
            select(article_comments_table)
            .where(article_comments_table.c.article_id == article_id)
            .order_by(article_comments_table.c.created_at.desc())
            .offset(offset)
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(dict(row)) for row in result.mappings().all()]

    async def count_by_article(self, article_id: ArticleId) -> int:
        """Count comments on an article."""
        stmt = select(func.count()).where(
            article_comments_table.c.article_id == article_id
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def find_by_author(
        self, user_id: UserId, offset: int = 0, limit: int = 10
    ) -> List[Comment]:
        """Find comments written by a registered user, newest first."""
        stmt = (
            select(article_comments_table)
            .where(article_comments_table.c.author_user_id == user_id)
            .order_by(article_comments_table.c.created_at.desc())
            .offset(offset)
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(dict(row)) for row in result.mappings().all()]

    async def count_by_author(self, user_id: UserId) -> int:
        """Count comments written by a registered user."""
        stmt = select(func.count()).where(
            article_comments_table.c.author_user_id == user_id
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def save(self, comment: Comment) -> Comment:
        """Save a new comment."""
        stmt = insert(article_comments_table).values(**comment_to_dict(comment))
        await self.session.execute(stmt)
        await self.session.flush()
        return comment


class PostgresReplyRepository(ReplyRepository):
    """PostgreSQL implementation of ReplyRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_ids(self, reply_ids: Sequence[ReplyId]) -> List[Reply]:
        """Find several replies at once."""
        if not reply_ids:
            return []
        stmt = select(comment_replies_table).where(
            comment_replies_table.c.id.in_(reply_ids)
        )
        result = await self.session.execute(stmt)
        return [row_to_reply(dict(row)) for row in result.mappings().all()]

    async def find_by_comment_ids(self, comment_ids: Sequence[CommentId]) -> List[Reply]:
        """Find replies to any of the given comments, oldest first."""
        if not comment_ids:
            return []
        stmt = (
            select(comment_replies_table)
            .where(comment_replies_table.c.comment_id.in_(comment_ids))
            .order_by(comment_replies_table.c.created_at.asc())
        )
        result = await self.session.execute(stmt)
        return [row_to_reply(dict(row)) for row in result.mappings().all()]

    async def save(self, reply: Reply) -> Reply:
        """Save a new reply."""
        stmt = insert(comment_replies_table).values(**reply_to_dict(reply))
        await self.session.execute(stmt)
        await self.session.flush()
        return reply
