"""Star domain service."""

from datetime import datetime
from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from newsdesk.domain.error import DuplicateOperationError
from newsdesk.domain.model import Star
from newsdesk.domain.repository import StarRepository
from newsdesk.domain.value import ArticleId, Page, StarId, UserId

from .article_service import ArticleService
from .base import Service


class StarService(Service):
    """Domain service for starring articles."""

    def __init__(
        self,
        star_repository: StarRepository,
        article_service: ArticleService,
    ) -> None:
        """Initialize star service.

        Args:
            star_repository: Star repository
            article_service: Article domain service
        """
        self.star_repository = star_repository
        self.article_service = article_service

    async def star_article(self, user_id: UserId, article_id: ArticleId) -> list[ArticleId]:
        """Star an article.

        Args:
            user_id: User ID
            article_id: Article ID

        Returns:
            Every article the user has starred, newest first

        Raises:
            NotFoundError: If the article does not exist
            DuplicateOperationError: If the user already starred it
        """
        with logfire.span(
            "star_service.star_article", user_id=str(user_id), article_id=article_id
        ):
            await self.article_service.ensure_exists(article_id)

            if await self.star_repository.exists(user_id, article_id):
                logfire.warn(
                    "Duplicate star attempt", user_id=str(user_id), article_id=article_id
                )
                raise DuplicateOperationError("您已收藏！")

            star = Star(
                id=StarId(uuid4()),
                user_id=user_id,
                article_id=article_id,
                created_at=datetime.now(),
            )

            # Unique constraint catches a concurrent duplicate
            try:
                await self.star_repository.save(star)
            except IntegrityError:
                logfire.warn(
                    "Duplicate star attempt", user_id=str(user_id), article_id=article_id
                )
                raise DuplicateOperationError("您已收藏！")

            logfire.info("Article starred", user_id=str(user_id), article_id=article_id)
            return await self.star_repository.find_article_ids_by_user(user_id)

    async def unstar_article(self, user_id: UserId, article_id: ArticleId) -> bool:
        """Remove a star. Removing a star that does not exist is not an error.

        Returns:
            True if a star was removed
        """
        with logfire.span(
            "star_service.unstar_article", user_id=str(user_id), article_id=article_id
        ):
            deleted = await self.star_repository.delete_by_user_and_article(
                user_id, article_id
            )
            if deleted:
                logfire.info(
                    "Article unstarred", user_id=str(user_id), article_id=article_id
                )
            else:
                logfire.info(
                    "No star to remove", user_id=str(user_id), article_id=article_id
                )
            return deleted

    async def is_starred(self, user_id: UserId | None, article_id: ArticleId) -> bool:
        if user_id is None:
            return False
        return await self.star_repository.exists(user_id, article_id)

    async def get_starred_by_user(
        self, user_id: UserId, page: Page
    ) -> tuple[list[Star], int]:
        """Page through a user's stars, newest first, with the total count."""
        with logfire.span("star_service.get_starred_by_user", user_id=str(user_id)):
            stars = await self.star_repository.find_by_user(
                user_id, offset=page.offset, limit=page.limit
            )
            total = await self.star_repository.count_by_user(user_id)
            return stars, total
