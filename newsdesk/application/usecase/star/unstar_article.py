"""Unstar article use case."""

from uuid import UUID

from pydantic import BaseModel

from newsdesk.domain.service import StarService
from newsdesk.domain.value import ArticleId, UserId


class UnstarArticleRequest(BaseModel):
    """Unstar article request."""

    article_id: int
    user_id: str  # From authenticated user


class UnstarArticleUseCase:
    """Use case for removing a star. Succeeds whether or not a star existed."""

    def __init__(self, star_service: StarService) -> None:
        """Initialize unstar article use case.

        Args:
            star_service: Star domain service
        """
        self.star_service = star_service

    async def execute(self, request: UnstarArticleRequest) -> None:
        await self.star_service.unstar_article(
            UserId(UUID(request.user_id)), ArticleId(request.article_id)
        )
