"""Star article use case."""

from uuid import UUID

from pydantic import BaseModel

from newsdesk.domain.service import StarService
from newsdesk.domain.value import ArticleId, UserId


class StarArticleRequest(BaseModel):
    """Star article request."""

    article_id: int
    user_id: str  # From authenticated user


class StarArticleResponse(BaseModel):
    """Star article response."""

    user_id: str
    starred_articles: list[int]


class StarArticleUseCase:
    """Use case for starring an article."""

    def __init__(self, star_service: StarService) -> None:
        """Initialize star article use case.

        Args:
            star_service: Star domain service
        """
        self.star_service = star_service

    async def execute(self, request: StarArticleRequest) -> StarArticleResponse:
        """Execute star flow.

        Raises:
            NotFoundError: If the article does not exist
            DuplicateOperationError: If already starred
        """
        starred = await self.star_service.star_article(
            UserId(UUID(request.user_id)), ArticleId(request.article_id)
        )
        return StarArticleResponse(user_id=request.user_id, starred_articles=starred)
