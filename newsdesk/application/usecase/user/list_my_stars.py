"""List my stars use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from newsdesk.application.usecase.common import ArticleItem, PageInfo, to_article_item
from newsdesk.domain.service import ArticleService, StarService
from newsdesk.domain.value import Page, UserId


class ListMyStarsRequest(BaseModel):
    """List my stars request."""

    user_id: str
    page: int = 1
    per_page: int = 10


class StarredArticleItem(BaseModel):
    """Starred article."""

    article: ArticleItem
    starred_at: datetime


class ListMyStarsResponse(BaseModel):
    """List my stars response (empty list when nothing is starred)."""

    articles: list[StarredArticleItem]
    pagination: PageInfo


class ListMyStarsUseCase:
    """Use case for listing the signed-in user's starred articles."""

    def __init__(self, star_service: StarService, article_service: ArticleService) -> None:
        """Initialize use case.

        Args:
            star_service: Star domain service
            article_service: Article domain service
        """
        self.star_service = star_service
        self.article_service = article_service

    async def execute(self, request: ListMyStarsRequest) -> ListMyStarsResponse:
        page = Page(page=request.page, per_page=request.per_page)
        stars, total = await self.star_service.get_starred_by_user(
            UserId(UUID(request.user_id)), page
        )
        articles = await self.article_service.get_articles_by_ids(
            [s.article_id for s in stars]
        )

        # Stars on articles that left the content store are skipped
        items = [
            StarredArticleItem(
                article=to_article_item(articles[s.article_id]),
                starred_at=s.created_at,
            )
            for s in stars
            if s.article_id in articles
        ]
        return ListMyStarsResponse(
            articles=items,
            pagination=PageInfo(page=page.page, per_page=page.per_page, total=total),
        )
