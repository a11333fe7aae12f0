"""Get home page use case."""

from pydantic import BaseModel

from newsdesk.application.usecase.common import ArticleItem, to_article_item
from newsdesk.domain.service import ArticleService


class ColumnItem(BaseModel):
    """Home page column with its latest articles."""

    column_id: int
    name: str
    articles: list[ArticleItem]


class GetHomeResponse(BaseModel):
    """Home page response."""

    picture_news: list[ArticleItem]
    article_list: list[ColumnItem]


class GetHomeUseCase:
    """Use case for the home page."""

    def __init__(self, article_service: ArticleService) -> None:
        """Initialize get home use case.

        Args:
            article_service: Article domain service
        """
        self.article_service = article_service

    async def execute(self) -> GetHomeResponse:
        home = await self.article_service.get_home_page()
        return GetHomeResponse(
            picture_news=[to_article_item(a) for a in home.picture_news],
            article_list=[
                ColumnItem(
                    column_id=entry.column.id,
                    name=entry.column.name,
                    articles=[to_article_item(a) for a in entry.articles],
                )
                for entry in home.columns
            ],
        )
