"""Get article use case."""

from uuid import UUID

from pydantic import BaseModel

from newsdesk.application.usecase.common import (
    ArticleItem,
    CommentItem,
    to_article_item,
    to_comment_item,
)
from newsdesk.config import ContentSettings
from newsdesk.domain.service import ArticleService, CommentService, StarService
from newsdesk.domain.value import ArticleId, Page, UserId


class GetArticleRequest(BaseModel):
    """Get article request."""

    article_id: int
    user_id: str | None = None  # Signed-in reader, if any


class ArticleDetail(ArticleItem):
    """Article with body and reader state."""

    content: str
    is_starred: bool


class GetArticleResponse(BaseModel):
    """Get article response."""

    article: ArticleDetail
    related_articles: list[ArticleItem]
    comments: list[CommentItem]
    comment_count: int


class GetArticleUseCase:
    """Use case for the article detail page."""

    def __init__(
        self,
        article_service: ArticleService,
        star_service: StarService,
        comment_service: CommentService,
        content_settings: ContentSettings,
    ) -> None:
        """Initialize get article use case.

        Args:
            article_service: Article domain service
            star_service: Star domain service
            comment_service: Comment domain service
            content_settings: Content settings (comment preview size)
        """
        self.article_service = article_service
        self.star_service = star_service
        self.comment_service = comment_service
        self.content_settings = content_settings

    async def execute(self, request: GetArticleRequest) -> GetArticleResponse:
        """Execute get article flow.

        Raises:
            NotFoundError: If the article does not exist
        """
        article_id = ArticleId(request.article_id)
        user_id = UserId(UUID(request.user_id)) if request.user_id else None

        article = await self.article_service.get_article(article_id)
        is_starred = await self.star_service.is_starred(user_id, article_id)
        related = await self.article_service.get_related_articles(article)

        comments, total = await self.comment_service.get_comments_for_article(
            article_id,
            Page(page=1, per_page=self.content_settings.article_comment_preview_limit),
        )
        replies = await self.comment_service.get_replies_for_comments(
            [c.id for c in comments]
        )

        return GetArticleResponse(
            article=ArticleDetail(
                **to_article_item(article).model_dump(),
                content=article.content,
                is_starred=is_starred,
            ),
            related_articles=[to_article_item(a) for a in related],
            comments=[to_comment_item(c, replies.get(c.id)) for c in comments],
            comment_count=total,
        )
