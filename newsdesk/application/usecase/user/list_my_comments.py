"""List my comments use case."""

from uuid import UUID

from pydantic import BaseModel

from newsdesk.application.usecase.common import (
    ArticleItem,
    CommentItem,
    PageInfo,
    to_article_item,
    to_comment_item,
)
from newsdesk.domain.service import ArticleService, CommentService
from newsdesk.domain.value import Page, UserId


class ListMyCommentsRequest(BaseModel):
    """List my comments request."""

    user_id: str
    page: int = 1
    per_page: int = 10


class MyCommentItem(BaseModel):
    """Own comment with the article it belongs to."""

    comment: CommentItem
    article: ArticleItem | None  # None if the article was removed


class ListMyCommentsResponse(BaseModel):
    """List my comments response."""

    comments: list[MyCommentItem]
    pagination: PageInfo


class ListMyCommentsUseCase:
    """Use case for listing the signed-in user's comments, newest first."""

    def __init__(
        self, comment_service: CommentService, article_service: ArticleService
    ) -> None:
        """Initialize use case.

        Args:
            comment_service: Comment domain service
            article_service: Article domain service
        """
        self.comment_service = comment_service
        self.article_service = article_service

    async def execute(self, request: ListMyCommentsRequest) -> ListMyCommentsResponse:
        page = Page(page=request.page, per_page=request.per_page)
        comments, total = await self.comment_service.get_comments_by_user(
            UserId(UUID(request.user_id)), page
        )

        replies = await self.comment_service.get_replies_for_comments(
            [c.id for c in comments]
        )
        articles = await self.article_service.get_articles_by_ids(
            list({c.article_id for c in comments})
        )

        items = [
            MyCommentItem(
                comment=to_comment_item(c, replies.get(c.id)),
                article=to_article_item(articles[c.article_id])
                if c.article_id in articles
                else None,
            )
            for c in comments
        ]
        return ListMyCommentsResponse(
            comments=items,
            pagination=PageInfo(page=page.page, per_page=page.per_page, total=total),
        )
