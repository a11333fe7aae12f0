"""List article comments use case."""

from pydantic import BaseModel

from newsdesk.application.usecase.common import CommentItem, PageInfo, to_comment_item
from newsdesk.domain.service import ArticleService, CommentService
from newsdesk.domain.value import ArticleId, Page


class ListCommentsRequest(BaseModel):
    """List comments request."""

    article_id: int
    page: int = 1
    per_page: int = 10


class ListCommentsResponse(BaseModel):
    """List comments response."""

    article_id: int
    comments: list[CommentItem]
    pagination: PageInfo


class ListCommentsUseCase:
    """Use case for paging through an article's comments with their replies."""

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

    async def execute(self, request: ListCommentsRequest) -> ListCommentsResponse:
        """Raises NotFoundError if the article does not exist."""
        article_id = ArticleId(request.article_id)
        await self.article_service.ensure_exists(article_id)

        page = Page(page=request.page, per_page=request.per_page)
        comments, total = await self.comment_service.get_comments_for_article(
            article_id, page
        )
        replies = await self.comment_service.get_replies_for_comments(
            [c.id for c in comments]
        )

        return ListCommentsResponse(
            article_id=article_id,
            comments=[to_comment_item(c, replies.get(c.id)) for c in comments],
            pagination=PageInfo(page=page.page, per_page=page.per_page, total=total),
        )
