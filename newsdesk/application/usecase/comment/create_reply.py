"""Create reply use case."""

from uuid import UUID

from pydantic import BaseModel

from newsdesk.application.usecase.comment.create_comment import resolve_author
from newsdesk.application.usecase.common import ReplyItem, to_reply_item
from newsdesk.config import ContentSettings
from newsdesk.domain.service import ArticleService, CommentService, UserService
from newsdesk.domain.value import ArticleId, CommentId


class CreateReplyRequest(BaseModel):
    """Create reply request (author identified like CreateCommentRequest)."""

    article_id: int
    comment_id: str
    content: str | None = None
    user_id: str | None = None
    client_ip: str | None = None


class CreateReplyUseCase:
    """Use case for replying to a comment."""

    def __init__(
        self,
        comment_service: CommentService,
        article_service: ArticleService,
        user_service: UserService,
        content_settings: ContentSettings,
    ) -> None:
        """Initialize create reply use case.

        Args:
            comment_service: Comment domain service
            article_service: Article domain service
            user_service: User domain service
            content_settings: Content settings (default avatar)
        """
        self.comment_service = comment_service
        self.article_service = article_service
        self.user_service = user_service
        self.content_settings = content_settings

    async def execute(self, request: CreateReplyRequest) -> ReplyItem:
        """Execute create reply flow.

        Raises:
            ValidationError: If content is empty
            NotFoundError: If the article or comment does not exist
        """
        article_id = ArticleId(request.article_id)
        await self.article_service.ensure_exists(article_id)

        author = await resolve_author(
            self.user_service, self.content_settings, request.user_id, request.client_ip
        )
        reply = await self.comment_service.create_reply(
            article_id,
            CommentId(UUID(request.comment_id)),
            author,
            request.content,
        )
        return to_reply_item(reply)
