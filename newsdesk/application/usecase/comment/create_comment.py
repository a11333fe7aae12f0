"""Create comment use case."""

from uuid import UUID

from pydantic import BaseModel

from newsdesk.application.usecase.common import CommentItem, to_comment_item
from newsdesk.config import ContentSettings
from newsdesk.domain.model import CommentAuthor
from newsdesk.domain.service import ArticleService, CommentService, UserService
from newsdesk.domain.service.comment_service import anonymous_author, author_from_user
from newsdesk.domain.value import ArticleId, UserId


class CreateCommentRequest(BaseModel):
    """Create comment request.

    Exactly one of user_id (signed-in author) or client_ip (anonymous
    visitor) identifies the author.
    """

    article_id: int
    content: str | None = None
    user_id: str | None = None
    client_ip: str | None = None


async def resolve_author(
    user_service: UserService,
    content_settings: ContentSettings,
    user_id: str | None,
    client_ip: str | None,
) -> CommentAuthor:
    """Author snapshot for a signed-in user, or an anonymous one from the IP."""
    if user_id:
        user = await user_service.get_by_id(UserId(UUID(user_id)))
        return author_from_user(user)
    return anonymous_author(client_ip, content_settings.default_avatar_url)


class CreateCommentUseCase:
    """Use case for commenting on an article."""

    def __init__(
        self,
        comment_service: CommentService,
        article_service: ArticleService,
        user_service: UserService,
        content_settings: ContentSettings,
    ) -> None:
        """Initialize create comment use case.

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

    async def execute(self, request: CreateCommentRequest) -> CommentItem:
        """Execute create comment flow.

        Raises:
            ValidationError: If content is empty
            NotFoundError: If the article does not exist
        """
        article_id = ArticleId(request.article_id)
        await self.article_service.ensure_exists(article_id)

        author = await resolve_author(
            self.user_service, self.content_settings, request.user_id, request.client_ip
        )
        comment = await self.comment_service.create_comment(
            article_id, author, request.content
        )
        return to_comment_item(comment)
