"""List my information (reply notifications) use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from newsdesk.application.usecase.common import (
    ArticleItem,
    CommentItem,
    PageInfo,
    ReplyItem,
    to_article_item,
    to_comment_item,
    to_reply_item,
)
from newsdesk.domain.service import ArticleService, CommentService, NotificationService
from newsdesk.domain.value import Page, UserId


class ListMyInformationRequest(BaseModel):
    """List my information request."""

    user_id: str
    page: int = 1
    per_page: int = 10


class InformationItem(BaseModel):
    """A reply to one of the user's comments."""

    notification_id: str
    is_read: bool
    created_at: datetime
    article: ArticleItem | None
    comment: CommentItem | None
    reply: ReplyItem | None


class ListMyInformationResponse(BaseModel):
    """List my information response."""

    information: list[InformationItem]
    pagination: PageInfo


class ListMyInformationUseCase:
    """Use case for listing replies to the user's comments, newest first."""

    def __init__(
        self,
        notification_service: NotificationService,
        comment_service: CommentService,
        article_service: ArticleService,
    ) -> None:
        """Initialize use case.

        Args:
            notification_service: Notification domain service
            comment_service: Comment domain service
            article_service: Article domain service
        """
        self.notification_service = notification_service
        self.comment_service = comment_service
        self.article_service = article_service

    async def execute(
        self, request: ListMyInformationRequest
    ) -> ListMyInformationResponse:
        page = Page(page=request.page, per_page=request.per_page)
        notifications, total = await self.notification_service.list_for_user(
            UserId(UUID(request.user_id)), page
        )

        comments = await self.comment_service.get_comments_by_ids(
            list({n.comment_id for n in notifications})
        )
        replies = await self.comment_service.get_replies_by_ids(
            [n.reply_id for n in notifications]
        )
        articles = await self.article_service.get_articles_by_ids(
            list({n.article_id for n in notifications})
        )

        items = []
        for n in notifications:
            comment = comments.get(n.comment_id)
            reply = replies.get(n.reply_id)
            article = articles.get(n.article_id)
            items.append(
                InformationItem(
                    notification_id=str(n.id),
                    is_read=n.is_read,
                    created_at=n.created_at,
                    article=to_article_item(article) if article else None,
                    comment=to_comment_item(comment) if comment else None,
                    reply=to_reply_item(reply) if reply else None,
                )
            )

        return ListMyInformationResponse(
            information=items,
            pagination=PageInfo(page=page.page, per_page=page.per_page, total=total),
        )
