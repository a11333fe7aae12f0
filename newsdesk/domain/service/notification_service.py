"""Notification domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from newsdesk.domain.model import Comment, Notification, Reply
from newsdesk.domain.repository import NotificationRepository
from newsdesk.domain.value import NotificationId, Page, UserId

from .base import Service


class NotificationService(Service):
    """Domain service for reply notifications."""

    def __init__(self, notification_repository: NotificationRepository) -> None:
        """Initialize notification service.

        Args:
            notification_repository: Notification repository
        """
        self.notification_repository = notification_repository

    async def notify_reply(self, comment: Comment, reply: Reply) -> Notification | None:
        """Tell a comment's author about a reply.

        Only registered authors are notified, and never about their own replies.

        Returns:
            Created notification, or None if nobody is notified
        """
        recipient = comment.author.user_id
        if recipient is None or recipient == reply.author.user_id:
            return None

        with logfire.span(
            "notification_service.notify_reply",
            user_id=str(recipient),
            reply_id=str(reply.id),
        ):
            notification = Notification(
                id=NotificationId(uuid4()),
                user_id=recipient,
                article_id=comment.article_id,
                comment_id=comment.id,
                reply_id=reply.id,
                is_read=False,
                created_at=datetime.now(),
            )
            saved = await self.notification_repository.save(notification)
            logfire.info("Reply notification created", user_id=str(recipient))
            return saved

    async def list_for_user(
        self, user_id: UserId, page: Page
    ) -> tuple[list[Notification], int]:
        """List a user's notifications, newest first, with the total count."""
        with logfire.span("notification_service.list_for_user", user_id=str(user_id)):
            items = await self.notification_repository.find_by_user(
                user_id, offset=page.offset, limit=page.limit
            )
            total = await self.notification_repository.count_by_user(user_id)
            return items, total

    async def has_unread(self, user_id: UserId) -> bool:
        return await self.notification_repository.has_unread(user_id)

    async def mark_all_read(self, user_id: UserId) -> int:
        """Mark every notification as read."""
        with logfire.span("notification_service.mark_all_read", user_id=str(user_id)):
            count = await self.notification_repository.mark_all_read(user_id)
            logfire.info("Notifications marked read", user_id=str(user_id), count=count)
            return count
