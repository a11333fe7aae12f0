"""Notice (unread information flag) use cases."""

from uuid import UUID

from pydantic import BaseModel

from newsdesk.domain.service import NotificationService
from newsdesk.domain.value import UserId


class NoticeRequest(BaseModel):
    """Notice request."""

    user_id: str


class CheckNoticeResponse(BaseModel):
    """Whether there is unread information."""

    new_information: bool


class CheckNoticeUseCase:
    """Use case for checking for unread reply notifications."""

    def __init__(self, notification_service: NotificationService) -> None:
        """Initialize use case.

        Args:
            notification_service: Notification domain service
        """
        self.notification_service = notification_service

    async def execute(self, request: NoticeRequest) -> CheckNoticeResponse:
        has_unread = await self.notification_service.has_unread(
            UserId(UUID(request.user_id))
        )
        return CheckNoticeResponse(new_information=has_unread)


class ClearNoticeUseCase:
    """Use case for marking all reply notifications as read."""

    def __init__(self, notification_service: NotificationService) -> None:
        """Initialize use case.

        Args:
            notification_service: Notification domain service
        """
        self.notification_service = notification_service

    async def execute(self, request: NoticeRequest) -> None:
        await self.notification_service.mark_all_read(UserId(UUID(request.user_id)))
