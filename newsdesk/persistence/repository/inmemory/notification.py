"""In-memory notification repository for testing."""

from typing import List

from newsdesk.domain.model import Notification
from newsdesk.domain.repository import NotificationRepository
from newsdesk.domain.value import UserId


class InMemoryNotificationRepository(NotificationRepository):
    """In-memory implementation of NotificationRepository for testing."""

    def __init__(self) -> None:
        self._notifications: list[Notification] = []

    async def save(self, notification: Notification) -> Notification:
        """Save a new notification."""
        self._notifications.append(notification)
        return notification

    async def find_by_user(
        self, user_id: UserId, offset: int = 0, limit: int = 10
    ) -> List[Notification]:
        """Find a user's notifications, newest first."""
        indexed = [
            (i, n) for i, n in enumerate(self._notifications) if n.user_id == user_id
        ]
        indexed.sort(key=lambda pair: (pair[1].created_at, pair[0]), reverse=True)
        return [n for _, n in indexed][offset : offset + limit]

    async def count_by_user(self, user_id: UserId) -> int:
        """Count a user's notifications."""
        return sum(1 for n in self._notifications if n.user_id == user_id)

    async def has_unread(self, user_id: UserId) -> bool:
        """Check whether the user has any unread notification."""
        return any(n.user_id == user_id and not n.is_read for n in self._notifications)

    async def mark_all_read(self, user_id: UserId) -> int:
        """Mark every notification of the user as read."""
        count = 0
        for i, n in enumerate(self._notifications):
            if n.user_id == user_id and not n.is_read:
                self._notifications[i] = n.model_copy(update={"is_read": True})
                count += 1
        return count
