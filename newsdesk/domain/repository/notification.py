"""Notification repository interface."""

from abc import ABC, abstractmethod
from typing import List

from newsdesk.domain.model.notification import Notification
from newsdesk.domain.value import UserId


class NotificationRepository(ABC):
    """Repository for reply notifications."""

    @abstractmethod
    async def save(self, notification: Notification) -> Notification:
        """Save a new notification."""
        pass

    @abstractmethod
    async def find_by_user(
        self, user_id: UserId, offset: int = 0, limit: int = 10
    ) -> List[Notification]:
        """Find a user's notifications, newest first."""
        pass

    @abstractmethod
    async def count_by_user(self, user_id: UserId) -> int:
        """Count a user's notifications."""
        pass

    @abstractmethod
    async def has_unread(self, user_id: UserId) -> bool:
        """Check whether the user has any unread notification."""
        pass

    @abstractmethod
    async def mark_all_read(self, user_id: UserId) -> int:
        """Mark every notification of the user as read.

        Returns:
            Number of notifications changed
        """
        pass
