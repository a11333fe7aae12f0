"""PostgreSQL implementation of Notification repository."""

from typing import List

from sqlalchemy import and_, exists, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from newsdesk.domain.model import Notification
from newsdesk.domain.repository import NotificationRepository
from newsdesk.domain.value import UserId
from newsdesk.persistence.mappers import notification_to_dict, row_to_notification
from newsdesk.persistence.tables import notifications_table


class PostgresNotificationRepository(NotificationRepository):
    """PostgreSQL implementation of NotificationRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def save(self, notification: Notification) -> Notification:
        """Save a new notification."""
        stmt = insert(notifications_table).values(**notification_to_dict(notification))
        await self.session.execute(stmt)
        await self.session.flush()
        return notification

    async def find_by_user(
        self, user_id: UserId, offset: int = 0, limit: int = 10
    ) -> List[Notification]:
        """Find a user's notifications, newest first."""
        stmt = (
            select(notifications_table)
            .where(notifications_table.c.user_id == user_id)
            .order_by(notifications_table.c.created_at.desc())
            .offset(offset)
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [row_to_notification(dict(row)) for row in result.mappings().all()]

    async def count_by_user(self, user_id: UserId) -> int:
        """Count a user's notifications."""
        stmt = select(func.count()).where(notifications_table.c.user_id == user_id)
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def has_unread(self, user_id: UserId) -> bool:
        """Check whether the user has any unread notification."""
        stmt = select(
            exists().where(
                and_(
                    notifications_table.c.user_id == user_id,
                    notifications_table.c.is_read.is_(False),
                )
            )
        )
        result = await self.session.execute(stmt)
        return bool(result.scalar())

    async def mark_all_read(self, user_id: UserId) -> int:
        """Mark every notification of the user as read."""
        stmt = (
            update(notifications_table)
            .where(
                and_(
                    notifications_table.c.user_id == user_id,
                    notifications_table.c.is_read.is_(False),
                )
            )
            .values(is_read=True)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount  # type: ignore[attr-defined]
