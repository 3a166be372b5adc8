"""PostgreSQL implementation of Notification repository."""

from typing import List, Optional

from sqlalchemy import desc, select
from sqlalchemy.ext.asyncio import AsyncSession

from ask.domain.model import Notification
from ask.domain.repository import NotificationRepository
from ask.domain.value import NotificationId, UserId
from ask.persistence.mappers import notification_to_dict, row_to_notification
from ask.persistence.tables import notifications_table


class PostgresNotificationRepository(NotificationRepository):
    """PostgreSQL implementation of NotificationRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def save(self, notification: Notification) -> Notification:
        """Insert a notification."""
        stmt = notifications_table.insert().values(**notification_to_dict(notification))
        await self.session.execute(stmt)
        await self.session.flush()
        return notification

    async def find_recent_for_user(
        self, user_id: UserId, limit: int = 20
    ) -> List[Notification]:
        """A user's newest notifications."""
        stmt = (
            select(notifications_table)
            .where(notifications_table.c.user_id == user_id)
            .order_by(desc(notifications_table.c.created_at))
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [row_to_notification(dict(row)) for row in result.mappings().all()]

    async def mark_read(
        self, notification_id: NotificationId, user_id: UserId
    ) -> Optional[Notification]:
        """Set read=true on the user's notification and return it."""
        stmt = (
            notifications_table.update()
            .where(notifications_table.c.id == notification_id)
            .where(notifications_table.c.user_id == user_id)
            .values(read=True)
            .returning(notifications_table)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        await self.session.flush()
        return row_to_notification(dict(row)) if row else None
