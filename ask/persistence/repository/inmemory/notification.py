"""In-memory notification repository for testing."""

from typing import Optional

from ask.domain.model.notification import Notification
from ask.domain.repository.notification import NotificationRepository
from ask.domain.value import NotificationId, UserId


class InMemoryNotificationRepository(NotificationRepository):
    """In-memory implementation of NotificationRepository for testing."""

    def __init__(self) -> None:
        self._notifications: dict[NotificationId, Notification] = {}

    async def save(self, notification: Notification) -> Notification:
        """Insert a notification."""
        self._notifications[notification.id] = notification
        return notification

    async def find_recent_for_user(
        self, user_id: UserId, limit: int = 20
    ) -> list[Notification]:
        """A user's newest notifications."""
        notifications = [
            n for n in reversed(list(self._notifications.values())) if n.user_id == user_id
        ]
        notifications.sort(key=lambda n: n.created_at, reverse=True)
        return notifications[:limit]

    async def mark_read(
        self, notification_id: NotificationId, user_id: UserId
    ) -> Optional[Notification]:
        """Mark the user's notification as read."""
        notification = self._notifications.get(notification_id)
        if not notification or notification.user_id != user_id:
            return None
        notification = notification.model_copy(update={"read": True})
        self._notifications[notification_id] = notification
        return notification
