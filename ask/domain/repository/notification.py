"""Notification repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from ask.domain.model.notification import Notification
from ask.domain.value import NotificationId, UserId


class NotificationRepository(ABC):
    """Repository for Notification entity."""

    @abstractmethod
    async def save(self, notification: Notification) -> Notification:
        """Insert a notification.

        Args:
            notification: The notification to insert

        Returns:
            The saved notification
        """
        pass

    @abstractmethod
    async def find_recent_for_user(
        self, user_id: UserId, limit: int = 20
    ) -> List[Notification]:
        """Find a user's most recent notifications, newest first.

        Args:
            user_id: Recipient user ID
            limit: Maximum number of notifications to return

        Returns:
            Notifications ordered by creation time, descending
        """
        pass

    @abstractmethod
    async def mark_read(
        self, notification_id: NotificationId, user_id: UserId
    ) -> Optional[Notification]:
        """Flip ``read`` to true on a notification owned by the user.

        Args:
            notification_id: The notification ID
            user_id: The recipient; other users' notifications are not touched

        Returns:
            The updated notification, or None if no such notification
            belongs to the user
        """
        pass
