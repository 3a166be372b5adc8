"""List notifications use case."""

from pydantic import BaseModel

from ask.application.usecase.base import load_actor
from ask.application.usecase.views import NotificationView, notification_view
from ask.config import NotificationSettings
from ask.domain.service import NotificationService, UserService


class ListNotificationsRequest(BaseModel):
    """List notifications request."""

    user_id: str  # User ID from authenticated user


class ListNotificationsUseCase:
    """Use case for the caller's notification feed."""

    def __init__(
        self,
        notification_service: NotificationService,
        notification_settings: NotificationSettings,
        user_service: UserService,
    ) -> None:
        """Initialize list notifications use case.

        Args:
            notification_service: Notification domain service
            notification_settings: Feed settings
            user_service: User domain service
        """
        self.notification_service = notification_service
        self.notification_settings = notification_settings
        self.user_service = user_service

    async def execute(self, request: ListNotificationsRequest) -> list[NotificationView]:
        """Most recent notifications, newest first."""
        user = await load_actor(self.user_service, request.user_id)
        notifications = await self.notification_service.list_recent(
            user.id, limit=self.notification_settings.feed_limit
        )
        return [notification_view(n) for n in notifications]
