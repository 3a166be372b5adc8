"""Mark notification read use case."""

from pydantic import BaseModel

from ask.application.usecase.base import load_actor, parse_id
from ask.application.usecase.views import NotificationView, notification_view
from ask.domain.service import NotificationService, UserService
from ask.domain.value import NotificationId


class MarkNotificationReadRequest(BaseModel):
    """Mark notification read request."""

    notification_id: str
    user_id: str  # User ID from authenticated user


class MarkNotificationReadUseCase:
    """Use case for marking one notification as read."""

    def __init__(
        self, notification_service: NotificationService, user_service: UserService
    ) -> None:
        """Initialize mark read use case.

        Args:
            notification_service: Notification domain service
            user_service: User domain service
        """
        self.notification_service = notification_service
        self.user_service = user_service

    async def execute(self, request: MarkNotificationReadRequest) -> NotificationView:
        """Flip the read flag.

        Raises:
            NotFoundError: If the caller has no such notification
        """
        notification_id = NotificationId(parse_id(request.notification_id, "notification"))
        user = await load_actor(self.user_service, request.user_id)
        notification = await self.notification_service.mark_read(
            notification_id, user.id
        )
        return notification_view(notification)
