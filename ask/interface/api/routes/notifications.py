"""Notification routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie

from ask.application.usecase.notification import (
    ListNotificationsRequest,
    ListNotificationsUseCase,
    MarkNotificationReadRequest,
    MarkNotificationReadUseCase,
)
from ask.application.usecase.views import NotificationView
from ask.domain.service import JWTService
from ask.interface.api.routes.common import require_user_id

router = APIRouter(
    prefix="/notifications", tags=["notifications"], route_class=DishkaRoute
)


@router.get("", response_model=list[NotificationView])
async def list_notifications(
    list_notifications_use_case: FromDishka[ListNotificationsUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> list[NotificationView]:
    """The caller's most recent notifications, newest first."""
    user_id = require_user_id(jwt_service, auth_token)
    return await list_notifications_use_case.execute(
        ListNotificationsRequest(user_id=user_id)
    )


@router.patch("/{notification_id}/read", response_model=NotificationView)
async def mark_notification_read(
    notification_id: str,
    mark_read_use_case: FromDishka[MarkNotificationReadUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> NotificationView:
    """Mark one of the caller's notifications as read."""
    user_id = require_user_id(jwt_service, auth_token)
    return await mark_read_use_case.execute(
        MarkNotificationReadRequest(notification_id=notification_id, user_id=user_id)
    )
