"""Notification use cases."""

from .list_notifications import ListNotificationsRequest, ListNotificationsUseCase
from .mark_read import MarkNotificationReadRequest, MarkNotificationReadUseCase

__all__ = [
    "ListNotificationsRequest",
    "ListNotificationsUseCase",
    "MarkNotificationReadRequest",
    "MarkNotificationReadUseCase",
]
