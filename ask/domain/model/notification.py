"""Notification entity."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from ask.domain.model.common import DomainModel
from ask.domain.value import NotificationId, NotificationType, UserId


class Notification(DomainModel):
    """Notification informing a user about activity on their content.

    Created only by the notification dispatcher; afterwards only ``read``
    ever changes.
    """

    id: NotificationId
    user_id: UserId  # Recipient
    type: NotificationType
    message: str = Field(min_length=1, max_length=500)
    link: Optional[str] = None
    read: bool = False
    created_at: datetime = Field(default_factory=datetime.now)
