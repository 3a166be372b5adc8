"""Domain value objects for the Q&A board."""

from ask.domain.value.identifiers import (
    AnswerId,
    CommentId,
    NotificationId,
    QuestionId,
    UserId,
)
from ask.domain.value.types import (
    Email,
    NotificationType,
    UserRole,
    Username,
    VoteDirection,
)

__all__ = [
    # Identifiers
    "UserId",
    "QuestionId",
    "AnswerId",
    "CommentId",
    "NotificationId",
    # Types
    "Email",
    "NotificationType",
    "UserRole",
    "Username",
    "VoteDirection",
]
