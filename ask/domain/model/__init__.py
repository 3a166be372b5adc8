"""Domain model entities for the Q&A board."""

from ask.domain.model.answer import Answer
from ask.domain.model.comment import Comment
from ask.domain.model.notification import Notification
from ask.domain.model.question import Question
from ask.domain.model.user import User

__all__ = [
    "User",
    "Question",
    "Answer",
    "Comment",
    "Notification",
]
