"""Repository interfaces for the Q&A domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from ask.domain.repository.answer import AnswerRepository
from ask.domain.repository.notification import NotificationRepository
from ask.domain.repository.question import QuestionRepository
from ask.domain.repository.unit_of_work import UnitOfWork
from ask.domain.repository.user import UserRepository

__all__ = [
    "UserRepository",
    "QuestionRepository",
    "AnswerRepository",
    "NotificationRepository",
    "UnitOfWork",
]
