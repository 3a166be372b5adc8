"""In-memory repository implementations for testing."""

from .answer import InMemoryAnswerRepository
from .notification import InMemoryNotificationRepository
from .question import InMemoryQuestionRepository
from .unit_of_work import InMemoryUnitOfWork
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryAnswerRepository",
    "InMemoryNotificationRepository",
    "InMemoryQuestionRepository",
    "InMemoryUnitOfWork",
    "InMemoryUserRepository",
]
