"""PostgreSQL repository implementations."""

from ask.persistence.repository.answer import PostgresAnswerRepository
from ask.persistence.repository.notification import PostgresNotificationRepository
from ask.persistence.repository.question import PostgresQuestionRepository
from ask.persistence.repository.unit_of_work import SqlAlchemyUnitOfWork
from ask.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresQuestionRepository",
    "PostgresAnswerRepository",
    "PostgresNotificationRepository",
    "SqlAlchemyUnitOfWork",
]
