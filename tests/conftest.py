"""Test configuration and shared factories."""

import os
from datetime import datetime, timedelta
from uuid import uuid4

import logfire

from ask.domain.model import Answer, Question, User
from ask.domain.value import (
    AnswerId,
    Email,
    QuestionId,
    UserId,
    UserRole,
    Username,
)

# Cheap hashes; settings are read lazily by the DI container
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("AUTH__BCRYPT_ROUNDS", "4")

logfire.configure(send_to_logfire=False, console=False)


def make_user(username: str = "alice", role: UserRole = UserRole.USER) -> User:
    """Build a user with a placeholder password hash."""
    return User(
        id=UserId(uuid4()),
        username=Username(username),
        email=Email(f"{username.lower()}@example.com"),
        password_hash="not-a-real-hash",
        role=role,
    )


def make_question(author_id: UserId, title: str = "How do I test this?") -> Question:
    """Build a question by the given author."""
    return Question(
        id=QuestionId(uuid4()),
        title=title,
        description="<p>Details</p>",
        author_id=author_id,
    )


def make_answer(
    question_id: QuestionId,
    author_id: UserId,
    text: str = "Like this.",
    age_seconds: int = 0,
) -> Answer:
    """Build an answer; ``age_seconds`` backdates it for ordering tests."""
    created = datetime.now() - timedelta(seconds=age_seconds)
    return Answer(
        id=AnswerId(uuid4()),
        question_id=question_id,
        author_id=author_id,
        text=text,
        created_at=created,
        updated_at=created,
    )
