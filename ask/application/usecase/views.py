"""Response views shared by the content use cases.

Authors are populated with one batch user lookup per response.
"""

from datetime import datetime
from typing import Iterable, Optional

from pydantic import BaseModel

from ask.domain.model import Answer, Comment, Notification, Question, User
from ask.domain.service import UserService
from ask.domain.value import UserId


class AuthorInfo(BaseModel):
    """Public author fields."""

    id: str
    username: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None


class UserView(BaseModel):
    """A user as returned to themselves (never includes the password hash)."""

    id: str
    username: str
    email: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    role: str
    created_at: datetime


class QuestionView(BaseModel):
    """A question with its author."""

    id: str
    title: str
    description: str
    tags: list[str]
    views: int
    author: Optional[AuthorInfo]
    answers_count: Optional[int] = None
    created_at: datetime
    updated_at: datetime


class CommentView(BaseModel):
    """A comment with its author."""

    id: str
    text: str
    author: Optional[AuthorInfo]
    created_at: datetime


class AnswerView(BaseModel):
    """An answer with its author and the authors of its comments."""

    id: str
    question_id: str
    text: str
    votes: int
    voters: dict[str, str]
    is_accepted: bool
    author: Optional[AuthorInfo]
    comments: list[CommentView]
    created_at: datetime
    updated_at: datetime


class NotificationView(BaseModel):
    """A notification in the feed."""

    id: str
    type: str
    message: str
    link: Optional[str]
    read: bool
    created_at: datetime


def author_info(user: Optional[User]) -> Optional[AuthorInfo]:
    """Public fields of a user, or None for an unknown author."""
    if user is None:
        return None
    return AuthorInfo(
        id=str(user.id),
        username=user.username.root,
        first_name=user.first_name,
        last_name=user.last_name,
    )


def user_view(user: User) -> UserView:
    """Profile view of a user."""
    return UserView(
        id=str(user.id),
        username=user.username.root,
        email=user.email.root,
        first_name=user.first_name,
        last_name=user.last_name,
        role=user.role.value,
        created_at=user.created_at,
    )


def question_view(
    question: Question,
    authors: dict[UserId, User],
    answers_count: Optional[int] = None,
) -> QuestionView:
    """Build a question view from preloaded authors."""
    return QuestionView(
        id=str(question.id),
        title=question.title,
        description=question.description,
        tags=list(question.tags),
        views=question.views,
        author=author_info(authors.get(question.author_id)),
        answers_count=answers_count,
        created_at=question.created_at,
        updated_at=question.updated_at,
    )


def comment_view(comment: Comment, authors: dict[UserId, User]) -> CommentView:
    """Build a comment view from preloaded authors."""
    return CommentView(
        id=str(comment.id),
        text=comment.text,
        author=author_info(authors.get(comment.author_id)),
        created_at=comment.created_at,
    )


def answer_view(answer: Answer, authors: dict[UserId, User]) -> AnswerView:
    """Build an answer view from preloaded authors."""
    return AnswerView(
        id=str(answer.id),
        question_id=str(answer.question_id),
        text=answer.text,
        votes=answer.votes,
        voters={str(k): v.value for k, v in answer.voters.items()},
        is_accepted=answer.is_accepted,
        author=author_info(authors.get(answer.author_id)),
        comments=[comment_view(c, authors) for c in answer.comments],
        created_at=answer.created_at,
        updated_at=answer.updated_at,
    )


def notification_view(notification: Notification) -> NotificationView:
    """Build a notification view."""
    return NotificationView(
        id=str(notification.id),
        type=notification.type.value,
        message=notification.message,
        link=notification.link,
        read=notification.read,
        created_at=notification.created_at,
    )


async def answer_views(
    user_service: UserService, answers: Iterable[Answer]
) -> list[AnswerView]:
    """Views for several answers, loading every author in one query."""
    answers = list(answers)
    author_ids = [uid for answer in answers for uid in answer.author_ids()]
    authors = await user_service.get_users_by_ids(author_ids)
    return [answer_view(answer, authors) for answer in answers]
