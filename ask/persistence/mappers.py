"""Mappers between database rows and domain models.

The domain models are immutable Pydantic models, so rows are mapped by hand
rather than through SQLAlchemy's ORM.
"""

from typing import Any, Dict
from uuid import UUID

from ask.domain.model import Answer, Comment, Notification, Question, User
from ask.domain.value import (
    AnswerId,
    CommentId,
    Email,
    NotificationId,
    NotificationType,
    QuestionId,
    UserId,
    UserRole,
    Username,
    VoteDirection,
)


def _uuid(value: Any) -> UUID:
    """Accept UUIDs as returned by asyncpg or as strings from JSONB."""
    return value if isinstance(value, UUID) else UUID(str(value))


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert a users row to a User."""
    return User(
        id=UserId(_uuid(row["id"])),
        username=Username(row["username"]),
        email=Email(row["email"]),
        password_hash=row["password_hash"],
        first_name=row.get("first_name"),
        last_name=row.get("last_name"),
        role=UserRole(row.get("role") or UserRole.USER.value),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert a User to a users row."""
    return {
        "id": user.id,
        "username": user.username.root,
        "email": user.email.root,
        "password_hash": user.password_hash,
        "first_name": user.first_name,
        "last_name": user.last_name,
        "role": user.role.value,
        "created_at": user.created_at,
        "updated_at": user.updated_at,
    }


def row_to_question(row: Dict[str, Any]) -> Question:
    """Convert a questions row to a Question."""
    return Question(
        id=QuestionId(_uuid(row["id"])),
        title=row["title"],
        description=row["description"],
        tags=list(row.get("tags") or []),
        author_id=UserId(_uuid(row["author_id"])),
        views=row["views"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def question_to_dict(question: Question) -> Dict[str, Any]:
    """Convert a Question to a questions row."""
    return question.model_dump()


def comment_to_json(comment: Comment) -> Dict[str, Any]:
    """Convert an embedded Comment to its JSONB form."""
    return comment.model_dump(mode="json")


def json_to_comment(data: Dict[str, Any]) -> Comment:
    """Convert the JSONB form of a comment back to a Comment."""
    return Comment(
        id=CommentId(_uuid(data["id"])),
        author_id=UserId(_uuid(data["author_id"])),
        text=data["text"],
        created_at=data["created_at"],
    )


def row_to_answer(row: Dict[str, Any]) -> Answer:
    """Convert an answers row to an Answer.

    ``voters`` is stored as ``{"<user id>": "up" | "down"}`` and
    ``comments`` as a JSON array in insertion order.
    """
    return Answer(
        id=AnswerId(_uuid(row["id"])),
        question_id=QuestionId(_uuid(row["question_id"])),
        author_id=UserId(_uuid(row["author_id"])),
        text=row["text"],
        votes=row["votes"],
        voters={
            UserId(_uuid(user_id)): VoteDirection(direction)
            for user_id, direction in (row.get("voters") or {}).items()
        },
        is_accepted=row["is_accepted"],
        comments=[json_to_comment(c) for c in row.get("comments") or []],
        version=row["version"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def answer_to_dict(answer: Answer) -> Dict[str, Any]:
    """Convert an Answer to an answers row."""
    return {
        "id": answer.id,
        "question_id": answer.question_id,
        "author_id": answer.author_id,
        "text": answer.text,
        "votes": answer.votes,
        "voters": {str(k): v.value for k, v in answer.voters.items()},
        "is_accepted": answer.is_accepted,
        "comments": [comment_to_json(c) for c in answer.comments],
        "version": answer.version,
        "created_at": answer.created_at,
        "updated_at": answer.updated_at,
    }


def row_to_notification(row: Dict[str, Any]) -> Notification:
    """Convert a notifications row to a Notification."""
    return Notification(
        id=NotificationId(_uuid(row["id"])),
        user_id=UserId(_uuid(row["user_id"])),
        type=NotificationType(row["type"]),
        message=row["message"],
        link=row.get("link"),
        read=row["read"],
        created_at=row["created_at"],
    )


def notification_to_dict(notification: Notification) -> Dict[str, Any]:
    """Convert a Notification to a notifications row."""
    data = notification.model_dump()
    data["type"] = notification.type.value
    return data
