"""Notification dispatcher and feed."""

from datetime import datetime
from typing import Optional
from uuid import uuid4

import logfire

from ask.domain.error import NotFoundError
from ask.domain.model import Answer, Comment, Notification, Question
from ask.domain.repository import NotificationRepository, UnitOfWork
from ask.domain.value import (
    NotificationId,
    NotificationType,
    QuestionId,
    UserId,
)

from .base import Service
from .mention_service import MentionService


def question_link(question_id: QuestionId) -> str:
    """Frontend path of a question page."""
    return f"/questions/{question_id}"


class NotificationService(Service):
    """Creates notifications after content writes and serves the feed.

    The dispatch methods must only be called once the triggering write is
    committed. They never raise: each notification is committed on its own,
    and a failure is logged, rolled back and skipped.
    """

    def __init__(
        self,
        notification_repository: NotificationRepository,
        mention_service: MentionService,
        unit_of_work: UnitOfWork,
    ) -> None:
        """Initialize notification service.

        Args:
            notification_repository: Notification repository
            mention_service: Mention scanner
            unit_of_work: Transaction boundary for per-notification commits
        """
        self.notification_repository = notification_repository
        self.mention_service = mention_service
        self.unit_of_work = unit_of_work

    async def notify_answer_created(self, question: Question, answer: Answer) -> int:
        """Tell the asker about a new answer and notify mentioned users.

        Returns:
            Number of notifications created
        """
        with logfire.span(
            "notification_service.notify_answer_created", answer_id=str(answer.id)
        ):
            created = 0
            if question.author_id != answer.author_id:
                created += await self._deliver(
                    recipient_id=question.author_id,
                    type=NotificationType.ANSWER,
                    message=f'Someone answered your question: "{question.title}"',
                    link=question_link(question.id),
                )
            created += await self._notify_mentions(
                text=answer.text,
                actor_id=answer.author_id,
                message="You were mentioned in an answer",
                link=question_link(question.id),
            )
            return created

    async def notify_comment_created(self, answer: Answer, comment: Comment) -> int:
        """Tell the answer's author about a new comment and notify mentioned users.

        Returns:
            Number of notifications created
        """
        with logfire.span(
            "notification_service.notify_comment_created", comment_id=str(comment.id)
        ):
            created = 0
            if answer.author_id != comment.author_id:
                created += await self._deliver(
                    recipient_id=answer.author_id,
                    type=NotificationType.COMMENT,
                    message="Someone commented on your answer",
                    link=question_link(answer.question_id),
                )
            created += await self._notify_mentions(
                text=comment.text,
                actor_id=comment.author_id,
                message="You were mentioned in a comment",
                link=question_link(answer.question_id),
            )
            return created

    async def list_recent(self, user_id: UserId, limit: int) -> list[Notification]:
        """A user's most recent notifications, newest first."""
        with logfire.span("notification_service.list_recent", user_id=str(user_id)):
            return await self.notification_repository.find_recent_for_user(
                user_id, limit=limit
            )

    async def mark_read(
        self, notification_id: NotificationId, user_id: UserId
    ) -> Notification:
        """Mark one of the user's notifications as read.

        Raises:
            NotFoundError: If the user has no notification with this ID
        """
        with logfire.span(
            "notification_service.mark_read",
            notification_id=str(notification_id),
            user_id=str(user_id),
        ):
            notification = await self.notification_repository.mark_read(
                notification_id, user_id
            )
            if not notification:
                raise NotFoundError("Notification", str(notification_id))
            return notification

    async def _notify_mentions(
        self, text: str, actor_id: UserId, message: str, link: str
    ) -> int:
        try:
            mentioned = await self.mention_service.resolve_mentions(text)
        except Exception as e:
            logfire.error("Mention lookup failed", error=str(e))
            await self.unit_of_work.rollback()
            return 0

        created = 0
        for user in mentioned:
            if user.id == actor_id:
                continue
            created += await self._deliver(
                recipient_id=user.id,
                type=NotificationType.MENTION,
                message=message,
                link=link,
            )
        return created

    async def _deliver(
        self,
        recipient_id: UserId,
        type: NotificationType,
        message: str,
        link: Optional[str],
    ) -> int:
        """Persist and commit one notification; returns 1 on success, 0 on failure."""
        notification = Notification(
            id=NotificationId(uuid4()),
            user_id=recipient_id,
            type=type,
            message=message,
            link=link,
            created_at=datetime.now(),
        )
        try:
            await self.notification_repository.save(notification)
            await self.unit_of_work.commit()
        except Exception as e:
            logfire.error(
                "Failed to create notification",
                recipient_id=str(recipient_id),
                type=type.value,
                error=str(e),
            )
            await self.unit_of_work.rollback()
            return 0
        return 1
