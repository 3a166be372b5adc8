"""Answer domain service."""

from datetime import datetime
from typing import Callable
from uuid import uuid4

import logfire

from ask.config import ContentSettings
from ask.domain.error import (
    ConflictError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)
from ask.domain.model import Answer, Comment, Question, User
from ask.domain.repository import AnswerRepository, QuestionRepository
from ask.domain.value import AnswerId, CommentId, QuestionId, UserId

from .base import Service

AnswerChange = Callable[[Answer], Answer]


class AnswerService(Service):
    """Domain service for answers and their embedded comments.

    Every change to an answer's text, vote ledger or comments goes through
    ``apply_change``, which writes with a compare-and-swap on ``version``.
    """

    def __init__(
        self,
        answer_repository: AnswerRepository,
        question_repository: QuestionRepository,
        content_settings: ContentSettings,
    ) -> None:
        """Initialize answer service.

        Args:
            answer_repository: Answer repository
            question_repository: Question repository
            content_settings: Content settings (update retry bound)
        """
        self.answer_repository = answer_repository
        self.question_repository = question_repository
        self.content_settings = content_settings

    async def create_answer(
        self, question_id: QuestionId, author_id: UserId, text: str
    ) -> tuple[Answer, Question]:
        """Post an answer to an existing question.

        The question is read under a shared lock that lasts until commit, so
        a concurrent delete cannot leave the new answer orphaned.

        Args:
            question_id: Question being answered
            author_id: Author user ID
            text: Answer text, trimmed before storing

        Returns:
            The created answer and the question it answers

        Raises:
            ValidationError: If the text is blank
            NotFoundError: If the question does not exist
        """
        with logfire.span(
            "answer_service.create_answer",
            question_id=str(question_id),
            author_id=str(author_id),
        ):
            text = _require_text(text, "Answer text is required")
            question = await self.question_repository.find_for_share(question_id)
            if not question:
                logfire.warn("Answer to non-existent question", question_id=str(question_id))
                raise NotFoundError("Question", str(question_id))

            now = datetime.now()
            answer = Answer(
                id=AnswerId(uuid4()),
                question_id=question_id,
                author_id=author_id,
                text=text,
                created_at=now,
                updated_at=now,
            )
            saved = await self.answer_repository.create(answer)
            logfire.info(
                "Answer created", answer_id=str(saved.id), question_id=str(question_id)
            )
            return saved, question

    async def get_answer(self, answer_id: AnswerId) -> Answer:
        """Get an answer by ID.

        Raises:
            NotFoundError: If the answer does not exist
        """
        answer = await self.answer_repository.find_by_id(answer_id)
        if not answer:
            raise NotFoundError("Answer", str(answer_id))
        return answer

    async def list_answers(self, question_id: QuestionId) -> list[Answer]:
        """All answers to a question, newest first."""
        with logfire.span("answer_service.list_answers", question_id=str(question_id)):
            return await self.answer_repository.find_by_question(question_id)

    async def apply_change(self, answer_id: AnswerId, change: AnswerChange) -> Answer:
        """Apply a change to an answer's versioned state.

        ``change`` receives the current answer and returns the new state; it
        may raise a DomainError to abort. When another writer gets in first
        the answer is re-read and ``change`` is applied again, up to
        ``content.max_update_attempts`` times.

        Args:
            answer_id: Answer to change
            change: Pure function from current to new answer state

        Returns:
            The stored answer

        Raises:
            NotFoundError: If the answer does not exist (or disappears)
            ConflictError: If every attempt lost a race
        """
        attempts = self.content_settings.max_update_attempts
        for attempt in range(1, attempts + 1):
            current = await self.get_answer(answer_id)
            updated = change(current).model_copy(
                update={"version": current.version + 1, "updated_at": datetime.now()}
            )
            if await self.answer_repository.update_if_version(updated, current.version):
                return updated
            logfire.info(
                "Concurrent answer update, retrying",
                answer_id=str(answer_id),
                attempt=attempt,
            )

        logfire.warn("Answer update gave up", answer_id=str(answer_id), attempts=attempts)
        raise ConflictError("Answer was modified concurrently, please retry")

    async def update_answer(self, answer_id: AnswerId, requester: User, text: str) -> Answer:
        """Edit the text of an answer. Only its author may do this.

        Raises:
            ValidationError: If the text is blank
            NotFoundError: If the answer does not exist
            NotAuthorizedError: If the requester is not the author
        """
        with logfire.span(
            "answer_service.update_answer",
            answer_id=str(answer_id),
            user_id=str(requester.id),
        ):
            text = _require_text(text, "Answer text is required")

            def edit(answer: Answer) -> Answer:
                if answer.author_id != requester.id:
                    raise NotAuthorizedError(
                        "edit", "answer", str(answer_id), str(requester.id)
                    )
                return answer.model_copy(update={"text": text})

            return await self.apply_change(answer_id, edit)

    async def delete_answer(self, answer_id: AnswerId, requester: User) -> None:
        """Delete an answer with its comments. Author or admin only.

        Raises:
            NotFoundError: If the answer does not exist
            NotAuthorizedError: If the requester is neither author nor admin
        """
        with logfire.span(
            "answer_service.delete_answer",
            answer_id=str(answer_id),
            user_id=str(requester.id),
        ):
            answer = await self.get_answer(answer_id)
            if answer.author_id != requester.id and not requester.is_admin:
                logfire.warn(
                    "Unauthorized answer delete",
                    answer_id=str(answer_id),
                    user_id=str(requester.id),
                )
                raise NotAuthorizedError(
                    "delete", "answer", str(answer_id), str(requester.id)
                )
            await self.answer_repository.delete(answer_id)
            logfire.info("Answer deleted", answer_id=str(answer_id))

    async def add_comment(
        self, answer_id: AnswerId, author_id: UserId, text: str
    ) -> tuple[Answer, Comment]:
        """Append a comment to an answer.

        Args:
            answer_id: Answer being commented on
            author_id: Comment author
            text: Comment text, trimmed before storing

        Returns:
            The updated answer and the new comment

        Raises:
            ValidationError: If the text is blank
            NotFoundError: If the answer does not exist
        """
        with logfire.span(
            "answer_service.add_comment",
            answer_id=str(answer_id),
            author_id=str(author_id),
        ):
            comment = Comment(
                id=CommentId(uuid4()),
                author_id=author_id,
                text=_require_text(text, "Comment text is required"),
                created_at=datetime.now(),
            )

            def append(answer: Answer) -> Answer:
                return answer.model_copy(update={"comments": [*answer.comments, comment]})

            answer = await self.apply_change(answer_id, append)
            logfire.info(
                "Comment added", answer_id=str(answer_id), comment_id=str(comment.id)
            )
            return answer, comment

    async def delete_comment(
        self, answer_id: AnswerId, comment_id: CommentId, requester: User
    ) -> Answer:
        """Remove a comment from an answer. Comment author or admin only.

        Raises:
            NotFoundError: If the answer or the comment does not exist
            NotAuthorizedError: If the requester is neither author nor admin
        """
        with logfire.span(
            "answer_service.delete_comment",
            answer_id=str(answer_id),
            comment_id=str(comment_id),
            user_id=str(requester.id),
        ):

            def remove(answer: Answer) -> Answer:
                comment = answer.find_comment(comment_id)
                if not comment:
                    raise NotFoundError("Comment", str(comment_id))
                if comment.author_id != requester.id and not requester.is_admin:
                    raise NotAuthorizedError(
                        "delete", "comment", str(comment_id), str(requester.id)
                    )
                return answer.model_copy(
                    update={
                        "comments": [c for c in answer.comments if c.id != comment_id]
                    }
                )

            answer = await self.apply_change(answer_id, remove)
            logfire.info("Comment deleted", comment_id=str(comment_id))
            return answer


def _require_text(text: str | None, message: str) -> str:
    """Trim text and reject it when nothing is left."""
    text = (text or "").strip()
    if not text:
        raise ValidationError(message)
    return text
