"""Question domain service."""

from datetime import datetime
from typing import Optional
from uuid import uuid4

import logfire

from ask.domain.error import NotAuthorizedError, NotFoundError, ValidationError
from ask.domain.model import Question, User
from ask.domain.repository import AnswerRepository, QuestionRepository
from ask.domain.value import QuestionId, UserId

from .base import Service


class QuestionService(Service):
    """Domain service for question operations."""

    def __init__(
        self,
        question_repository: QuestionRepository,
        answer_repository: AnswerRepository,
    ) -> None:
        """Initialize question service.

        Args:
            question_repository: Question repository
            answer_repository: Answer repository (cascade delete, answer counts)
        """
        self.question_repository = question_repository
        self.answer_repository = answer_repository

    async def create_question(
        self,
        author_id: UserId,
        title: str,
        description: str,
        tags: Optional[list[str]] = None,
    ) -> Question:
        """Create a question.

        Args:
            author_id: Author user ID
            title: Question title
            description: Question body (rich text)
            tags: Optional tags, deduplicated preserving order

        Returns:
            Created question

        Raises:
            ValidationError: If title or description is blank
        """
        with logfire.span("question_service.create_question", author_id=str(author_id)):
            if not (title or "").strip() or not (description or "").strip():
                raise ValidationError("Title and description are required")

            now = datetime.now()
            question = Question(
                id=QuestionId(uuid4()),
                title=title,
                description=description,
                tags=tags or [],
                author_id=author_id,
                created_at=now,
                updated_at=now,
            )
            saved = await self.question_repository.save(question)
            logfire.info("Question created", question_id=str(saved.id))
            return saved

    async def get_question(self, question_id: QuestionId) -> Question:
        """Get a question without side effects.

        Raises:
            NotFoundError: If the question does not exist
        """
        question = await self.question_repository.find_by_id(question_id)
        if not question:
            raise NotFoundError("Question", str(question_id))
        return question

    async def view_question(self, question_id: QuestionId) -> Question:
        """Get a question for display, counting the view.

        The view counter is incremented atomically in the store.

        Raises:
            NotFoundError: If the question does not exist
        """
        with logfire.span("question_service.view_question", question_id=str(question_id)):
            question = await self.question_repository.increment_views(question_id)
            if not question:
                logfire.warn("Question not found", question_id=str(question_id))
                raise NotFoundError("Question", str(question_id))
            return question

    async def list_questions(
        self, limit: Optional[int] = None, offset: int = 0
    ) -> list[tuple[Question, int]]:
        """List questions newest first together with their answer counts.

        Answer counts come from a single aggregate query.

        Args:
            limit: Page size; None lists every question
            offset: Number of questions to skip

        Returns:
            (question, answers_count) pairs
        """
        with logfire.span("question_service.list_questions", limit=limit, offset=offset):
            questions = await self.question_repository.find_all(limit=limit, offset=offset)
            counts = await self.answer_repository.count_by_questions(
                [q.id for q in questions]
            )
            return [(q, counts.get(q.id, 0)) for q in questions]

    async def update_question(
        self,
        question_id: QuestionId,
        requester: User,
        title: Optional[str] = None,
        description: Optional[str] = None,
        tags: Optional[list[str]] = None,
    ) -> Question:
        """Edit a question. Only its author may do this.

        Fields left as None are not changed.

        Raises:
            NotFoundError: If the question does not exist
            NotAuthorizedError: If the requester is not the author
        """
        with logfire.span(
            "question_service.update_question",
            question_id=str(question_id),
            user_id=str(requester.id),
        ):
            question = await self.get_question(question_id)
            if question.author_id != requester.id:
                logfire.warn(
                    "Unauthorized question edit",
                    question_id=str(question_id),
                    user_id=str(requester.id),
                )
                raise NotAuthorizedError(
                    "edit", "question", str(question_id), str(requester.id)
                )

            changes: dict = {}
            if title is not None:
                changes["title"] = title
            if description is not None:
                changes["description"] = description
            if tags is not None:
                changes["tags"] = tags
            if not changes:
                return question

            # Re-validate through the constructor so field rules apply to edits
            updated = Question(
                **{**question.model_dump(), **changes, "updated_at": datetime.now()}
            )
            return await self.question_repository.save(updated)

    async def delete_question(self, question_id: QuestionId, requester: User) -> int:
        """Delete a question and every answer to it.

        Allowed for the author and for admins.

        Returns:
            Number of answers removed with the question

        Raises:
            NotFoundError: If the question does not exist
            NotAuthorizedError: If the requester is neither author nor admin
        """
        with logfire.span(
            "question_service.delete_question",
            question_id=str(question_id),
            user_id=str(requester.id),
        ):
            # Held until commit, so no answer can be inserted mid-cascade
            question = await self.question_repository.find_for_update(question_id)
            if not question:
                raise NotFoundError("Question", str(question_id))
            if question.author_id != requester.id and not requester.is_admin:
                logfire.warn(
                    "Unauthorized question delete",
                    question_id=str(question_id),
                    user_id=str(requester.id),
                )
                raise NotAuthorizedError(
                    "delete", "question", str(question_id), str(requester.id)
                )

            removed = await self.answer_repository.delete_by_question(question_id)
            await self.question_repository.delete(question_id)
            logfire.info(
                "Question deleted", question_id=str(question_id), answers_removed=removed
            )
            return removed
