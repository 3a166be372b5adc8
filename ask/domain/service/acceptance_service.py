"""Acceptance coordinator."""

import logfire

from ask.domain.error import NotAuthorizedError, NotFoundError
from ask.domain.model import Answer
from ask.domain.repository import AnswerRepository, QuestionRepository
from ask.domain.value import AnswerId, UserId

from .base import Service


class AcceptanceService(Service):
    """Keeps at most one accepted answer per question."""

    def __init__(
        self,
        answer_repository: AnswerRepository,
        question_repository: QuestionRepository,
    ) -> None:
        """Initialize acceptance service.

        Args:
            answer_repository: Answer repository
            question_repository: Question repository
        """
        self.answer_repository = answer_repository
        self.question_repository = question_repository

    async def accept_answer(self, answer_id: AnswerId, requester_id: UserId) -> list[Answer]:
        """Mark an answer as the accepted one for its question.

        The target is set and every sibling cleared in one statement, so
        concurrent accepts end with exactly one accepted answer. Accepting
        the already accepted answer changes nothing.

        Args:
            answer_id: Answer to accept
            requester_id: Must be the author of the question

        Returns:
            All answers of the question after the change, newest first

        Raises:
            NotFoundError: If the answer or its question does not exist
            NotAuthorizedError: If the requester did not ask the question
        """
        with logfire.span(
            "acceptance_service.accept_answer",
            answer_id=str(answer_id),
            user_id=str(requester_id),
        ):
            answer = await self.answer_repository.find_by_id(answer_id)
            if not answer:
                raise NotFoundError("Answer", str(answer_id))

            question = await self.question_repository.find_by_id(answer.question_id)
            if not question:
                raise NotFoundError("Question", str(answer.question_id))

            if question.author_id != requester_id:
                logfire.warn(
                    "Unauthorized accept",
                    answer_id=str(answer_id),
                    user_id=str(requester_id),
                )
                raise NotAuthorizedError(
                    "accept", "answer", str(answer_id), str(requester_id)
                )

            await self.answer_repository.set_accepted(question.id, answer_id)
            logfire.info(
                "Answer accepted", answer_id=str(answer_id), question_id=str(question.id)
            )
            return await self.answer_repository.find_by_question(question.id)
