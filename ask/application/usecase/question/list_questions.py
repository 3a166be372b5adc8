"""List questions use case."""

from typing import Optional

from pydantic import BaseModel, Field

from ask.application.usecase.views import QuestionView, question_view
from ask.domain.service import QuestionService, UserService


class ListQuestionsRequest(BaseModel):
    """List questions request."""

    limit: Optional[int] = Field(default=None, ge=1, le=100)  # None: every question
    offset: int = Field(default=0, ge=0)


class ListQuestionsUseCase:
    """Use case for the question list, newest first."""

    def __init__(
        self,
        question_service: QuestionService,
        user_service: UserService,
    ) -> None:
        """Initialize list questions use case.

        Args:
            question_service: Question domain service
            user_service: User domain service
        """
        self.question_service = question_service
        self.user_service = user_service

    async def execute(self, request: ListQuestionsRequest) -> list[QuestionView]:
        """List questions with authors and answer counts.

        Uses one query for questions, one for answer counts and one for
        authors regardless of page size.
        """
        rows = await self.question_service.list_questions(
            limit=request.limit, offset=request.offset
        )
        authors = await self.user_service.get_users_by_ids(
            [question.author_id for question, _ in rows]
        )
        return [question_view(q, authors, answers_count=count) for q, count in rows]
