"""List answers use case."""

from pydantic import BaseModel

from ask.application.usecase.base import parse_id
from ask.application.usecase.views import AnswerView, answer_views
from ask.domain.service import AnswerService, UserService
from ask.domain.value import QuestionId


class ListAnswersRequest(BaseModel):
    """List answers request."""

    question_id: str


class ListAnswersUseCase:
    """Use case for all answers to a question."""

    def __init__(self, answer_service: AnswerService, user_service: UserService) -> None:
        """Initialize list answers use case.

        Args:
            answer_service: Answer domain service
            user_service: User domain service
        """
        self.answer_service = answer_service
        self.user_service = user_service

    async def execute(self, request: ListAnswersRequest) -> list[AnswerView]:
        """Answers newest first, with answer and comment authors."""
        question_id = QuestionId(parse_id(request.question_id, "question"))
        answers = await self.answer_service.list_answers(question_id)
        return await answer_views(self.user_service, answers)
