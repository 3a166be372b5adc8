"""Get question use case."""

from pydantic import BaseModel

from ask.application.usecase.base import parse_id
from ask.application.usecase.views import QuestionView, question_view
from ask.domain.service import QuestionService, UserService
from ask.domain.value import QuestionId


class GetQuestionRequest(BaseModel):
    """Get question request."""

    question_id: str


class GetQuestionUseCase:
    """Use case for viewing one question (counts as a view)."""

    def __init__(
        self, question_service: QuestionService, user_service: UserService
    ) -> None:
        """Initialize get question use case.

        Args:
            question_service: Question domain service
            user_service: User domain service
        """
        self.question_service = question_service
        self.user_service = user_service

    async def execute(self, request: GetQuestionRequest) -> QuestionView:
        """Increment the view counter and return the question with its author.

        Raises:
            ValidationError: If the ID is malformed
            NotFoundError: If the question does not exist
        """
        question_id = QuestionId(parse_id(request.question_id, "question"))
        question = await self.question_service.view_question(question_id)
        authors = await self.user_service.get_users_by_ids([question.author_id])
        return question_view(question, authors)
