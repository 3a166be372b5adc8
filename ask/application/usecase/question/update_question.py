"""Update question use case."""

from typing import Optional

from pydantic import BaseModel

from ask.application.usecase.base import load_actor, parse_id
from ask.application.usecase.views import QuestionView, question_view
from ask.domain.service import QuestionService, UserService
from ask.domain.value import QuestionId


class UpdateQuestionRequest(BaseModel):
    """Update question request. Omitted fields are left unchanged."""

    question_id: str
    user_id: str  # User ID from authenticated user
    title: Optional[str] = None
    description: Optional[str] = None
    tags: Optional[list[str]] = None


class UpdateQuestionUseCase:
    """Use case for editing a question."""

    def __init__(
        self, question_service: QuestionService, user_service: UserService
    ) -> None:
        """Initialize update question use case.

        Args:
            question_service: Question domain service
            user_service: User domain service
        """
        self.question_service = question_service
        self.user_service = user_service

    async def execute(self, request: UpdateQuestionRequest) -> QuestionView:
        """Apply the edit.

        Raises:
            NotFoundError: If the question does not exist
            NotAuthorizedError: If the caller is not the author
        """
        question_id = QuestionId(parse_id(request.question_id, "question"))
        requester = await load_actor(self.user_service, request.user_id)
        question = await self.question_service.update_question(
            question_id,
            requester,
            title=request.title,
            description=request.description,
            tags=request.tags,
        )
        return question_view(question, {requester.id: requester})
