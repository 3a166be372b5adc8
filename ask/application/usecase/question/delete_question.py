"""Delete question use case."""

from pydantic import BaseModel

from ask.application.usecase.base import load_actor, parse_id
from ask.domain.service import QuestionService, UserService
from ask.domain.value import QuestionId


class DeleteQuestionRequest(BaseModel):
    """Delete question request."""

    question_id: str
    user_id: str  # User ID from authenticated user


class DeleteQuestionResponse(BaseModel):
    """Delete question response."""

    message: str
    answers_deleted: int


class DeleteQuestionUseCase:
    """Use case for deleting a question together with its answers."""

    def __init__(
        self, question_service: QuestionService, user_service: UserService
    ) -> None:
        """Initialize delete question use case.

        Args:
            question_service: Question domain service
            user_service: User domain service
        """
        self.question_service = question_service
        self.user_service = user_service

    async def execute(self, request: DeleteQuestionRequest) -> DeleteQuestionResponse:
        """Delete the question and cascade to its answers.

        Raises:
            NotFoundError: If the question does not exist
            NotAuthorizedError: If the caller is neither author nor admin
        """
        question_id = QuestionId(parse_id(request.question_id, "question"))
        requester = await load_actor(self.user_service, request.user_id)
        removed = await self.question_service.delete_question(question_id, requester)
        return DeleteQuestionResponse(
            message="Question and related answers deleted", answers_deleted=removed
        )
