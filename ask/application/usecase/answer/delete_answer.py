"""Delete answer use case."""

from pydantic import BaseModel

from ask.application.usecase.base import load_actor, parse_id
from ask.domain.service import AnswerService, UserService
from ask.domain.value import AnswerId


class DeleteAnswerRequest(BaseModel):
    """Delete answer request."""

    answer_id: str
    user_id: str  # User ID from authenticated user


class DeleteAnswerResponse(BaseModel):
    """Delete answer response."""

    message: str


class DeleteAnswerUseCase:
    """Use case for deleting an answer."""

    def __init__(self, answer_service: AnswerService, user_service: UserService) -> None:
        """Initialize delete answer use case.

        Args:
            answer_service: Answer domain service
            user_service: User domain service
        """
        self.answer_service = answer_service
        self.user_service = user_service

    async def execute(self, request: DeleteAnswerRequest) -> DeleteAnswerResponse:
        """Delete the answer and its comments.

        Raises:
            NotFoundError: If the answer does not exist
            NotAuthorizedError: If the caller is neither author nor admin
        """
        answer_id = AnswerId(parse_id(request.answer_id, "answer"))
        requester = await load_actor(self.user_service, request.user_id)
        await self.answer_service.delete_answer(answer_id, requester)
        return DeleteAnswerResponse(message="Answer deleted")
