"""Accept answer use case."""

from pydantic import BaseModel

from ask.application.usecase.base import load_actor, parse_id
from ask.application.usecase.views import AnswerView, answer_views
from ask.domain.service import AcceptanceService, UserService
from ask.domain.value import AnswerId


class AcceptAnswerRequest(BaseModel):
    """Accept answer request."""

    answer_id: str
    user_id: str  # User ID from authenticated user


class AcceptAnswerUseCase:
    """Use case for accepting an answer."""

    def __init__(
        self, acceptance_service: AcceptanceService, user_service: UserService
    ) -> None:
        """Initialize accept answer use case.

        Args:
            acceptance_service: Acceptance coordinator
            user_service: User domain service
        """
        self.acceptance_service = acceptance_service
        self.user_service = user_service

    async def execute(self, request: AcceptAnswerRequest) -> list[AnswerView]:
        """Accept the answer and return the refreshed answers of its question.

        Raises:
            NotFoundError: If the answer does not exist
            NotAuthorizedError: If the caller did not ask the question
        """
        answer_id = AnswerId(parse_id(request.answer_id, "answer"))
        requester = await load_actor(self.user_service, request.user_id)
        answers = await self.acceptance_service.accept_answer(answer_id, requester.id)
        return await answer_views(self.user_service, answers)
