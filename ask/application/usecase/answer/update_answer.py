"""Update answer use case."""

from pydantic import BaseModel

from ask.application.usecase.base import load_actor, parse_id
from ask.application.usecase.views import AnswerView, answer_views
from ask.domain.service import AnswerService, UserService
from ask.domain.value import AnswerId


class UpdateAnswerRequest(BaseModel):
    """Update answer request."""

    answer_id: str
    user_id: str  # User ID from authenticated user
    text: str


class UpdateAnswerUseCase:
    """Use case for editing an answer's text."""

    def __init__(self, answer_service: AnswerService, user_service: UserService) -> None:
        """Initialize update answer use case.

        Args:
            answer_service: Answer domain service
            user_service: User domain service
        """
        self.answer_service = answer_service
        self.user_service = user_service

    async def execute(self, request: UpdateAnswerRequest) -> AnswerView:
        """Replace the text.

        Raises:
            NotFoundError: If the answer does not exist
            NotAuthorizedError: If the caller is not the author
        """
        answer_id = AnswerId(parse_id(request.answer_id, "answer"))
        requester = await load_actor(self.user_service, request.user_id)
        answer = await self.answer_service.update_answer(
            answer_id, requester, request.text
        )
        (view,) = await answer_views(self.user_service, [answer])
        return view
