"""Get answer use case."""

from pydantic import BaseModel

from ask.application.usecase.base import parse_id
from ask.application.usecase.views import AnswerView, answer_views
from ask.domain.service import AnswerService, UserService
from ask.domain.value import AnswerId


class GetAnswerRequest(BaseModel):
    """Get answer request."""

    answer_id: str


class GetAnswerUseCase:
    """Use case for a single answer."""

    def __init__(self, answer_service: AnswerService, user_service: UserService) -> None:
        """Initialize get answer use case.

        Args:
            answer_service: Answer domain service
            user_service: User domain service
        """
        self.answer_service = answer_service
        self.user_service = user_service

    async def execute(self, request: GetAnswerRequest) -> AnswerView:
        """Load the answer with its authors.

        Raises:
            NotFoundError: If the answer does not exist
        """
        answer_id = AnswerId(parse_id(request.answer_id, "answer"))
        answer = await self.answer_service.get_answer(answer_id)
        (view,) = await answer_views(self.user_service, [answer])
        return view
