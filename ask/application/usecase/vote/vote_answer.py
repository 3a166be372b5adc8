"""Vote on answer use case."""

from pydantic import BaseModel

from ask.application.usecase.base import load_actor, parse_id
from ask.application.usecase.views import AnswerView, answer_views
from ask.domain.service import UserService, VoteService
from ask.domain.value import AnswerId


class VoteAnswerRequest(BaseModel):
    """Vote request."""

    answer_id: str
    user_id: str  # User ID from authenticated user
    type: str  # "up" or "down"; validated by the vote ledger


class VoteAnswerUseCase:
    """Use case for casting or changing a vote."""

    def __init__(self, vote_service: VoteService, user_service: UserService) -> None:
        """Initialize vote use case.

        Args:
            vote_service: Vote ledger
            user_service: User domain service
        """
        self.vote_service = vote_service
        self.user_service = user_service

    async def execute(self, request: VoteAnswerRequest) -> AnswerView:
        """Apply the vote and return the updated answer.

        Raises:
            ValidationError: If the vote type is not "up" or "down"
            NotFoundError: If the answer does not exist
            DuplicateVoteError: If the caller repeats their current vote
        """
        answer_id = AnswerId(parse_id(request.answer_id, "answer"))
        voter = await load_actor(self.user_service, request.user_id)
        answer = await self.vote_service.apply_vote(answer_id, voter.id, request.type)
        (view,) = await answer_views(self.user_service, [answer])
        return view
