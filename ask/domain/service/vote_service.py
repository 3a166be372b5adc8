"""Vote ledger."""

import logfire

from ask.domain.error import DuplicateVoteError, ValidationError
from ask.domain.model import Answer
from ask.domain.value import AnswerId, UserId, VoteDirection

from .answer_service import AnswerService
from .base import Service


def tally_vote(answer: Answer, voter_id: UserId, direction: VoteDirection) -> Answer:
    """Record one user's vote on an answer and adjust the running total.

    - no previous vote: total moves by 1 in the vote's direction
    - same direction again: rejected, nothing changes
    - opposite direction: total moves by 2 (the old vote is undone)

    Args:
        answer: Current answer state
        voter_id: Voting user
        direction: Requested direction

    Returns:
        New answer state (not yet persisted)

    Raises:
        DuplicateVoteError: If the user already voted in this direction
    """
    previous = answer.vote_of(voter_id)
    if previous is direction:
        raise DuplicateVoteError(str(answer.id), str(voter_id))

    delta = direction.weight if previous is None else 2 * direction.weight
    return answer.model_copy(
        update={
            "votes": answer.votes + delta,
            "voters": {**answer.voters, voter_id: direction},
        }
    )


class VoteService(Service):
    """Domain service for voting on answers."""

    def __init__(self, answer_service: AnswerService) -> None:
        """Initialize vote service.

        Args:
            answer_service: Answer domain service (versioned writes)
        """
        self.answer_service = answer_service

    async def apply_vote(
        self, answer_id: AnswerId, voter_id: UserId, direction: str
    ) -> Answer:
        """Cast or change a vote on an answer.

        The ledger update is written with a compare-and-swap on the answer's
        version, so concurrent voters never lose each other's deltas.
        Voting does not notify anyone.

        Args:
            answer_id: Answer being voted on
            voter_id: Voting user
            direction: "up" or "down"

        Returns:
            Updated answer

        Raises:
            ValidationError: If direction is not "up" or "down"
            NotFoundError: If the answer does not exist
            DuplicateVoteError: If the user repeats their current vote
        """
        with logfire.span(
            "vote_service.apply_vote",
            answer_id=str(answer_id),
            user_id=str(voter_id),
            direction=direction,
        ):
            try:
                vote = VoteDirection(direction)
            except ValueError:
                raise ValidationError("Invalid vote type")

            try:
                answer = await self.answer_service.apply_change(
                    answer_id, lambda current: tally_vote(current, voter_id, vote)
                )
            except DuplicateVoteError:
                logfire.warn(
                    "Duplicate vote attempt",
                    answer_id=str(answer_id),
                    user_id=str(voter_id),
                )
                raise

            logfire.info("Vote recorded", answer_id=str(answer_id), votes=answer.votes)
            return answer
