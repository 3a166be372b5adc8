"""Vote use cases."""

from .vote_answer import VoteAnswerRequest, VoteAnswerUseCase

__all__ = ["VoteAnswerRequest", "VoteAnswerUseCase"]
