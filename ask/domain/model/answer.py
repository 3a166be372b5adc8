"""Answer aggregate root.

An answer owns its vote ledger (``votes`` + ``voters``) and its comments.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from ask.domain.model.comment import Comment
from ask.domain.model.common import DomainModel
from ask.domain.value import AnswerId, CommentId, QuestionId, UserId, VoteDirection


class Answer(DomainModel):
    """Answer aggregate root.

    Vote ledger:
    - voters: current direction of every user who has voted, one entry per user
    - votes: running net score, adjusted by deltas whenever ``voters`` changes.
      It is never recomputed from ``voters``.

    ``version`` increases on every aggregate write and guards concurrent
    updates (compare-and-swap in the repository). ``is_accepted`` is owned by
    the acceptance coordinator and is not part of the versioned state.
    """

    id: AnswerId
    question_id: QuestionId
    author_id: UserId
    text: str = Field(min_length=1, max_length=50000)
    votes: int = 0
    voters: dict[UserId, VoteDirection] = Field(default_factory=dict)
    is_accepted: bool = False
    comments: list[Comment] = Field(default_factory=list)
    version: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    def vote_of(self, user_id: UserId) -> Optional[VoteDirection]:
        """Return the direction currently recorded for a user, if any."""
        return self.voters.get(user_id)

    def find_comment(self, comment_id: CommentId) -> Optional[Comment]:
        """Return the embedded comment with the given id, if present."""
        return next((c for c in self.comments if c.id == comment_id), None)

    def author_ids(self) -> set[UserId]:
        """Authors of the answer and all of its comments."""
        return {self.author_id, *(c.author_id for c in self.comments)}
