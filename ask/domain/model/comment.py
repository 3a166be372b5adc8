"""Comment entity.

Comments live inside their answer and never outlive it.
"""

from datetime import datetime

from pydantic import Field

from ask.domain.model.common import DomainModel
from ask.domain.value import CommentId, UserId


class Comment(DomainModel):
    """Comment embedded in an answer.

    The id is stable within the parent answer and is used to delete the
    comment; there is no top-level lookup by comment id.
    """

    id: CommentId
    author_id: UserId
    text: str = Field(min_length=1, max_length=5000)
    created_at: datetime = Field(default_factory=datetime.now)
