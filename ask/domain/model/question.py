"""Question entity."""

from datetime import datetime

from pydantic import Field, field_validator

from ask.domain.model.common import DomainModel
from ask.domain.value import QuestionId, UserId


class Question(DomainModel):
    """A question asked by a user.

    The author owns the question for edit/delete purposes. Answers reference
    the question by id and are removed together with it.
    """

    id: QuestionId
    title: str = Field(min_length=1, max_length=300)
    description: str = Field(min_length=1, max_length=50000)  # Rich text (HTML)
    tags: list[str] = Field(default_factory=list, max_length=10)
    author_id: UserId
    views: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @field_validator("tags")
    @classmethod
    def normalize_tags(cls, v: list[str]) -> list[str]:
        """Strip blanks and duplicates, keeping first-seen order."""
        seen: dict[str, None] = {}
        for tag in v:
            tag = tag.strip()
            if tag:
                seen.setdefault(tag, None)
        return list(seen)
