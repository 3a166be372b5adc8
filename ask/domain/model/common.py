"""Base model for Q&A domain entities."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Base class for questions, answers, comments, users and notifications.

    Entities are immutable; state changes produce a new instance through
    ``model_copy(update=...)`` which the repositories then persist.
    """

    model_config = ConfigDict(
        frozen=True,
        arbitrary_types_allowed=True,  # Allow value objects such as Username
    )
