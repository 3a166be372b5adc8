"""Domain value objects for the Q&A board.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

import re
from enum import Enum

from pydantic import field_validator

from ask.domain.value.common import RootValueObject

# Usernames share the character set recognised by the mention scanner, so
# every registered user can be @mentioned.
USERNAME_PATTERN = re.compile(r"^[A-Za-z0-9_]{1,30}$")
EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")


class VoteDirection(str, Enum):
    """Direction of a vote on an answer."""

    UP = "up"
    DOWN = "down"

    @property
    def weight(self) -> int:
        """Contribution of one vote in this direction to the running total."""
        return 1 if self is VoteDirection.UP else -1


class NotificationType(str, Enum):
    """Kind of event a notification reports."""

    ANSWER = "answer"
    COMMENT = "comment"
    MENTION = "mention"


class UserRole(str, Enum):
    """Authorization role of a user."""

    USER = "user"
    ADMIN = "admin"


class Username(RootValueObject[str]):
    """Unique public handle of a user.

    1-30 ASCII letters, digits or underscores. Case-sensitive.
    Examples: 'alice', 'bob_2', 'A'
    """

    @field_validator("root")
    @classmethod
    def validate_username(cls, v: str) -> str:
        """Validate username format."""
        if not USERNAME_PATTERN.match(v):
            raise ValueError(
                "Username must be 1-30 characters of letters, digits or underscores"
            )
        return v


class Email(RootValueObject[str]):
    """Email address used to log in."""

    @field_validator("root")
    @classmethod
    def validate_email(cls, v: str) -> str:
        """Validate and normalize the email address."""
        v = v.strip().lower()
        if len(v) > 255 or not EMAIL_PATTERN.match(v):
            raise ValueError("Invalid email address")
        return v
