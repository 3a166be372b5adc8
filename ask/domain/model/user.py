"""User aggregate root.

Users register with a username, email and password, and author
questions, answers and comments.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from ask.domain.model.common import DomainModel
from ask.domain.value import Email, UserId, UserRole, Username


class User(DomainModel):
    """User aggregate root.

    Identity (id, username, email) is immutable once created; only the
    profile fields change. Users are never deleted.
    """

    id: UserId
    username: Username
    email: Email
    password_hash: str = Field(repr=False)
    first_name: Optional[str] = Field(default=None, max_length=100)
    last_name: Optional[str] = Field(default=None, max_length=100)
    role: UserRole = UserRole.USER
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @property
    def is_admin(self) -> bool:
        """Whether the user may moderate other users' content."""
        return self.role is UserRole.ADMIN
