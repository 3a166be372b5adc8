"""In-memory user repository for testing."""

from typing import Optional, Sequence

from ask.domain.error import ConflictError
from ask.domain.model.user import User
from ask.domain.repository.user import UserRepository
from ask.domain.value import Email, UserId, Username


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def find_by_ids(self, user_ids: Sequence[UserId]) -> list[User]:
        """Find several users by ID."""
        return [self._users[i] for i in dict.fromkeys(user_ids) if i in self._users]

    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by username."""
        return next(
            (u for u in self._users.values() if u.username.root == username.root), None
        )

    async def find_by_usernames(self, usernames: Sequence[str]) -> list[User]:
        """Find all users whose username is listed."""
        wanted = set(usernames)
        return [u for u in self._users.values() if u.username.root in wanted]

    async def find_by_email(self, email: Email) -> Optional[User]:
        """Find a user by email."""
        return next((u for u in self._users.values() if u.email.root == email.root), None)

    async def save(self, user: User) -> User:
        """Save a user, enforcing unique username and email."""
        for other in self._users.values():
            if other.id == user.id:
                continue
            if other.username.root == user.username.root or other.email.root == user.email.root:
                raise ConflictError("Username or email already registered")
        self._users[user.id] = user
        return user
