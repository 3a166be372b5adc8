"""User repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from ask.domain.model.user import User
from ask.domain.value import Email, UserId, Username


class UserRepository(ABC):
    """Repository for User aggregate.

    Defines the contract for user persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, user_ids: Sequence[UserId]) -> List[User]:
        """Find several users in one query (batch lookup).

        Args:
            user_ids: User IDs to load; unknown IDs are skipped

        Returns:
            Users that exist, in no particular order
        """
        pass

    @abstractmethod
    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by their username.

        Args:
            username: The user's username

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_usernames(self, usernames: Sequence[str]) -> List[User]:
        """Find all users whose username is in the given set (exact match).

        Used to resolve @mentions in a single query. Unknown usernames
        are silently dropped.

        Args:
            usernames: Candidate usernames

        Returns:
            Matching users
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: Email) -> Optional[User]:
        """Find a user by their email.

        Args:
            email: The user's email address

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Args:
            user: The user to save

        Returns:
            The saved user

        Raises:
            ConflictError: If the username or email is already taken
        """
        pass
