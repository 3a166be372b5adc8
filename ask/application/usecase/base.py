"""Shared helpers for use cases."""

from uuid import UUID

from ask.domain.error import AuthenticationError, NotFoundError, ValidationError
from ask.domain.model import User
from ask.domain.service import UserService
from ask.domain.value import UserId


def parse_id(value: str, kind: str) -> UUID:
    """Parse an identifier received over the API.

    Args:
        value: Raw identifier
        kind: Name used in the error message, e.g. "question"

    Raises:
        ValidationError: If the value is not a UUID
    """
    try:
        return UUID(value)
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid {kind} ID format")


async def load_actor(user_service: UserService, user_id: str) -> User:
    """Load the authenticated user a request acts as.

    A token for a user that no longer exists counts as unauthenticated.

    Raises:
        AuthenticationError: If the ID is malformed or the user is gone
    """
    try:
        return await user_service.get_by_id(UserId(UUID(user_id)))
    except (ValueError, NotFoundError):
        raise AuthenticationError("User not found")
