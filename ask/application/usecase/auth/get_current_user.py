"""Get current user use case."""

from pydantic import BaseModel

from ask.application.usecase.base import load_actor
from ask.application.usecase.views import UserView, user_view
from ask.domain.service import UserService


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    user_id: str  # From the verified session token


class GetCurrentUserUseCase:
    """Use case for the caller's own profile."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize get current user use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: GetCurrentUserRequest) -> UserView:
        """Load the caller.

        Raises:
            AuthenticationError: If the user no longer exists
        """
        user = await load_actor(self.user_service, request.user_id)
        return user_view(user)
