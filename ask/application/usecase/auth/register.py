"""Register use case."""

from typing import Optional

from pydantic import BaseModel

from ask.application.usecase.views import UserView, user_view
from ask.domain.service import UserService


class RegisterRequest(BaseModel):
    """Register request."""

    username: str
    email: str
    password: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None


class RegisterResponse(BaseModel):
    """Register response."""

    user: UserView


class RegisterUseCase:
    """Use case for creating an account."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize register use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: RegisterRequest) -> RegisterResponse:
        """Create the user.

        Raises:
            ValidationError: If a field is malformed
            ConflictError: If the username or email is taken
        """
        user = await self.user_service.register(
            username=request.username,
            email=request.email,
            password=request.password,
            first_name=request.first_name,
            last_name=request.last_name,
        )
        return RegisterResponse(user=user_view(user))
