"""Login use case."""

from pydantic import BaseModel

from ask.application.usecase.views import UserView, user_view
from ask.domain.service import JWTService, UserService


class LoginRequest(BaseModel):
    """Login request."""

    email: str
    password: str


class LoginResponse(BaseModel):
    """Login response.

    The token is set as a cookie by the route and is not part of the body.
    """

    token: str
    user: UserView


class LoginUseCase:
    """Use case for exchanging credentials for a session token."""

    def __init__(self, user_service: UserService, jwt_service: JWTService) -> None:
        """Initialize login use case.

        Args:
            user_service: User domain service
            jwt_service: JWT token domain service
        """
        self.user_service = user_service
        self.jwt_service = jwt_service

    async def execute(self, request: LoginRequest) -> LoginResponse:
        """Check credentials and issue a token.

        Raises:
            AuthenticationError: If the credentials are wrong
        """
        user = await self.user_service.authenticate(request.email, request.password)
        token = self.jwt_service.create_token(str(user.id), user.username.root)
        return LoginResponse(token=token, user=user_view(user))
