"""Authentication routes."""

from typing import Optional

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Response, status
from pydantic import BaseModel

from ask.application.usecase.auth import (
    GetCurrentUserRequest,
    GetCurrentUserUseCase,
    LoginRequest,
    LoginUseCase,
    RegisterRequest,
    RegisterResponse,
    RegisterUseCase,
)
from ask.application.usecase.views import UserView
from ask.config import Settings
from ask.domain.service import JWTService
from ask.interface.api.routes.common import AUTH_COOKIE, require_user_id

router = APIRouter(prefix="/auth", tags=["auth"], route_class=DishkaRoute)


class RegisterAPIRequest(BaseModel):
    """API request for registration."""

    username: str
    email: str
    password: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None


class LoginAPIRequest(BaseModel):
    """API request for login."""

    email: str
    password: str


class LoginAPIResponse(BaseModel):
    """Login response; the token itself only travels in the cookie."""

    message: str
    user: UserView


class LogoutResponse(BaseModel):
    """Logout response."""

    message: str


@router.post(
    "/register", response_model=RegisterResponse, status_code=status.HTTP_201_CREATED
)
async def register(
    request: RegisterAPIRequest,
    register_use_case: FromDishka[RegisterUseCase],
) -> RegisterResponse:
    """Create an account.

    Returns:
        The new user (without password hash)
    """
    return await register_use_case.execute(
        RegisterRequest(**request.model_dump())
    )


@router.post("/login", response_model=LoginAPIResponse)
async def login(
    request: LoginAPIRequest,
    response: Response,
    login_use_case: FromDishka[LoginUseCase],
    settings: FromDishka[Settings],
) -> LoginAPIResponse:
    """Log in with email and password.

    Sets an HTTP-only ``auth_token`` cookie holding the session JWT.
    """
    result = await login_use_case.execute(
        LoginRequest(email=request.email, password=request.password)
    )

    is_production = settings.is_production
    response.set_cookie(
        key=AUTH_COOKIE,
        value=result.token,
        httponly=True,
        secure=is_production,
        samesite="none" if is_production else "lax",
        domain=settings.auth.cookie_domain,
        path="/",
        max_age=settings.auth.jwt_expiry_days * 24 * 60 * 60,
    )
    logfire.info("Auth cookie set", user_id=result.user.id)
    return LoginAPIResponse(message="Logged in successfully", user=result.user)


@router.post("/logout", response_model=LogoutResponse)
async def logout(response: Response, settings: FromDishka[Settings]) -> LogoutResponse:
    """Clear the session cookie."""
    response.delete_cookie(
        key=AUTH_COOKIE, domain=settings.auth.cookie_domain, path="/"
    )
    return LogoutResponse(message="Logged out")


@router.get("/profile", response_model=UserView)
async def profile(
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> UserView:
    """The caller's own user record."""
    user_id = require_user_id(jwt_service, auth_token)
    return await get_current_user_use_case.execute(
        GetCurrentUserRequest(user_id=user_id)
    )
