"""User domain service."""

import asyncio
from datetime import datetime
from typing import Optional, Sequence
from uuid import uuid4

import bcrypt
import logfire
import pydantic

from ask.config import AuthSettings
from ask.domain.error import (
    AuthenticationError,
    ConflictError,
    NotFoundError,
    ValidationError,
)
from ask.domain.model import User
from ask.domain.repository import UserRepository
from ask.domain.value import Email, UserId, Username

from .base import Service


class UserService(Service):
    """Domain service for registration, credentials and user lookup."""

    def __init__(
        self, user_repository: UserRepository, auth_settings: AuthSettings
    ) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
            auth_settings: Authentication settings (hash cost, password policy)
        """
        self.user_repository = user_repository
        self.auth_settings = auth_settings

    async def register(
        self,
        username: str,
        email: str,
        password: str,
        first_name: Optional[str] = None,
        last_name: Optional[str] = None,
    ) -> User:
        """Create a new user with a bcrypt-hashed password.

        Args:
            username: Requested username
            email: Email address used for login
            password: Plain-text password
            first_name: Optional first name
            last_name: Optional last name

        Returns:
            The created user

        Raises:
            ValidationError: If a field is malformed or the password is too short
            ConflictError: If the username or email is already taken
        """
        with logfire.span("user_service.register", username=username):
            try:
                valid_username = Username(username)
                valid_email = Email(email)
            except pydantic.ValidationError as e:
                raise ValidationError(_first_message(e)) from e

            if len(password) < self.auth_settings.min_password_length:
                raise ValidationError(
                    "Password must be at least "
                    f"{self.auth_settings.min_password_length} characters"
                )

            if await self.user_repository.find_by_username(valid_username):
                logfire.warn("Username already taken", username=username)
                raise ConflictError("Username already taken")
            if await self.user_repository.find_by_email(valid_email):
                logfire.warn("Email already registered", username=username)
                raise ConflictError("Email already registered")

            now = datetime.now()
            user = User(
                id=UserId(uuid4()),
                username=valid_username,
                email=valid_email,
                password_hash=await self._hash_password(password),
                first_name=first_name or None,
                last_name=last_name or None,
                created_at=now,
                updated_at=now,
            )
            saved = await self.user_repository.save(user)
            logfire.info("User registered", user_id=str(saved.id), username=username)
            return saved

    async def authenticate(self, email: str, password: str) -> User:
        """Check an email/password pair.

        Unknown email and wrong password are reported the same way.

        Raises:
            AuthenticationError: If the credentials do not match a user
        """
        with logfire.span("user_service.authenticate"):
            try:
                valid_email = Email(email)
            except pydantic.ValidationError:
                raise AuthenticationError("Invalid credentials")

            user = await self.user_repository.find_by_email(valid_email)
            if not user or not await self._check_password(password, user.password_hash):
                logfire.warn("Login failed")
                raise AuthenticationError("Invalid credentials")

            logfire.info("User authenticated", user_id=str(user.id))
            return user

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            return user

    async def get_users_by_ids(self, user_ids: Sequence[UserId]) -> dict[UserId, User]:
        """Load several users at once, keyed by ID.

        Args:
            user_ids: User IDs (duplicates allowed)

        Returns:
            Mapping of ID to user for the users that exist
        """
        unique = list(dict.fromkeys(user_ids))
        if not unique:
            return {}
        users = await self.user_repository.find_by_ids(unique)
        return {user.id: user for user in users}

    async def _hash_password(self, password: str) -> str:
        salt = bcrypt.gensalt(rounds=self.auth_settings.bcrypt_rounds)
        hashed = await asyncio.to_thread(bcrypt.hashpw, password.encode(), salt)
        return hashed.decode()

    @staticmethod
    async def _check_password(password: str, password_hash: str) -> bool:
        return await asyncio.to_thread(
            bcrypt.checkpw, password.encode(), password_hash.encode()
        )


def _first_message(error: pydantic.ValidationError) -> str:
    """Human readable message of the first validation failure."""
    message = error.errors()[0]["msg"]
    # pydantic prefixes messages raised from validators
    return message.removeprefix("Value error, ")
