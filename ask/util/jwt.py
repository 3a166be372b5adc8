"""JWT session token utilities."""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel

from ask.config import AuthSettings


class TokenPayload(BaseModel):
    """Claims carried by a session token."""

    user_id: str
    username: str
    exp: datetime


class JWTError(Exception):
    """Token could not be decoded, was tampered with or has expired."""

    pass


def create_token(user_id: str, username: str, settings: AuthSettings) -> str:
    """Encode a signed session token for a user.

    Args:
        user_id: User ID
        username: Username at the time of login
        settings: Authentication settings

    Returns:
        Encoded JWT token
    """
    expiry = datetime.now(timezone.utc) + timedelta(days=settings.jwt_expiry_days)
    payload = {"user_id": user_id, "username": username, "exp": expiry}
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Decode a session token and check its signature and expiry.

    Args:
        token: JWT token to verify
        settings: Authentication settings

    Returns:
        Token payload if valid

    Raises:
        JWTError: If token is invalid or expired
    """
    try:
        payload = jwt.decode(
            token, settings.jwt_secret, algorithms=[settings.jwt_algorithm]
        )
    except jwt.ExpiredSignatureError as e:
        raise JWTError("Token has expired") from e
    except jwt.InvalidTokenError as e:
        raise JWTError("Invalid token") from e
    return TokenPayload(**payload)
