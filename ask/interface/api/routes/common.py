"""Helpers shared by the route modules."""

from fastapi import HTTPException, status

from ask.domain.service import JWTService

AUTH_COOKIE = "auth_token"


def require_user_id(jwt_service: JWTService, auth_token: str | None) -> str:
    """User ID from the session cookie.

    Args:
        jwt_service: JWT service for token verification
        auth_token: JWT token from cookie

    Raises:
        HTTPException: 401 if the cookie is missing, expired or forged
    """
    user_id = jwt_service.get_user_id_from_token(auth_token)
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
        )
    return user_id
