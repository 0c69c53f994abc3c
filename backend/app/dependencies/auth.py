"""
Authentication dependencies for route protection.
"""
from typing import Annotated

from fastapi import Depends, Query
from jose import JWTError

from app.core.exceptions import AuthenticationError, NotFoundError
from app.core.security import decode_token
from app.dependencies.services import get_user_service
from app.models.user import User
from app.services.user_service import UserService

INVALID_TOKEN = "Could not validate credentials"


async def get_current_user(
    token: Annotated[str, Query(description="JWT access token")],
    user_service: Annotated[UserService, Depends(get_user_service)],
) -> User:
    """
    Dependency to get the current authenticated user from JWT token.

    Token is passed as query parameter: ?token=xxx

    Raises:
        AuthenticationError: If the token is invalid or expired, or its user is gone
    """
    try:
        payload = decode_token(token)
    except JWTError:
        raise AuthenticationError(INVALID_TOKEN)

    user_id = payload.get("sub")
    if user_id is None:
        raise AuthenticationError(INVALID_TOKEN)

    try:
        return await user_service.get_user_by_id(user_id)
    except NotFoundError:
        raise AuthenticationError(INVALID_TOKEN)


# Type alias for cleaner route signatures
CurrentUser = Annotated[User, Depends(get_current_user)]
