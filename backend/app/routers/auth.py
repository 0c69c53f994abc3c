"""
Authentication router for login and token refresh.
"""
from typing import Annotated

from fastapi import APIRouter, Depends

from app.config import get_settings
from app.core.security import create_access_token
from app.dependencies.auth import CurrentUser
from app.dependencies.services import get_user_service
from app.schemas.auth import LoginRequest, LoginResponse, TokenRefreshResponse
from app.schemas.user import UserResponse
from app.services.user_service import UserService

router = APIRouter(prefix="/auth", tags=["Authentication"])


@router.post(
    "/login",
    response_model=LoginResponse,
    summary="Login and get access token",
)
async def login(
    body: LoginRequest,
    user_service: Annotated[UserService, Depends(get_user_service)],
):
    """
    Authenticate with username and password to receive a JWT token.

    The token should be passed as a query parameter `token` to protected endpoints.
    """
    user_id = await user_service.verify_user_credential(body.username, body.password)
    settings = get_settings()

    return LoginResponse(
        access_token=create_access_token(user_id=user_id),
        token_type="bearer",
        expires_in=settings.jwt_access_token_expire_minutes * 60,
        user_id=user_id,
    )


@router.post(
    "/refresh",
    response_model=TokenRefreshResponse,
    summary="Refresh access token",
)
async def refresh_token(current_user: CurrentUser):
    """
    Refresh the JWT token for an authenticated user.

    Requires valid token as query parameter: `?token=xxx`
    """
    settings = get_settings()
    return TokenRefreshResponse(
        access_token=create_access_token(user_id=current_user.id),
        token_type="bearer",
        expires_in=settings.jwt_access_token_expire_minutes * 60,
    )


@router.get(
    "/me",
    response_model=UserResponse,
    summary="Get current user info",
)
async def get_current_user_info(current_user: CurrentUser):
    """
    Get information about the currently authenticated user.

    Requires valid token as query parameter: `?token=xxx`
    """
    return UserResponse(
        id=current_user.id,
        username=current_user.username,
        fullname=current_user.fullname,
    )
