"""
Users router for registration and user lookup.
"""
from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from app.dependencies.services import get_user_service
from app.schemas.user import UserCreate, UserCreateResponse, UserResponse
from app.services.user_service import UserService

router = APIRouter(prefix="/users", tags=["Users"])


@router.post(
    "",
    response_model=UserCreateResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user",
)
async def register(
    body: UserCreate,
    user_service: Annotated[UserService, Depends(get_user_service)],
):
    """
    Register a new user account.

    - **username**: Unique, 1-50 characters
    - **password**: At least 6 characters
    - **fullname**: 1-100 characters
    """
    user_id = await user_service.register_user(body.username, body.password, body.fullname)
    return UserCreateResponse(user_id=user_id)


@router.get(
    "",
    response_model=list[UserResponse],
    summary="Search users by username",
)
async def search_users(
    user_service: Annotated[UserService, Depends(get_user_service)],
    username: Annotated[str, Query(description="Username fragment")] = "",
):
    """List users whose username contains `username` (case-sensitive)."""
    users = await user_service.get_users_by_username(username)
    return [
        UserResponse(id=u.id, username=u.username, fullname=u.fullname)
        for u in users
    ]


@router.get(
    "/{user_id}",
    response_model=UserResponse,
    summary="Get user",
)
async def get_user(
    user_id: str,
    user_service: Annotated[UserService, Depends(get_user_service)],
):
    """Get a user's public profile."""
    user = await user_service.get_user_by_id(user_id)
    return UserResponse(id=user.id, username=user.username, fullname=user.fullname)
