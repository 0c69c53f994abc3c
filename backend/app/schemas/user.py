"""
User request/response schemas.
"""
from pydantic import BaseModel, ConfigDict, Field


class UserCreate(BaseModel):
    """
    Registration payload.

    Strict so that non-string values are rejected instead of coerced.
    Blank and length rules are enforced by UserService so they answer 400.
    """
    model_config = ConfigDict(strict=True)

    username: str = Field(..., description="Unique username (max 50 characters)")
    password: str = Field(..., description="Password (min 6 characters)")
    fullname: str = Field(..., description="Full name (max 100 characters)")


class UserCreateResponse(BaseModel):
    """Registration response."""
    user_id: str = Field(..., description="Created user ID")


class UserResponse(BaseModel):
    """User information response (excludes sensitive data)."""
    id: str = Field(..., description="User ID")
    username: str = Field(..., description="Username")
    fullname: str = Field(..., description="Full name")
