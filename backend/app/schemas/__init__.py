"""
Request and response schemas for API endpoints.
"""
from app.schemas.auth import (
    LoginRequest,
    LoginResponse,
    TokenRefreshResponse,
)
from app.schemas.user import UserCreate, UserCreateResponse, UserResponse
from app.schemas.note import (
    NotePayload,
    NoteCreateResponse,
    NoteResponse,
    NoteSummary,
)
from app.schemas.collaboration import (
    CollaborationPayload,
    CollaborationCreateResponse,
)

__all__ = [
    # Auth
    "LoginRequest",
    "LoginResponse",
    "TokenRefreshResponse",
    # User
    "UserCreate",
    "UserCreateResponse",
    "UserResponse",
    # Note
    "NotePayload",
    "NoteCreateResponse",
    "NoteResponse",
    "NoteSummary",
    # Collaboration
    "CollaborationPayload",
    "CollaborationCreateResponse",
]
