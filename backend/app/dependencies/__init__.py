"""
Dependencies for dependency injection in routes.
"""
from app.dependencies.auth import CurrentUser, get_current_user
from app.dependencies.services import (
    get_access_service,
    get_collaboration_service,
    get_note_service,
    get_user_service,
)

__all__ = [
    "CurrentUser",
    "get_current_user",
    "get_access_service",
    "get_collaboration_service",
    "get_note_service",
    "get_user_service",
]
