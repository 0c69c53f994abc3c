"""
Service dependencies for route handlers.
"""
from typing import Annotated

from fastapi import Depends

from app.database.connections import get_database
from app.services.access_service import AccessService
from app.services.collaboration_service import CollaborationService
from app.services.note_service import NoteService
from app.services.user_service import UserService


async def get_user_service() -> UserService:
    """Dependency to get UserService instance."""
    return UserService(await get_database())


async def get_note_service() -> NoteService:
    """Dependency to get NoteService instance."""
    return NoteService(await get_database())


async def get_collaboration_service() -> CollaborationService:
    """Dependency to get CollaborationService instance."""
    return CollaborationService(await get_database())


async def get_access_service(
    note_service: Annotated[NoteService, Depends(get_note_service)],
    collaboration_service: Annotated[CollaborationService, Depends(get_collaboration_service)],
) -> AccessService:
    """Dependency to get AccessService wired to the Mongo collaboration store."""
    return AccessService(note_service, collaboration_service)
