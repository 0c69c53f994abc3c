"""
Service layer for business logic.
"""
from app.services.user_service import UserService
from app.services.note_service import NoteService
from app.services.collaboration_service import CollaborationDelegate, CollaborationService
from app.services.access_service import AccessService, CollaborationCheck

__all__ = [
    "UserService",
    "NoteService",
    "CollaborationDelegate",
    "CollaborationService",
    "AccessService",
    "CollaborationCheck",
]
