"""
Collaboration service: who may act on a note without owning it.
"""
import logging
from typing import Protocol, runtime_checkable

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.errors import DuplicateKeyError

from app.core.exceptions import (
    ConflictError,
    NotFoundError,
    StorageInvariantError,
)
from app.database.databases import notes_db

logger = logging.getLogger(__name__)


@runtime_checkable
class CollaborationDelegate(Protocol):
    """
    Anything that can tell whether a non-owner collaborates on a note.

    AccessService depends on this, never on CollaborationService directly.
    """

    async def is_collaborator(self, note_id: str, user_id: str) -> bool:
        ...


class CollaborationService:
    """MongoDB-backed collaboration grants."""

    def __init__(self, db: AsyncIOMotorDatabase):
        """Initialize with the notes database."""
        self.db = db
        self.collaborations = db[notes_db.Collections.COLLABORATIONS]

    async def add_collaboration(self, note_id: str, user_id: str) -> str:
        """
        Grant user_id access to note_id.

        Raises:
            ConflictError: If the grant already exists
            StorageInvariantError: If the insert cannot be confirmed
        """
        collaboration_id = f"collab-{ObjectId()}"

        try:
            result = await self.collaborations.insert_one({
                "_id": collaboration_id,
                "note_id": note_id,
                "user_id": user_id,
            })
        except DuplicateKeyError:
            raise ConflictError("User is already a collaborator on this note")

        if result.inserted_id != collaboration_id:
            raise StorageInvariantError("Failed to add collaboration")

        logger.info(f"User {user_id} added as collaborator on {note_id}")
        return collaboration_id

    async def delete_collaboration(self, note_id: str, user_id: str) -> None:
        """
        Revoke a grant.

        Raises:
            NotFoundError: If there was no such grant
        """
        result = await self.collaborations.delete_one({
            "note_id": note_id,
            "user_id": user_id,
        })

        if result.deleted_count == 0:
            raise NotFoundError("Failed to delete collaboration. Collaboration not found")

        logger.info(f"User {user_id} removed as collaborator on {note_id}")

    async def is_collaborator(self, note_id: str, user_id: str) -> bool:
        """Whether user_id holds a grant on note_id."""
        grant = await self.collaborations.find_one(
            {"note_id": note_id, "user_id": user_id}, {"_id": 1}
        )
        return grant is not None
