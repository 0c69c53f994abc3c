"""
Note service for note records and ownership lookup.
"""
import logging
from datetime import datetime, timezone

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorDatabase

from app.core.exceptions import NotFoundError, StorageInvariantError
from app.database.databases import notes_db
from app.models.note import Note

logger = logging.getLogger(__name__)


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


class NoteService:
    """Service for note CRUD and ownership lookups."""

    def __init__(self, db: AsyncIOMotorDatabase):
        """Initialize with the notes database."""
        self.db = db
        self.notes = db[notes_db.Collections.NOTES]
        self.users = db[notes_db.Collections.USERS]
        self.collaborations = db[notes_db.Collections.COLLABORATIONS]

    # ==================== Note CRUD ====================

    async def add_note(
        self, title: str, body: str, tags: list[str], owner: str
    ) -> str:
        """
        Create a note owned by `owner`.

        Returns:
            The new note ID

        Raises:
            StorageInvariantError: If the store does not return the new ID
        """
        note_id = f"note-{ObjectId()}"
        created_at = _now_iso()

        note_doc = {
            "_id": note_id,
            "title": title,
            "body": body,
            "tags": tags,
            "created_at": created_at,
            "updated_at": created_at,
            "owner": owner,
        }

        result = await self.notes.insert_one(note_doc)
        if result.inserted_id != note_id:
            raise StorageInvariantError("Failed to add note")

        logger.info(f"Note {note_id} created by {owner}")
        return note_id

    async def get_notes(self, owner: str) -> list[Note]:
        """
        List notes the user owns or collaborates on.

        Each note appears once even if it matches both ways.
        """
        grants = await self.collaborations.find(
            {"user_id": owner}, {"note_id": 1}
        ).to_list(length=None)
        shared_ids = list({grant["note_id"] for grant in grants})

        cursor = self.notes.find({
            "$or": [
                {"owner": owner},
                {"_id": {"$in": shared_ids}},
            ]
        })
        note_docs = await cursor.to_list(length=None)

        notes: dict[str, Note] = {}
        for doc in note_docs:
            notes.setdefault(doc["_id"], Note(**doc))
        return list(notes.values())

    async def get_note_by_id(self, note_id: str) -> Note:
        """
        Get a note with its owner's username.

        Raises:
            NotFoundError: If the note does not exist
        """
        note_doc = await self.notes.find_one({"_id": note_id})

        if not note_doc:
            raise NotFoundError("Note not found")

        owner_doc = await self.users.find_one({"_id": note_doc["owner"]}, {"username": 1})
        note_doc["username"] = owner_doc["username"] if owner_doc else None
        return Note(**note_doc)

    async def edit_note_by_id(
        self, note_id: str, title: str, body: str, tags: list[str]
    ) -> None:
        """
        Replace a note's content and refresh updated_at.

        Raises:
            NotFoundError: If the note does not exist
        """
        result = await self.notes.update_one(
            {"_id": note_id},
            {"$set": {
                "title": title,
                "body": body,
                "tags": tags,
                "updated_at": _now_iso(),
            }},
        )

        if result.matched_count == 0:
            raise NotFoundError("Failed to update note. Id not found")

    async def delete_note_by_id(self, note_id: str) -> None:
        """
        Delete a note and the collaborations on it.

        Raises:
            NotFoundError: If the note does not exist
        """
        result = await self.notes.delete_one({"_id": note_id})

        if result.deleted_count == 0:
            raise NotFoundError("Failed to delete note. Id not found")

        await self.collaborations.delete_many({"note_id": note_id})
        logger.info(f"Note {note_id} deleted")

    # ==================== Ownership ====================

    async def get_note_owner(self, note_id: str) -> str:
        """
        Return the owner ID of a note.

        Does not compare against any actor; that is AccessService's job.

        Raises:
            NotFoundError: If the note does not exist
        """
        note_doc = await self.notes.find_one({"_id": note_id}, {"owner": 1})

        if not note_doc:
            raise NotFoundError("Note not found")

        return note_doc["owner"]
