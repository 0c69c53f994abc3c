"""
Notes database configuration.
Stores user identity, notes, and note collaborations.
"""
from motor.motor_asyncio import AsyncIOMotorDatabase

DB_NAME = "notes_db"


class Collections:
    """Collection names in notes_db."""
    USERS = "users"
    NOTES = "notes"
    COLLABORATIONS = "collaborations"


async def create_notes_indexes(db: AsyncIOMotorDatabase) -> None:
    """
    Create indexes for notes_db.

    The unique index on users.username is what finally enforces username
    uniqueness; the service-level check only gives an early error.
    """
    await db[Collections.USERS].create_index("username", unique=True)
    await db[Collections.NOTES].create_index("owner")
    await db[Collections.COLLABORATIONS].create_index(
        [("note_id", 1), ("user_id", 1)], unique=True
    )
    await db[Collections.COLLABORATIONS].create_index("user_id")
