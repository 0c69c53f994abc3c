"""
Note model for the notes database.
"""
from typing import Optional

from pydantic import BaseModel, Field


class Note(BaseModel):
    """
    Note document model for MongoDB notes_db.notes collection.
    """
    id: str = Field(..., alias="_id", description="Opaque note ID")
    title: str = Field(..., description="Note title")
    body: str = Field(..., description="Note body")
    tags: list[str] = Field(default=[], description="Note tags")
    owner: str = Field(..., description="Owner user ID")
    created_at: str = Field(..., description="Creation timestamp (ISO-8601, UTC)")
    updated_at: str = Field(..., description="Last update timestamp (ISO-8601, UTC)")
    username: Optional[str] = Field(
        None,
        description="Owner username, only filled on single-note reads"
    )

    class Config:
        populate_by_name = True
