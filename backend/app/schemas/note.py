"""
Note request/response schemas.
"""
from typing import Optional

from pydantic import BaseModel, Field


class NotePayload(BaseModel):
    """Create or update note request."""
    title: str = Field(..., description="Note title")
    body: str = Field(..., description="Note body")
    tags: list[str] = Field(..., description="Note tags")


class NoteCreateResponse(BaseModel):
    """Create note response."""
    note_id: str = Field(..., description="Created note ID")


class NoteResponse(BaseModel):
    """Note response."""
    id: str = Field(..., description="Note ID")
    title: str = Field(..., description="Note title")
    body: str = Field(..., description="Note body")
    tags: list[str] = Field(..., description="Note tags")
    owner: str = Field(..., description="Owner user ID")
    created_at: str = Field(..., description="Creation timestamp")
    updated_at: str = Field(..., description="Last update timestamp")
    username: Optional[str] = Field(None, description="Owner username")


class NoteSummary(BaseModel):
    """Note entry in list responses."""
    id: str = Field(..., description="Note ID")
    title: str = Field(..., description="Note title")
    owner: str = Field(..., description="Owner user ID")
    updated_at: str = Field(..., description="Last update timestamp")
