"""
Collaboration request/response schemas.
"""
from pydantic import BaseModel, Field


class CollaborationPayload(BaseModel):
    """Add or remove a collaborator on a note."""
    note_id: str = Field(..., description="Note ID")
    user_id: str = Field(..., description="Collaborator user ID")


class CollaborationCreateResponse(BaseModel):
    """Add collaborator response."""
    collaboration_id: str = Field(..., description="Created collaboration ID")
