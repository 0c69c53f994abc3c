"""
User model for the notes database.
"""
from pydantic import BaseModel, Field


class User(BaseModel):
    """
    Public view of a document in notes_db.users.

    The password hash is never part of this model.
    """
    id: str = Field(..., alias="_id", description="Opaque user ID")
    username: str = Field(..., description="Unique username")
    fullname: str = Field(..., description="Full name")

    class Config:
        populate_by_name = True
