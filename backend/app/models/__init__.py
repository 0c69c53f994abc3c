"""
Pydantic models for database documents and data structures.
"""
from app.models.user import User
from app.models.note import Note

__all__ = [
    "User",
    "Note",
]
