"""
Database definitions and collection constants.
"""
from app.database.databases import notes_db

__all__ = ["notes_db"]
