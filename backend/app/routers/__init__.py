"""
API Routers module.
"""
from app.routers import auth, collaborations, health, notes, users

__all__ = ["auth", "collaborations", "health", "notes", "users"]
