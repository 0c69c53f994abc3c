"""
Access service: the note authorization chain.

Ownership is checked first and the collaboration delegate only for
non-owners. A missing note always answers NotFoundError, whoever asks,
so "missing" and "forbidden" stay distinguishable (404 vs 403).
"""
import asyncio
import logging
from enum import Enum

from pymongo.errors import PyMongoError

from app.core.exceptions import (
    AppError,
    AuthorizationError,
    CollaborationUnavailableError,
)
from app.services.collaboration_service import CollaborationDelegate
from app.services.note_service import NoteService

logger = logging.getLogger(__name__)

FORBIDDEN_MESSAGE = "You are not allowed to access this resource"

# Raised by the delegate when it cannot answer at all
INFRASTRUCTURE_ERRORS = (PyMongoError, OSError, asyncio.TimeoutError)


class CollaborationCheck(str, Enum):
    """Outcome of asking the delegate about a non-owner."""
    GRANTED = "granted"
    FORBIDDEN = "forbidden"


class AccessService:
    """Decides whether an actor may act on a note."""

    def __init__(
        self,
        note_service: NoteService,
        collaboration_delegate: CollaborationDelegate,
    ):
        self.note_service = note_service
        self.collaboration_delegate = collaboration_delegate

    async def authorize(self, note_id: str, actor_id: str) -> None:
        """
        Return normally if actor_id may act on note_id.

        Raises:
            NotFoundError: If the note does not exist
            AuthorizationError: If the actor is neither owner nor collaborator
            CollaborationUnavailableError: If the delegate could not be reached
        """
        owner = await self.note_service.get_note_owner(note_id)

        if actor_id == owner:
            return

        check = await self._check_collaboration(note_id, actor_id)
        if check is CollaborationCheck.FORBIDDEN:
            logger.info(f"Access to {note_id} denied for {actor_id}")
            raise AuthorizationError(FORBIDDEN_MESSAGE)

    async def verify_note_owner(self, note_id: str, actor_id: str) -> None:
        """
        Return normally only if actor_id owns note_id. Collaborators do not pass.

        Raises:
            NotFoundError: If the note does not exist
            AuthorizationError: If the actor is not the owner
        """
        owner = await self.note_service.get_note_owner(note_id)

        if actor_id != owner:
            logger.info(f"Owner-only action on {note_id} denied for {actor_id}")
            raise AuthorizationError(FORBIDDEN_MESSAGE)

    async def _check_collaboration(self, note_id: str, actor_id: str) -> CollaborationCheck:
        """
        Ask the delegate and fold every answer into a CollaborationCheck.

        Whatever the delegate raises for "not a collaborator" stays in here.
        Only infrastructure failures escape, as CollaborationUnavailableError.
        """
        try:
            granted = await self.collaboration_delegate.is_collaborator(note_id, actor_id)
        except INFRASTRUCTURE_ERRORS as e:
            logger.warning(f"Collaboration lookup failed for {note_id}: {e!r}")
            raise CollaborationUnavailableError("Collaboration lookup is unavailable") from e
        except AppError as e:
            logger.debug(f"Delegate rejected {actor_id} on {note_id}: {e.message}")
            return CollaborationCheck.FORBIDDEN
        except Exception as e:
            logger.warning(f"Delegate error treated as no access on {note_id}: {e!r}")
            return CollaborationCheck.FORBIDDEN

        return CollaborationCheck.GRANTED if granted is True else CollaborationCheck.FORBIDDEN
