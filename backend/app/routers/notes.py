"""
Notes router. Every note-scoped route authorizes before it acts.
"""
from typing import Annotated

from fastapi import APIRouter, Depends, status

from app.dependencies.auth import CurrentUser
from app.dependencies.services import get_access_service, get_note_service
from app.models.note import Note
from app.schemas.note import NoteCreateResponse, NotePayload, NoteResponse, NoteSummary
from app.services.access_service import AccessService
from app.services.note_service import NoteService

router = APIRouter(prefix="/notes", tags=["Notes"])


def _to_response(note: Note) -> NoteResponse:
    return NoteResponse(
        id=note.id,
        title=note.title,
        body=note.body,
        tags=note.tags,
        owner=note.owner,
        created_at=note.created_at,
        updated_at=note.updated_at,
        username=note.username,
    )


@router.post(
    "",
    response_model=NoteCreateResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create note",
)
async def create_note(
    body: NotePayload,
    current_user: CurrentUser,
    note_service: Annotated[NoteService, Depends(get_note_service)],
):
    """
    Create a note owned by the current user.

    Requires valid token as query parameter: `?token=xxx`
    """
    note_id = await note_service.add_note(body.title, body.body, body.tags, current_user.id)
    return NoteCreateResponse(note_id=note_id)


@router.get(
    "",
    response_model=list[NoteSummary],
    summary="List notes",
)
async def list_notes(
    current_user: CurrentUser,
    note_service: Annotated[NoteService, Depends(get_note_service)],
):
    """List notes the current user owns or collaborates on."""
    notes = await note_service.get_notes(current_user.id)
    return [
        NoteSummary(id=n.id, title=n.title, owner=n.owner, updated_at=n.updated_at)
        for n in notes
    ]


@router.get(
    "/{note_id}",
    response_model=NoteResponse,
    summary="Get note",
)
async def get_note(
    note_id: str,
    current_user: CurrentUser,
    note_service: Annotated[NoteService, Depends(get_note_service)],
    access_service: Annotated[AccessService, Depends(get_access_service)],
):
    """Get a note. Owner or collaborator only."""
    await access_service.authorize(note_id, current_user.id)
    return _to_response(await note_service.get_note_by_id(note_id))


@router.put(
    "/{note_id}",
    summary="Update note",
)
async def update_note(
    note_id: str,
    body: NotePayload,
    current_user: CurrentUser,
    note_service: Annotated[NoteService, Depends(get_note_service)],
    access_service: Annotated[AccessService, Depends(get_access_service)],
):
    """Replace a note's title, body and tags. Owner or collaborator only."""
    await access_service.authorize(note_id, current_user.id)
    await note_service.edit_note_by_id(note_id, body.title, body.body, body.tags)
    return {"message": "Note updated"}


@router.delete(
    "/{note_id}",
    summary="Delete note",
)
async def delete_note(
    note_id: str,
    current_user: CurrentUser,
    note_service: Annotated[NoteService, Depends(get_note_service)],
    access_service: Annotated[AccessService, Depends(get_access_service)],
):
    """Delete a note. Owner only."""
    await access_service.verify_note_owner(note_id, current_user.id)
    await note_service.delete_note_by_id(note_id)
    return {"message": "Note deleted"}
