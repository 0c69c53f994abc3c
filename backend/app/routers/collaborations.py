"""
Collaborations router. Only a note's owner manages its collaborators.
"""
from typing import Annotated

from fastapi import APIRouter, Depends, status

from app.dependencies.auth import CurrentUser
from app.dependencies.services import (
    get_access_service,
    get_collaboration_service,
    get_user_service,
)
from app.schemas.collaboration import CollaborationCreateResponse, CollaborationPayload
from app.services.access_service import AccessService
from app.services.collaboration_service import CollaborationService
from app.services.user_service import UserService

router = APIRouter(prefix="/collaborations", tags=["Collaborations"])


@router.post(
    "",
    response_model=CollaborationCreateResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Add collaborator",
)
async def add_collaborator(
    body: CollaborationPayload,
    current_user: CurrentUser,
    access_service: Annotated[AccessService, Depends(get_access_service)],
    user_service: Annotated[UserService, Depends(get_user_service)],
    collaboration_service: Annotated[CollaborationService, Depends(get_collaboration_service)],
):
    """Grant another user access to one of your notes."""
    await access_service.verify_note_owner(body.note_id, current_user.id)
    await user_service.get_user_by_id(body.user_id)
    collaboration_id = await collaboration_service.add_collaboration(body.note_id, body.user_id)
    return CollaborationCreateResponse(collaboration_id=collaboration_id)


@router.delete(
    "",
    summary="Remove collaborator",
)
async def remove_collaborator(
    body: CollaborationPayload,
    current_user: CurrentUser,
    access_service: Annotated[AccessService, Depends(get_access_service)],
    collaboration_service: Annotated[CollaborationService, Depends(get_collaboration_service)],
):
    """Revoke a user's access to one of your notes."""
    await access_service.verify_note_owner(body.note_id, current_user.id)
    await collaboration_service.delete_collaboration(body.note_id, body.user_id)
    return {"message": "Collaboration removed"}
