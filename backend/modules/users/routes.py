"""
User administration and profile endpoints.
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_user_service
from api.middleware.auth import require_authenticated, require_privileged
from api.models.errors import (
    ADMIN_RESPONSES,
    AUTH_RESPONSES,
    NOT_FOUND_RESPONSES,
    VALIDATION_RESPONSES,
)
from shared.models import Identity, MessageResponse

from .interfaces import IUserService
from .models import ProfileResponse, ProfileUpdateRequest, UserPublic

router = APIRouter()


@router.get("", response_model=list[UserPublic], responses=ADMIN_RESPONSES)
async def list_users(
    identity: Identity = Depends(require_privileged),
    service: IUserService = Depends(get_user_service),
) -> list[UserPublic]:
    """
    List every user. Admin only; password hashes are never included.
    """
    return await service.list_users(identity)


@router.put(
    "/profile",
    response_model=ProfileResponse,
    responses={**AUTH_RESPONSES, **VALIDATION_RESPONSES},
)
async def update_profile(
    body: ProfileUpdateRequest,
    identity: Identity = Depends(require_authenticated),
    service: IUserService = Depends(get_user_service),
) -> ProfileResponse:
    """
    Update the caller's own name, phone or password.
    """
    user = await service.update_profile(identity, body)
    return ProfileResponse(message="Profile updated successfully", user=user)


@router.delete(
    "/{user_id}",
    response_model=MessageResponse,
    responses={**ADMIN_RESPONSES, **NOT_FOUND_RESPONSES},
)
async def delete_user(
    user_id: str,
    identity: Identity = Depends(require_privileged),
    service: IUserService = Depends(get_user_service),
) -> MessageResponse:
    """
    Delete a user and end their sessions. Admin only.
    """
    await service.delete_user(user_id, identity)
    return MessageResponse(message="User deleted successfully")
