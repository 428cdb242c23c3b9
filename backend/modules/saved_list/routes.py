"""
Saved-list API endpoints.
"""

from typing import Any

from fastapi import APIRouter, Depends

from api.dependencies import get_saved_list_service
from api.middleware.auth import require_authenticated
from api.models.errors import AUTH_RESPONSES, NOT_FOUND_RESPONSES, VALIDATION_RESPONSES
from shared.models import Identity, MessageResponse

from .interfaces import ISavedListService
from .models import SavedListAddRequest

router = APIRouter()


@router.get("", response_model=list[dict[str, Any]], responses=AUTH_RESPONSES)
async def list_saved(
    identity: Identity = Depends(require_authenticated),
    service: ISavedListService = Depends(get_saved_list_service),
) -> list[dict[str, Any]]:
    """
    Items in the caller's saved list.
    """
    items = await service.list_items(identity)
    return [item.to_public_dict(include_restricted=True) for item in items]


@router.post(
    "",
    response_model=MessageResponse,
    status_code=201,
    responses={**AUTH_RESPONSES, **VALIDATION_RESPONSES, **NOT_FOUND_RESPONSES},
)
async def add_saved(
    body: SavedListAddRequest,
    identity: Identity = Depends(require_authenticated),
    service: ISavedListService = Depends(get_saved_list_service),
) -> MessageResponse:
    """
    Add an item to the caller's saved list.
    """
    await service.add(identity, body)
    return MessageResponse(message="Added to saved list")


@router.delete(
    "/{item_id}",
    response_model=MessageResponse,
    responses={**AUTH_RESPONSES, **NOT_FOUND_RESPONSES},
)
async def remove_saved(
    item_id: str,
    identity: Identity = Depends(require_authenticated),
    service: ISavedListService = Depends(get_saved_list_service),
) -> MessageResponse:
    """
    Remove an item from the caller's saved list.
    """
    await service.remove(identity, item_id)
    return MessageResponse(message="Removed from saved list")
