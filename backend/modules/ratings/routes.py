"""
Rating API endpoints.
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_rating_service
from api.middleware.auth import require_authenticated
from api.models.errors import (
    AUTH_RESPONSES,
    NOT_FOUND_RESPONSES,
    VALIDATION_RESPONSES,
    ConflictErrorResponse,
    ErrorResponse,
)
from shared.models import Identity, MessageResponse

from .interfaces import IRatingService
from .models import RatingCreateRequest, RatingResponse, RatingSummary, RatingUpdateRequest

router = APIRouter()

OWNER_RESPONSES = {
    **AUTH_RESPONSES,
    **NOT_FOUND_RESPONSES,
    403: {"model": ErrorResponse, "description": "Not the author"},
}


@router.get(
    "/{item_id}",
    response_model=RatingSummary,
    responses=VALIDATION_RESPONSES,
)
async def list_ratings(
    item_id: str,
    service: IRatingService = Depends(get_rating_service),
) -> RatingSummary:
    """
    All reviews of an item, newest first, with the average score.
    """
    return await service.list_for_item(item_id)


@router.post(
    "",
    response_model=RatingResponse,
    status_code=201,
    responses={
        **AUTH_RESPONSES,
        **NOT_FOUND_RESPONSES,
        400: {"model": ConflictErrorResponse, "description": "Invalid input or already reviewed"},
    },
)
async def submit_rating(
    body: RatingCreateRequest,
    identity: Identity = Depends(require_authenticated),
    service: IRatingService = Depends(get_rating_service),
) -> RatingResponse:
    """
    Review an item. One review per user per item; edit it with PUT afterwards.
    """
    review = await service.submit(identity, body)
    return RatingResponse(message="Review added successfully", review=review)


@router.put("/{rating_id}", response_model=RatingResponse, responses=OWNER_RESPONSES)
async def update_rating(
    rating_id: str,
    body: RatingUpdateRequest,
    identity: Identity = Depends(require_authenticated),
    service: IRatingService = Depends(get_rating_service),
) -> RatingResponse:
    """
    Edit your own review.
    """
    review = await service.update(rating_id, identity, body)
    return RatingResponse(message="Review updated successfully", review=review)


@router.delete("/{rating_id}", response_model=MessageResponse, responses=OWNER_RESPONSES)
async def delete_rating(
    rating_id: str,
    identity: Identity = Depends(require_authenticated),
    service: IRatingService = Depends(get_rating_service),
) -> MessageResponse:
    """
    Delete your own review.
    """
    await service.delete(rating_id, identity)
    return MessageResponse(message="Review deleted successfully")
