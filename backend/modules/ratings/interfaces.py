"""
Ratings module interface.
"""

from typing import Protocol, Optional, runtime_checkable

from shared.models import Identity

from .models import RatingCreateRequest, RatingSummary, RatingUpdateRequest, RatingView


@runtime_checkable
class IRatingService(Protocol):
    """
    Interface for rating operations.

    Every mutation requires an identity; update and delete additionally
    require that the identity authored the rating, whatever its role.
    """

    async def submit(
        self,
        identity: Optional[Identity],
        request: RatingCreateRequest,
    ) -> RatingView:
        """
        Create the requester's rating of an item.

        Raises:
            ValidationError: If item ID or score is missing/invalid
            ItemNotFoundError: If the item does not exist
            DuplicateRatingError: If the requester already rated the item
        """
        ...

    async def update(
        self,
        rating_id: str,
        identity: Optional[Identity],
        request: RatingUpdateRequest,
    ) -> RatingView:
        """
        Merge new score/comment into a rating and refresh updated_at.

        Raises:
            RatingNotFoundError: If the rating does not exist
            RatingAccessDeniedError: If the requester is not the author
        """
        ...

    async def delete(self, rating_id: str, identity: Optional[Identity]) -> None:
        """Delete a rating. Same checks as update."""
        ...

    async def list_for_item(self, item_id: str) -> RatingSummary:
        """Ratings of an item newest first, with mean score and count."""
        ...
