"""
Rating aggregation service.

Enforces one rating per (user, item), author-only mutation, and computes
the per-item mean score.
"""

import logging
from datetime import datetime, timezone
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional, Any, Iterable

from modules.auth.policy import ensure_authenticated
from modules.catalog.exceptions import ItemNotFoundError
from modules.catalog.interfaces import ICatalogService
from shared.exceptions import InternalError
from shared.models import Identity
from shared.validation import parse_identifier, raise_for_field_errors, validate_score

from .exceptions import RatingAccessDeniedError, RatingNotFoundError
from .interfaces import IRatingService
from .models import (
    Rating,
    RatingCreateRequest,
    RatingSummary,
    RatingUpdateRequest,
    RatingView,
)
from .repository import RatingRepository

logger = logging.getLogger(__name__)


def average_score(scores: Iterable[int]) -> float:
    """
    Arithmetic mean rounded half-up to one decimal; 0.0 for no scores.

    Examples:
        >>> average_score([5, 4, 3])
        4.0
        >>> average_score([])
        0.0
    """
    scores = list(scores)
    if not scores:
        return 0.0
    mean = Decimal(sum(scores)) / Decimal(len(scores))
    return float(mean.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


class RatingService(IRatingService):
    """Rating aggregator backed by RatingRepository."""

    def __init__(self, repository: RatingRepository, catalog: ICatalogService):
        self._repository = repository
        self._catalog = catalog

    async def submit(
        self,
        identity: Optional[Identity],
        request: RatingCreateRequest,
    ) -> RatingView:
        identity = ensure_authenticated(identity)

        field_errors = {}
        if not request.item_id:
            field_errors["itemId"] = "Item ID is required"
        score_error = validate_score(request.score)
        if score_error:
            field_errors["score"] = score_error
        raise_for_field_errors(field_errors)

        item_id = parse_identifier(request.item_id, "Invalid item ID format")
        if not await self._catalog.item_exists(item_id):
            raise ItemNotFoundError(item_id)

        rating = self._repository.create({
            "user_id": identity.user_id,
            "item_id": item_id,
            "score": request.score,
            "comment": request.comment or "",
        })
        logger.info("Rating %s submitted for item %s", rating.id, item_id)
        return self._view(rating.id)

    async def update(
        self,
        rating_id: str,
        identity: Optional[Identity],
        request: RatingUpdateRequest,
    ) -> RatingView:
        identity = ensure_authenticated(identity)
        rating_id = parse_identifier(rating_id, "Invalid review ID format")

        score_error = validate_score(request.score, required=False)
        if score_error:
            raise_for_field_errors({"score": score_error})

        self._get_owned(rating_id, identity, action="edit")

        data: dict[str, Any] = {"updated_at": datetime.now(timezone.utc).isoformat()}
        if request.score is not None:
            data["score"] = request.score
        if request.comment is not None:
            data["comment"] = request.comment

        if self._repository.update(rating_id, data) is None:
            raise RatingNotFoundError(rating_id)
        return self._view(rating_id)

    async def delete(self, rating_id: str, identity: Optional[Identity]) -> None:
        identity = ensure_authenticated(identity)
        rating_id = parse_identifier(rating_id, "Invalid review ID format")

        self._get_owned(rating_id, identity, action="delete")
        if not self._repository.delete(rating_id):
            raise RatingNotFoundError(rating_id)
        logger.info("Rating %s deleted by its author", rating_id)

    async def list_for_item(self, item_id: str) -> RatingSummary:
        item_id = parse_identifier(item_id, "Invalid item ID format")
        reviews = self._repository.list_for_item(item_id)
        return RatingSummary(
            reviews=reviews,
            average_rating=average_score(review.score for review in reviews),
            review_count=len(reviews),
        )

    def _get_owned(self, rating_id: str, identity: Identity, action: str) -> Rating:
        rating = self._repository.get_by_id(rating_id)
        if rating is None:
            raise RatingNotFoundError(rating_id)
        if rating.user_id != identity.user_id:
            logger.warning("User %s tried to %s rating %s", identity.user_id, action, rating_id)
            raise RatingAccessDeniedError(rating_id, identity.user_id, action=action)
        return rating

    def _view(self, rating_id: str) -> RatingView:
        view = self._repository.get_view(rating_id)
        if view is None:
            raise InternalError(details={"rating_id": rating_id})
        return view
