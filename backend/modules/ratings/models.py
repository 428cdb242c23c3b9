"""
Ratings module data models.
"""

from datetime import datetime
from typing import Optional, Any
from pydantic import Field

from shared.models import ApiModel


class Rating(ApiModel):
    """A user's review of one catalog item. At most one per (user, item)."""

    id: str = Field(..., description="Rating ID (UUID)")
    user_id: str = Field(..., description="Author")
    item_id: str = Field(..., description="Reviewed catalog item")
    score: int = Field(..., ge=1, le=5)
    comment: str = ""
    created_at: datetime
    updated_at: datetime


class ReviewAuthor(ApiModel):
    """Public identity of a review's author."""

    email: Optional[str] = None


class RatingView(Rating):
    """A rating with its author's public identity attached."""

    user: Optional[ReviewAuthor] = None


class RatingCreateRequest(ApiModel):
    """
    Submit payload.

    score is untyped here; shared.validation owns the 1-5 integer rule.
    """

    item_id: Optional[str] = None
    score: Any = None
    comment: Optional[str] = None


class RatingUpdateRequest(ApiModel):
    """Omitted fields are left unchanged."""

    score: Any = None
    comment: Optional[str] = None


class RatingSummary(ApiModel):
    reviews: list[RatingView]
    average_rating: float
    review_count: int


class RatingResponse(ApiModel):
    message: str
    review: RatingView
