"""
Ratings module.

One review per user per item, author-only edits, per-item averages.

Public API:
- IRatingService: Interface for rating operations
- Rating, RatingView, RatingSummary
- Rating exceptions: DuplicateRatingError, RatingNotFoundError, RatingAccessDeniedError
"""

from .interfaces import IRatingService
from .models import Rating, RatingView, RatingSummary, RatingCreateRequest, RatingUpdateRequest
from .exceptions import DuplicateRatingError, RatingNotFoundError, RatingAccessDeniedError

__all__ = [
    # Interface
    "IRatingService",
    # Models
    "Rating",
    "RatingView",
    "RatingSummary",
    "RatingCreateRequest",
    "RatingUpdateRequest",
    # Exceptions
    "DuplicateRatingError",
    "RatingNotFoundError",
    "RatingAccessDeniedError",
]
