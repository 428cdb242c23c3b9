"""
Ratings module exceptions.
"""

from typing import Any

from shared.exceptions import AuthorizationError, ConflictError, NotFoundError


class RatingNotFoundError(NotFoundError):
    """Raised when a rating does not exist."""

    def __init__(self, rating_id: str):
        super().__init__(
            "Review not found",
            code="RATING_NOT_FOUND",
            details={"rating_id": rating_id},
        )


class RatingAccessDeniedError(AuthorizationError):
    """Raised when someone other than the author edits or deletes a rating."""

    def __init__(self, rating_id: str, user_id: str, action: str = "edit"):
        super().__init__(
            f"You can only {action} your own reviews",
            code="RATING_ACCESS_DENIED",
            details={"rating_id": rating_id, "user_id": user_id},
        )


class DuplicateRatingError(ConflictError):
    """Raised when a user rates an item they already rated."""

    def __init__(self, existing_id: str, user_id: str, item_id: str):
        super().__init__(
            "You have already reviewed this item",
            code="DUPLICATE_RATING",
            details={"user_id": user_id, "item_id": item_id},
        )
        self.existing_id = existing_id

    def to_dict(self) -> dict[str, Any]:
        body = super().to_dict()
        body["existingId"] = self.existing_id
        return body
