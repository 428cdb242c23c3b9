"""
Saved-list module exceptions.
"""

from shared.exceptions import ConflictError, NotFoundError


class AlreadySavedError(ConflictError):
    """Raised when adding an item that is already in the user's list."""

    def __init__(self, user_id: str, item_id: str):
        super().__init__(
            "Item already in saved list",
            code="ALREADY_SAVED",
            details={"user_id": user_id, "item_id": item_id},
        )


class NotSavedError(NotFoundError):
    """Raised when removing an item that is not in the user's list."""

    def __init__(self, user_id: str, item_id: str):
        super().__init__(
            "Not found in saved list",
            code="NOT_SAVED",
            details={"user_id": user_id, "item_id": item_id},
        )
