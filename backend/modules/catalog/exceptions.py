"""
Catalog module exceptions.
"""

from shared.exceptions import NotFoundError


class ItemNotFoundError(NotFoundError):
    """Raised when a catalog item does not exist."""

    def __init__(self, item_id: str):
        super().__init__(
            "Item not found",
            code="ITEM_NOT_FOUND",
            details={"item_id": item_id},
        )
