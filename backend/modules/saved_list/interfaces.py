"""
Saved-list module interface.
"""

from typing import Protocol, Optional, runtime_checkable

from modules.catalog.models import CatalogItem
from shared.models import Identity

from .models import SavedListAddRequest, SavedListEntry


@runtime_checkable
class ISavedListService(Protocol):
    """
    Interface for a user's personal saved list.
    """

    async def add(
        self,
        identity: Optional[Identity],
        request: SavedListAddRequest,
    ) -> SavedListEntry:
        """
        Add an item to the requester's list.

        Raises:
            ValidationError: If the item ID is missing or malformed
            ItemNotFoundError: If the item does not exist
            AlreadySavedError: If the item is already in the list
        """
        ...

    async def remove(self, identity: Optional[Identity], item_id: str) -> None:
        """
        Remove an item from the requester's list.

        Raises:
            NotSavedError: If the item was not in the list
        """
        ...

    async def list_items(self, identity: Optional[Identity]) -> list[CatalogItem]:
        """Items in the requester's list; entries whose item is gone are dropped."""
        ...
