"""
Catalog module interface.

The API layer and the ratings/saved-list modules depend on ICatalogService.
"""

from typing import Protocol, Optional, Any, runtime_checkable

from shared.models import Identity

from .models import CatalogItem, CatalogItemInput, CatalogListResponse, CatalogQuery


@runtime_checkable
class ICatalogService(Protocol):
    """
    Interface for catalog operations.

    Read operations take the viewer's identity (or None) to decide whether
    restricted fields are visible. Write operations require a privileged
    identity.
    """

    async def list_items(
        self,
        query: CatalogQuery,
        identity: Optional[Identity],
    ) -> CatalogListResponse:
        """
        List items with conjunctive filters, sort and projection.

        Raises:
            ValidationError: If sort_by names an unsortable field
        """
        ...

    async def get_item(self, item_id: str, identity: Optional[Identity]) -> dict[str, Any]:
        """
        Get one item, redacted for anonymous viewers.

        Raises:
            InvalidIdentifierError: If item_id is malformed
            ItemNotFoundError: If no such item exists
        """
        ...

    async def create_item(
        self,
        payload: CatalogItemInput,
        identity: Optional[Identity],
    ) -> CatalogItem:
        """
        Create an item.

        Raises:
            InsufficientPermissionsError: If identity is not privileged
            ValidationError: If title/genre/year are missing or out of range
        """
        ...

    async def update_item(
        self,
        item_id: str,
        payload: CatalogItemInput,
        identity: Optional[Identity],
    ) -> CatalogItem:
        """Replace an item's editable fields. Same rules as create_item."""
        ...

    async def delete_item(self, item_id: str, identity: Optional[Identity]) -> str:
        """Delete an item and return its ID."""
        ...

    async def item_exists(self, item_id: str) -> bool:
        """Whether an item with this (well-formed) ID exists."""
        ...

    async def get_items(self, item_ids: list[str]) -> list[CatalogItem]:
        """Batch lookup; missing IDs are dropped."""
        ...
