"""
Saved-list service implementation.
"""

import logging
from typing import Optional

from modules.auth.policy import ensure_authenticated
from modules.catalog.exceptions import ItemNotFoundError
from modules.catalog.interfaces import ICatalogService
from modules.catalog.models import CatalogItem
from shared.exceptions import ValidationError
from shared.models import Identity
from shared.validation import parse_identifier

from .exceptions import NotSavedError
from .interfaces import ISavedListService
from .models import SavedListAddRequest, SavedListEntry
from .repository import SavedListRepository

logger = logging.getLogger(__name__)


class SavedListService(ISavedListService):
    """Per-user saved list backed by SavedListRepository."""

    def __init__(self, repository: SavedListRepository, catalog: ICatalogService):
        self._repository = repository
        self._catalog = catalog

    async def add(
        self,
        identity: Optional[Identity],
        request: SavedListAddRequest,
    ) -> SavedListEntry:
        identity = ensure_authenticated(identity)
        if not request.item_id:
            raise ValidationError("Item ID required", field_errors={"itemId": "Item ID is required"})

        item_id = parse_identifier(request.item_id, "Invalid item ID format")
        if not await self._catalog.item_exists(item_id):
            raise ItemNotFoundError(item_id)

        entry = self._repository.add(identity.user_id, item_id)
        logger.info("User %s saved item %s", identity.user_id, item_id)
        return entry

    async def remove(self, identity: Optional[Identity], item_id: str) -> None:
        identity = ensure_authenticated(identity)
        item_id = parse_identifier(item_id, "Invalid item ID format")
        if not self._repository.remove(identity.user_id, item_id):
            raise NotSavedError(identity.user_id, item_id)

    async def list_items(self, identity: Optional[Identity]) -> list[CatalogItem]:
        identity = ensure_authenticated(identity)
        entries = self._repository.list_for_user(identity.user_id)
        if not entries:
            return []

        items = await self._catalog.get_items([entry.item_id for entry in entries])
        by_id = {item.id: item for item in items}
        # Keep the order the user saved them in; drop items that no longer exist.
        return [by_id[entry.item_id] for entry in entries if entry.item_id in by_id]
