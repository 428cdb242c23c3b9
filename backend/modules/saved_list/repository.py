"""
Saved-list repository for database access.

Encapsulates all Supabase queries and data mapping for the
saved_list_entries table. The (user_id, item_id) primary key makes the
insert itself the duplicate check.
"""

from typing import Any

from postgrest.exceptions import APIError

from modules.catalog.exceptions import ItemNotFoundError
from shared.repository import BaseRepository
from .exceptions import AlreadySavedError
from .models import SavedListEntry


class SavedListRepository(BaseRepository[SavedListEntry]):
    """Repository for saved-list entries."""

    TABLE = "saved_list_entries"

    def add(self, user_id: str, item_id: str) -> SavedListEntry:
        """
        Insert an entry.

        Raises:
            AlreadySavedError: If the pair already exists.
            ItemNotFoundError: If the item vanished before the insert.
        """
        try:
            result = (
                self._db.table(self.TABLE)
                .insert({"user_id": user_id, "item_id": item_id})
                .execute()
            )
        except APIError as e:
            if self._is_unique_violation(e):
                raise AlreadySavedError(user_id, item_id)
            if self._is_foreign_key_violation(e):
                raise ItemNotFoundError(item_id)
            raise
        return self._map_to_entry(result.data[0])

    def remove(self, user_id: str, item_id: str) -> bool:
        """
        Delete an entry.

        Returns:
            True only if a row was actually removed.
        """
        result = (
            self._db.table(self.TABLE)
            .delete()
            .eq("user_id", user_id)
            .eq("item_id", item_id)
            .execute()
        )
        return bool(result.data)

    def list_for_user(self, user_id: str) -> list[SavedListEntry]:
        result = (
            self._db.table(self.TABLE)
            .select("*")
            .eq("user_id", user_id)
            .order("added_at")
            .execute()
        )
        return [self._map_to_entry(row) for row in result.data]

    def _map_to_entry(self, data: dict[str, Any]) -> SavedListEntry:
        """Map database row to SavedListEntry model."""
        return SavedListEntry(
            user_id=str(data["user_id"]),
            item_id=str(data["item_id"]),
            added_at=data["added_at"],
        )
