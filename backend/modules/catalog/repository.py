"""
Catalog repository for database access.

Encapsulates all Supabase queries and data mapping for the catalog_items table.
"""

from typing import Optional, Any

from shared.repository import BaseRepository
from .models import CatalogItem


def escape_like(value: str) -> str:
    """
    Escape LIKE metacharacters so user input matches literally.

    PostgREST rewrites every `*` to `%` and has no escape for it, so `*`
    becomes the single-character wildcard `_`. Callers must re-check
    matches when the input contains `*`.
    """
    escaped = value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return escaped.replace("*", "_")


class CatalogRepository(BaseRepository[CatalogItem]):
    """
    Repository for catalog data access.

    Note: This repository does NOT perform authorization checks or
    redaction. The service layer is responsible for both.
    """

    TABLE = "catalog_items"

    def list_items(
        self,
        genre: Optional[str] = None,
        year: Optional[int] = None,
        title: Optional[str] = None,
        sort_column: str = "title",
        descending: bool = False,
    ) -> list[CatalogItem]:
        """
        List items matching all given filters.

        Args:
            genre: Exact genre match.
            year: Exact year match.
            title: Case-insensitive substring of the title.
            sort_column: Column to order by.
            descending: Sort direction.
        """
        query = self._db.table(self.TABLE).select("*")
        if genre:
            query = query.eq("genre", genre)
        if year is not None:
            query = query.eq("year", year)
        if title:
            query = query.ilike("title", f"%{escape_like(title)}%")

        result = query.order(sort_column, desc=descending).execute()
        items = [self._map_to_item(row) for row in result.data]
        if title and "*" in title:
            needle = title.lower()
            items = [item for item in items if needle in item.title.lower()]
        return items

    def get_by_id(self, item_id: str) -> Optional[CatalogItem]:
        result = self._db.table(self.TABLE).select("*").eq("id", item_id).execute()
        if not result.data:
            return None
        return self._map_to_item(result.data[0])

    def get_many(self, item_ids: list[str]) -> list[CatalogItem]:
        """Batch lookup. Missing IDs are simply absent from the result."""
        if not item_ids:
            return []
        result = self._db.table(self.TABLE).select("*").in_("id", item_ids).execute()
        return [self._map_to_item(row) for row in result.data]

    def create(self, data: dict[str, Any]) -> CatalogItem:
        result = self._db.table(self.TABLE).insert(data).execute()
        return self._map_to_item(result.data[0])

    def update(self, item_id: str, data: dict[str, Any]) -> Optional[CatalogItem]:
        """
        Update an item.

        Returns:
            The updated item, or None if no row matched.
        """
        result = self._db.table(self.TABLE).update(data).eq("id", item_id).execute()
        if not result.data:
            return None
        return self._map_to_item(result.data[0])

    def delete(self, item_id: str) -> bool:
        """
        Delete an item.

        Returns:
            True if a row was deleted.

        Note: ratings and saved-list entries are deleted via CASCADE.
        """
        result = self._db.table(self.TABLE).delete().eq("id", item_id).execute()
        return bool(result.data)

    def _map_to_item(self, data: dict[str, Any]) -> CatalogItem:
        """Map database row to CatalogItem model."""
        rating = data.get("rating")
        return CatalogItem(
            id=str(data["id"]),
            title=data["title"],
            genre=data["genre"],
            year=data["year"],
            rating=float(rating) if rating is not None else None,
            director=data.get("director"),
            description=data.get("description"),
            poster_url=data.get("poster_url"),
            trailer_url=data.get("trailer_url"),
            movie_link=data.get("movie_link"),
            created_at=data["created_at"],
            updated_at=data.get("updated_at"),
        )
