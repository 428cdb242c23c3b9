"""
Rating repository for database access.

Encapsulates all Supabase queries and data mapping for the ratings table.
The ratings_user_item_key unique constraint makes the insert itself the
one-rating-per-user-per-item check.
"""

from typing import Optional, Any

from postgrest.exceptions import APIError

from modules.catalog.exceptions import ItemNotFoundError
from shared.repository import BaseRepository
from .exceptions import DuplicateRatingError
from .models import Rating, RatingView, ReviewAuthor


# Embeds the author's email through the ratings.user_id foreign key
VIEW_COLUMNS = "*, users(email)"


class RatingRepository(BaseRepository[Rating]):
    """
    Repository for rating data access.

    Note: This repository does NOT perform ownership checks.
    The service layer is responsible for verifying authorship.
    """

    TABLE = "ratings"

    def create(self, data: dict[str, Any]) -> Rating:
        """
        Insert a rating.

        Args:
            data: Dictionary with user_id, item_id, score, comment.

        Raises:
            DuplicateRatingError: If the user already rated the item.
            ItemNotFoundError: If the item vanished before the insert.
        """
        try:
            result = self._db.table(self.TABLE).insert(data).execute()
        except APIError as e:
            if self._is_unique_violation(e):
                existing = self.get_for_user_item(data["user_id"], data["item_id"])
                raise DuplicateRatingError(
                    existing.id if existing else "",
                    data["user_id"],
                    data["item_id"],
                )
            if self._is_foreign_key_violation(e):
                raise ItemNotFoundError(data["item_id"])
            raise
        return self._map_to_rating(result.data[0])

    def get_by_id(self, rating_id: str) -> Optional[Rating]:
        result = self._db.table(self.TABLE).select("*").eq("id", rating_id).execute()
        if not result.data:
            return None
        return self._map_to_rating(result.data[0])

    def get_view(self, rating_id: str) -> Optional[RatingView]:
        """Get a rating with its author's email."""
        result = self._db.table(self.TABLE).select(VIEW_COLUMNS).eq("id", rating_id).execute()
        if not result.data:
            return None
        return self._map_to_view(result.data[0])

    def get_for_user_item(self, user_id: str, item_id: str) -> Optional[Rating]:
        result = (
            self._db.table(self.TABLE)
            .select("*")
            .eq("user_id", user_id)
            .eq("item_id", item_id)
            .execute()
        )
        if not result.data:
            return None
        return self._map_to_rating(result.data[0])

    def list_for_item(self, item_id: str) -> list[RatingView]:
        """All ratings of an item, newest first, with author emails."""
        result = (
            self._db.table(self.TABLE)
            .select(VIEW_COLUMNS)
            .eq("item_id", item_id)
            .order("created_at", desc=True)
            .execute()
        )
        return [self._map_to_view(row) for row in result.data]

    def update(self, rating_id: str, data: dict[str, Any]) -> Optional[Rating]:
        result = self._db.table(self.TABLE).update(data).eq("id", rating_id).execute()
        if not result.data:
            return None
        return self._map_to_rating(result.data[0])

    def delete(self, rating_id: str) -> bool:
        result = self._db.table(self.TABLE).delete().eq("id", rating_id).execute()
        return bool(result.data)

    # -------------------------------------------------------------------------
    # Private mapping methods
    # -------------------------------------------------------------------------

    def _map_to_rating(self, data: dict[str, Any]) -> Rating:
        """Map database row to Rating model."""
        return Rating(
            id=str(data["id"]),
            user_id=str(data["user_id"]),
            item_id=str(data["item_id"]),
            score=data["score"],
            comment=data.get("comment") or "",
            created_at=data["created_at"],
            updated_at=data["updated_at"],
        )

    def _map_to_view(self, data: dict[str, Any]) -> RatingView:
        """Map a row with an embedded users(email) object to RatingView."""
        rating = self._map_to_rating(data)
        author = data.get("users")
        return RatingView(
            **rating.model_dump(),
            user=ReviewAuthor(email=author.get("email")) if author else None,
        )
