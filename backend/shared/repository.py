"""
Base repository class for database access.

Provides a common abstraction layer for all repositories, encapsulating
Supabase client access and providing shared utilities for data operations.
"""

from typing import TypeVar, Generic, Optional
from postgrest.exceptions import APIError
from supabase import Client


T = TypeVar("T")

# PostgreSQL error codes surfaced by PostgREST
UNIQUE_VIOLATION = "23505"
FOREIGN_KEY_VIOLATION = "23503"


class BaseRepository(Generic[T]):
    """
    Base class for all repositories.

    Provides common functionality for database operations:
    - Supabase client access via self._db
    - Generic type parameter for model type hints
    - Helpers to classify PostgREST errors

    Subclasses should implement domain-specific data access methods
    and handle dict-to-Pydantic model mapping internally.

    Example:
        class RatingRepository(BaseRepository[Rating]):
            def get_by_id(self, rating_id: str) -> Optional[Rating]:
                result = self._db.table("ratings").select("*").eq("id", rating_id).execute()
                if not result.data:
                    return None
                return self._map_to_rating(result.data[0])
    """

    def __init__(self, db: Client) -> None:
        """
        Initialize the repository with a Supabase client.

        Args:
            db: Supabase client instance for database operations.
        """
        self._db = db

    @staticmethod
    def _error_code(error: APIError) -> Optional[str]:
        """Return the PostgreSQL error code carried by a PostgREST error."""
        return getattr(error, "code", None)

    @classmethod
    def _is_unique_violation(cls, error: APIError) -> bool:
        return cls._error_code(error) == UNIQUE_VIOLATION

    @classmethod
    def _is_foreign_key_violation(cls, error: APIError) -> bool:
        return cls._error_code(error) == FOREIGN_KEY_VIOLATION
