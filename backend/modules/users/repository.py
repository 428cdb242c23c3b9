"""
User repository for database access.

Encapsulates all Supabase queries and data mapping for the users table.
Email uniqueness is enforced by the users_email_key constraint; the insert
is the uniqueness check.
"""

from typing import Optional, Any

from postgrest.exceptions import APIError

from shared.models import UserRole
from shared.repository import BaseRepository
from .exceptions import EmailAlreadyRegisteredError
from .models import User


class UserRepository(BaseRepository[User]):
    """
    Repository for user data access.

    Note: This repository does NOT perform authorization checks.
    The service layer is responsible for verifying roles.
    """

    TABLE = "users"

    def create(self, data: dict[str, Any]) -> User:
        """
        Insert a new user.

        Args:
            data: Dictionary with email, password_hash, name, phone, role.

        Returns:
            Created User with generated ID and timestamps.

        Raises:
            EmailAlreadyRegisteredError: If the email is already in use.
        """
        try:
            result = self._db.table(self.TABLE).insert(data).execute()
        except APIError as e:
            if self._is_unique_violation(e):
                raise EmailAlreadyRegisteredError(data.get("email", ""))
            raise
        return self._map_to_user(result.data[0])

    def get_by_id(self, user_id: str) -> Optional[User]:
        result = self._db.table(self.TABLE).select("*").eq("id", user_id).execute()
        if not result.data:
            return None
        return self._map_to_user(result.data[0])

    def get_by_email(self, email: str) -> Optional[User]:
        result = self._db.table(self.TABLE).select("*").eq("email", email).execute()
        if not result.data:
            return None
        return self._map_to_user(result.data[0])

    def list_all(self) -> list[User]:
        result = self._db.table(self.TABLE).select("*").order("created_at").execute()
        return [self._map_to_user(row) for row in result.data]

    def update(self, user_id: str, data: dict[str, Any]) -> Optional[User]:
        """
        Update a user's fields.

        Returns:
            The updated User, or None if no row matched.
        """
        result = self._db.table(self.TABLE).update(data).eq("id", user_id).execute()
        if not result.data:
            return None
        return self._map_to_user(result.data[0])

    def delete(self, user_id: str) -> bool:
        """
        Delete a user.

        Returns:
            True if a row was deleted.

        Note: sessions, ratings and saved-list entries are deleted via CASCADE.
        """
        result = self._db.table(self.TABLE).delete().eq("id", user_id).execute()
        return bool(result.data)

    def _map_to_user(self, data: dict[str, Any]) -> User:
        """Map database row to User model."""
        return User(
            id=str(data["id"]),
            email=data["email"],
            password_hash=data["password_hash"],
            name=data.get("name") or "",
            phone=data.get("phone") or "",
            role=UserRole(data.get("role") or UserRole.STANDARD.value),
            created_at=data["created_at"],
        )
