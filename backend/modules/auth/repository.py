"""
Session repository for database access.

Encapsulates all Supabase queries and data mapping for the sessions table.
Rows are keyed by the token digest, never by the raw token.
"""

from datetime import datetime
from typing import Optional, Any

from shared.models import UserRole
from shared.repository import BaseRepository
from .models import Session


class SessionRepository(BaseRepository[Session]):
    """Repository for server-side session records."""

    TABLE = "sessions"

    def create(
        self,
        token_hash: str,
        user_id: str,
        role: UserRole,
        created_at: datetime,
        expires_at: datetime,
    ) -> Session:
        data = {
            "token_hash": token_hash,
            "user_id": user_id,
            "role": role.value,
            "created_at": created_at.isoformat(),
            "expires_at": expires_at.isoformat(),
        }
        result = self._db.table(self.TABLE).insert(data).execute()
        return self._map_to_session(result.data[0])

    def get(self, token_hash: str) -> Optional[Session]:
        result = self._db.table(self.TABLE).select("*").eq("token_hash", token_hash).execute()
        if not result.data:
            return None
        return self._map_to_session(result.data[0])

    def delete(self, token_hash: str) -> None:
        self._db.table(self.TABLE).delete().eq("token_hash", token_hash).execute()

    def delete_for_user(self, user_id: str) -> int:
        """
        Delete every session of a user.

        Returns:
            Number of sessions removed.
        """
        result = self._db.table(self.TABLE).delete().eq("user_id", user_id).execute()
        return len(result.data or [])

    def _map_to_session(self, data: dict[str, Any]) -> Session:
        """Map database row to Session model."""
        return Session(
            token_hash=data["token_hash"],
            user_id=str(data["user_id"]),
            role=UserRole(data["role"]),
            created_at=data["created_at"],
            expires_at=data["expires_at"],
        )
