"""
Authentication module data models.
"""

from datetime import datetime
from pydantic import BaseModel, Field

from shared.models import UserRole


class Session(BaseModel):
    """
    A server-side session record.

    Only the SHA-256 digest of the token is stored. The role is a snapshot
    taken at login and is not refreshed when the user's role changes.
    """

    token_hash: str = Field(..., description="SHA-256 hex digest of the session token")
    user_id: str = Field(..., description="Owning user ID")
    role: UserRole = Field(..., description="Role at login time")
    created_at: datetime
    expires_at: datetime

    def is_expired(self, now: datetime) -> bool:
        return now >= self.expires_at
