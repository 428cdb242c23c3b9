"""
Saved-list module data models.
"""

from datetime import datetime
from typing import Optional

from shared.models import ApiModel


class SavedListEntry(ApiModel):
    """Membership of one catalog item in one user's saved list."""

    user_id: str
    item_id: str
    added_at: datetime


class SavedListAddRequest(ApiModel):
    item_id: Optional[str] = None
