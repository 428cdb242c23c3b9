"""
Saved-list module.

Per-user list of catalog items.

Public API:
- ISavedListService: Interface for saved-list operations
- SavedListEntry
- AlreadySavedError, NotSavedError
"""

from .interfaces import ISavedListService
from .models import SavedListEntry, SavedListAddRequest
from .exceptions import AlreadySavedError, NotSavedError

__all__ = [
    "ISavedListService",
    "SavedListEntry",
    "SavedListAddRequest",
    "AlreadySavedError",
    "NotSavedError",
]
