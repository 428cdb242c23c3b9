"""
Authentication module.

Server-side sessions and the access policy gate.

Public API:
- ISessionService: Interface for session operations
- Session: Stored session record
- Policy helpers: is_authenticated, is_privileged, ensure_authenticated, ensure_privileged
- Auth exceptions: NotAuthenticatedError, InsufficientPermissionsError
"""

from .interfaces import ISessionService
from .models import Session
from .policy import ensure_authenticated, ensure_privileged, is_authenticated, is_privileged
from .exceptions import NotAuthenticatedError, InsufficientPermissionsError

__all__ = [
    # Interface
    "ISessionService",
    # Models
    "Session",
    # Policy
    "is_authenticated",
    "is_privileged",
    "ensure_authenticated",
    "ensure_privileged",
    # Exceptions
    "NotAuthenticatedError",
    "InsufficientPermissionsError",
]
