"""
Shared infrastructure for the movie library backend.

This package contains cross-cutting concerns that are used by multiple modules:
- config: Centralized settings management
- database: Supabase client factory
- exceptions: Base exception classes
- models: Request identity and wire-format base model
- validation: Field rules shared by all services

Note: Business logic should NOT go here. This is for infrastructure only.
"""

from .config import Settings, get_settings
from .database import get_supabase_client, reset_client_cache
from .exceptions import (
    LibraryError,
    NotFoundError,
    ValidationError,
    InvalidIdentifierError,
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    InternalError,
)
from .models import ApiModel, Identity, MessageResponse, UserRole

__all__ = [
    "Settings",
    "get_settings",
    "get_supabase_client",
    "reset_client_cache",
    "LibraryError",
    "NotFoundError",
    "ValidationError",
    "InvalidIdentifierError",
    "AuthenticationError",
    "AuthorizationError",
    "ConflictError",
    "InternalError",
    "ApiModel",
    "Identity",
    "MessageResponse",
    "UserRole",
]
