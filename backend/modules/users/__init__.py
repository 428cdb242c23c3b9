"""
Users module.

The credential store: registration, login checks, profiles and user
administration.

Public API:
- IUserService: Interface for user operations
- User, UserPublic: Stored and public user records
- User exceptions: EmailAlreadyRegisteredError, InvalidCredentialsError, etc.
"""

from .interfaces import IUserService
from .models import (
    User,
    UserPublic,
    RegisterRequest,
    LoginRequest,
    ProfileUpdateRequest,
    AuthStatusResponse,
)
from .exceptions import (
    EmailAlreadyRegisteredError,
    InvalidCredentialsError,
    UserNotFoundError,
    NothingToUpdateError,
)

__all__ = [
    # Interface
    "IUserService",
    # Models
    "User",
    "UserPublic",
    "RegisterRequest",
    "LoginRequest",
    "ProfileUpdateRequest",
    "AuthStatusResponse",
    # Exceptions
    "EmailAlreadyRegisteredError",
    "InvalidCredentialsError",
    "UserNotFoundError",
    "NothingToUpdateError",
]
