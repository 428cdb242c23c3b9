"""
User module interface.

The auth routes and the admin routes depend on IUserService only.
"""

from typing import Protocol, Optional, runtime_checkable

from shared.models import Identity

from .models import (
    AuthStatusResponse,
    LoginRequest,
    ProfileUpdateRequest,
    RegisterRequest,
    User,
    UserPublic,
)


@runtime_checkable
class IUserService(Protocol):
    """
    Interface for credential store operations.
    """

    async def register(self, request: RegisterRequest) -> User:
        """
        Create a standard user.

        Raises:
            ValidationError: If a field is invalid or the email is taken
        """
        ...

    async def authenticate(self, request: LoginRequest) -> User:
        """
        Check an email/password pair.

        Raises:
            ValidationError: If email or password is missing or malformed
            InvalidCredentialsError: If no user matches
        """
        ...

    async def get_status(self, identity: Optional[Identity]) -> AuthStatusResponse:
        """Describe the session's user without exposing the password hash."""
        ...

    async def update_profile(
        self,
        identity: Optional[Identity],
        request: ProfileUpdateRequest,
    ) -> UserPublic:
        """Update the requester's own name, phone or password."""
        ...

    async def list_users(self, identity: Optional[Identity]) -> list[UserPublic]:
        """List all users. Privileged only."""
        ...

    async def delete_user(self, user_id: str, identity: Optional[Identity]) -> None:
        """
        Delete a user and revoke their sessions. Privileged only.

        Raises:
            InvalidIdentifierError: If user_id is malformed
            UserNotFoundError: If no such user exists
        """
        ...
