"""
Authentication module interface.

Other modules should depend on ISessionService, not the concrete implementation.
This enables testing with fakes and keeps the session store swappable.
"""

from typing import Protocol, Optional, runtime_checkable

from shared.models import Identity, UserRole


@runtime_checkable
class ISessionService(Protocol):
    """
    Interface for session operations.

    Sessions move an anonymous request to Authenticated(role) and back.
    The role is fixed for the lifetime of a session.
    """

    async def create_session(self, user_id: str, role: UserRole) -> str:
        """
        Issue a new session.

        Args:
            user_id: ID of the user logging in
            role: The user's role, snapshotted into the session

        Returns:
            Opaque session token for the cookie
        """
        ...

    async def resolve_session(self, token: Optional[str]) -> Optional[Identity]:
        """
        Resolve a session token to an identity.

        Never raises. Missing, malformed, expired or destroyed tokens,
        and store failures, all yield None.
        """
        ...

    async def destroy_session(self, token: Optional[str]) -> None:
        """Destroy a session. Destroying an absent session is not an error."""
        ...

    async def revoke_user_sessions(self, user_id: str) -> None:
        """Destroy every session belonging to a user."""
        ...
