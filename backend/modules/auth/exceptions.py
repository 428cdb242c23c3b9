"""
Authentication module exceptions.

These exceptions are raised by the session gate and the policy helpers and
are rendered by the API error handlers as 401/403 responses.
"""

from typing import Optional

from shared.exceptions import AuthenticationError, AuthorizationError


class NotAuthenticatedError(AuthenticationError):
    """Raised when a protected operation runs without a valid session."""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message, code="NOT_AUTHENTICATED")


class InsufficientPermissionsError(AuthorizationError):
    """Raised when the session's role is not allowed to run an operation."""

    def __init__(self, required_role: str, user_role: Optional[str]):
        super().__init__(
            "Access denied. Admin privileges required.",
            code="INSUFFICIENT_PERMISSIONS",
            details={"required_role": required_role, "user_role": user_role},
        )
