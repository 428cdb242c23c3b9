"""
User module exceptions.
"""

from shared.exceptions import (
    AuthenticationError,
    NotFoundError,
    ValidationError,
)


class EmailAlreadyRegisteredError(ValidationError):
    """Raised when registering with an email that is already taken."""

    def __init__(self, email: str):
        super().__init__(
            "Validation failed",
            field_errors={"email": "This email is already registered"},
            code="EMAIL_TAKEN",
            details={"email": email},
        )


class InvalidCredentialsError(AuthenticationError):
    """Raised when the email/password pair does not match a user."""

    def __init__(self):
        super().__init__("Invalid credentials", code="INVALID_CREDENTIALS")


class UserNotFoundError(NotFoundError):
    """Raised when a user record does not exist."""

    def __init__(self, user_id: str):
        super().__init__(
            "User not found",
            code="USER_NOT_FOUND",
            details={"user_id": user_id},
        )


class NothingToUpdateError(ValidationError):
    """Raised when a profile update carries no fields."""

    def __init__(self):
        super().__init__("No fields to update", code="NOTHING_TO_UPDATE")
