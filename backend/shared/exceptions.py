"""
Base exception classes for the movie library backend.

Each module should define its own exceptions that inherit from these bases.
The API layer maps every base class to an HTTP status through ``status_code``
and renders the client-facing body with ``to_dict()``.

``details`` are for logs only and never reach the client.
"""

from typing import Optional, Any


class LibraryError(Exception):
    """
    Base exception for all movie library errors.

    All custom exceptions should inherit from this class.
    """

    status_code: int = 500

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to the public error body for API responses."""
        return {"error": self.message}


class ValidationError(LibraryError):
    """Input validation failed."""

    status_code = 400

    def __init__(
        self,
        message: str = "Validation failed",
        field_errors: Optional[dict[str, str]] = None,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)
        self.field_errors = field_errors or {}

    def to_dict(self) -> dict[str, Any]:
        body = super().to_dict()
        if self.field_errors:
            body["fieldErrors"] = dict(self.field_errors)
        return body


class InvalidIdentifierError(ValidationError):
    """A path or body identifier is not a well-formed record id."""

    def __init__(self, message: str = "Invalid id format", value: Optional[str] = None):
        super().__init__(message, code="INVALID_ID", details={"value": value})


class NotFoundError(LibraryError):
    """Resource not found."""

    status_code = 404


class AuthenticationError(LibraryError):
    """Authentication failed (invalid or missing credentials)."""

    status_code = 401


class AuthorizationError(LibraryError):
    """Authorization failed (insufficient role or not the owner)."""

    status_code = 403


class ConflictError(LibraryError):
    """A uniqueness rule was violated."""

    status_code = 400


class InternalError(LibraryError):
    """Store unavailable or unexpected failure."""

    status_code = 500

    def __init__(
        self,
        message: str = "Internal server error",
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)

    def to_dict(self) -> dict[str, Any]:
        # Never leak the underlying cause.
        return {"error": "Internal server error"}
