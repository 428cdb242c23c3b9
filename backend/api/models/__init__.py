"""API models package."""

from .errors import (
    ErrorResponse,
    ValidationErrorResponse,
    ConflictErrorResponse,
    AUTH_RESPONSES,
    ADMIN_RESPONSES,
    VALIDATION_RESPONSES,
    NOT_FOUND_RESPONSES,
)

__all__ = [
    "ErrorResponse",
    "ValidationErrorResponse",
    "ConflictErrorResponse",
    "AUTH_RESPONSES",
    "ADMIN_RESPONSES",
    "VALIDATION_RESPONSES",
    "NOT_FOUND_RESPONSES",
]
