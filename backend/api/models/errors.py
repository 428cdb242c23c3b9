"""
Error response models.

Standardized error responses for the API, used to document route responses.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Optional


class ErrorResponse(BaseModel):
    """Standard error response format."""

    error: str


class ValidationErrorResponse(BaseModel):
    """Validation error response format."""

    model_config = ConfigDict(populate_by_name=True)

    error: str = "Validation failed"
    field_errors: Optional[dict[str, str]] = Field(None, alias="fieldErrors")


class ConflictErrorResponse(BaseModel):
    """Duplicate rating response format."""

    model_config = ConfigDict(populate_by_name=True)

    error: str
    existing_id: Optional[str] = Field(None, alias="existingId")


# Route-level `responses=` presets
AUTH_RESPONSES = {401: {"model": ErrorResponse}}
ADMIN_RESPONSES = {403: {"model": ErrorResponse}}
VALIDATION_RESPONSES = {400: {"model": ValidationErrorResponse}}
NOT_FOUND_RESPONSES = {404: {"model": ErrorResponse}}
