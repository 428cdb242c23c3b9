"""
Shared data models used across modules.

These models are shared infrastructure, not business logic.
Module-specific models should stay in their respective module directories.
"""

from enum import Enum
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    """
    Base for models exchanged over HTTP.

    Fields are snake_case in Python and camelCase on the wire. Both spellings
    are accepted on input.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class UserRole(str, Enum):
    """Closed set of user roles. Values match what is stored in the users table."""

    STANDARD = "user"
    PRIVILEGED = "admin"


class Identity(BaseModel):
    """
    Request-scoped identity resolved from a session.

    Handlers receive it from the access gate dependencies and pass it
    explicitly into every service call. The role is the snapshot taken when
    the session was created.
    """

    user_id: str = Field(..., description="User ID (UUID)")
    role: UserRole = Field(default=UserRole.STANDARD, description="Role at login time")

    model_config = {"frozen": True}  # Make immutable for safety


class MessageResponse(ApiModel):
    """Plain acknowledgement body."""

    message: str
