"""
User module data models.

These models define the data structures used by the credential store
and exposed to other modules through the interface.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field

from shared.models import ApiModel, UserRole


class User(BaseModel):
    """
    A stored user record.

    Carries the password hash, so it must never be returned to clients.
    Use UserPublic for responses.
    """

    id: str = Field(..., description="User ID (UUID)")
    email: str = Field(..., description="Trimmed email, unique")
    password_hash: str = Field(..., description="argon2 hash")
    name: str = Field(..., description="Display name")
    phone: str = Field(default="", description="Phone number, empty when not given")
    role: UserRole = Field(default=UserRole.STANDARD)
    created_at: datetime


class UserPublic(ApiModel):
    """User record as shown to admins."""

    id: str
    email: str
    name: str
    phone: str = ""
    role: UserRole
    created_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "UserPublic":
        return cls(
            id=user.id,
            email=user.email,
            name=user.name,
            phone=user.phone,
            role=user.role,
            created_at=user.created_at,
        )


class RegisterRequest(ApiModel):
    """Registration payload. Field rules live in shared.validation."""

    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None
    phone: Optional[str] = None


class LoginRequest(ApiModel):
    email: Optional[str] = None
    password: Optional[str] = None


class ProfileUpdateRequest(ApiModel):
    """Self-service profile update. Omitted fields are left unchanged."""

    name: Optional[str] = None
    phone: Optional[str] = None
    password: Optional[str] = None


class StatusUser(ApiModel):
    email: str
    role: UserRole
    name: str
    phone: str = ""


class AuthStatusResponse(ApiModel):
    is_authenticated: bool
    user: Optional[StatusUser] = None


class ProfileResponse(ApiModel):
    message: str
    user: UserPublic
