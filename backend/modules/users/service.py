"""
User service implementation.

Registration, credential checks, self-service profile updates and user
administration. All field rules come from shared.validation.
"""

import logging
from typing import Optional, Any

from modules.auth.interfaces import ISessionService
from modules.auth.policy import ensure_authenticated, ensure_privileged
from shared.models import Identity, UserRole
from shared.validation import (
    parse_identifier,
    raise_for_field_errors,
    validate_login,
    validate_profile_update,
    validate_registration,
)

from .exceptions import InvalidCredentialsError, NothingToUpdateError, UserNotFoundError
from .interfaces import IUserService
from .models import (
    AuthStatusResponse,
    LoginRequest,
    ProfileUpdateRequest,
    RegisterRequest,
    StatusUser,
    User,
    UserPublic,
)
from .passwords import hash_password, verify_password
from .repository import UserRepository

logger = logging.getLogger(__name__)


class UserService(IUserService):
    """
    Credential store backed by the users table.

    The role of a new user is always STANDARD. Promotion to PRIVILEGED is
    an administrative data edit and has no API.
    """

    def __init__(self, repository: UserRepository, sessions: ISessionService):
        self._repository = repository
        self._sessions = sessions

    async def register(self, request: RegisterRequest) -> User:
        raise_for_field_errors(
            validate_registration(request.name, request.email, request.password, request.phone)
        )

        data = {
            "name": request.name.strip(),
            "email": request.email.strip(),
            "phone": (request.phone or "").strip(),
            "password_hash": hash_password(request.password),
            "role": UserRole.STANDARD.value,
        }
        user = self._repository.create(data)
        logger.info("Registered user %s", user.id)
        return user

    async def authenticate(self, request: LoginRequest) -> User:
        raise_for_field_errors(validate_login(request.email, request.password))

        user = self._repository.get_by_email(request.email.strip())
        if user is None or not verify_password(request.password, user.password_hash):
            logger.info("Failed login attempt")
            raise InvalidCredentialsError()
        return user

    async def get_status(self, identity: Optional[Identity]) -> AuthStatusResponse:
        if identity is None:
            return AuthStatusResponse(is_authenticated=False)

        user = self._repository.get_by_id(identity.user_id)
        status_user = None
        if user is not None:
            status_user = StatusUser(
                email=user.email,
                role=user.role,
                name=user.name,
                phone=user.phone,
            )
        return AuthStatusResponse(is_authenticated=True, user=status_user)

    async def update_profile(
        self,
        identity: Optional[Identity],
        request: ProfileUpdateRequest,
    ) -> UserPublic:
        identity = ensure_authenticated(identity)

        # Blank values count as omitted.
        name = (request.name or "").strip()
        phone = (request.phone or "").strip()
        password = request.password if (request.password or "").strip() else None

        if not (name or phone or password):
            raise NothingToUpdateError()
        raise_for_field_errors(validate_profile_update(name, phone, password))

        data: dict[str, Any] = {}
        if name:
            data["name"] = name
        if phone:
            data["phone"] = phone
        if password:
            data["password_hash"] = hash_password(password)

        user = self._repository.update(identity.user_id, data)
        if user is None:
            raise UserNotFoundError(identity.user_id)
        return UserPublic.from_user(user)

    async def list_users(self, identity: Optional[Identity]) -> list[UserPublic]:
        ensure_privileged(identity)
        return [UserPublic.from_user(user) for user in self._repository.list_all()]

    async def delete_user(self, user_id: str, identity: Optional[Identity]) -> None:
        ensure_privileged(identity)
        user_id = parse_identifier(user_id, "Invalid user ID")

        if not self._repository.delete(user_id):
            raise UserNotFoundError(user_id)

        await self._sessions.revoke_user_sessions(user_id)
        logger.info("User %s deleted by admin %s", user_id, identity.user_id)
