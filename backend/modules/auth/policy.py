"""
Access policy predicates.

Route guards in api.middleware.auth apply these before a handler runs; the
services call the ensure_* variants again so the core stays authoritative
when invoked without the HTTP layer.
"""

from typing import Optional

from shared.models import Identity, UserRole

from .exceptions import InsufficientPermissionsError, NotAuthenticatedError


def is_authenticated(identity: Optional[Identity]) -> bool:
    return identity is not None


def is_privileged(identity: Optional[Identity]) -> bool:
    # An absent identity never equals privileged.
    return identity is not None and identity.role is UserRole.PRIVILEGED


def ensure_authenticated(identity: Optional[Identity]) -> Identity:
    if identity is None:
        raise NotAuthenticatedError()
    return identity


def ensure_privileged(identity: Optional[Identity]) -> Identity:
    if not is_privileged(identity):
        raise InsufficientPermissionsError(
            required_role=UserRole.PRIVILEGED.value,
            user_role=identity.role.value if identity else None,
        )
    return identity
