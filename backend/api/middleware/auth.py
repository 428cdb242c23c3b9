"""
Session authentication middleware.

Resolves the session cookie into a request-scoped Identity and provides the
access gate dependencies used in front of protected routes.
"""

from typing import Optional
from fastapi import Depends, Request, Response

from modules.auth.interfaces import ISessionService
from modules.auth.policy import ensure_authenticated, ensure_privileged
from shared.config import get_settings
from shared.models import Identity

from ..dependencies import get_session_service


def get_session_token(request: Request) -> Optional[str]:
    """Read the raw session token from the cookie, if any."""
    return request.cookies.get(get_settings().session_cookie_name)


def set_session_cookie(response: Response, token: str) -> None:
    """Attach the session token as an HTTP-only cookie."""
    settings = get_settings()
    response.set_cookie(
        key=settings.session_cookie_name,
        value=token,
        max_age=settings.session_ttl_seconds,
        httponly=True,
        secure=settings.session_cookie_secure,
        samesite="lax",
    )


def clear_session_cookie(response: Response) -> None:
    settings = get_settings()
    response.delete_cookie(
        key=settings.session_cookie_name,
        httponly=True,
        secure=settings.session_cookie_secure,
        samesite="lax",
    )


async def get_optional_identity(
    token: Optional[str] = Depends(get_session_token),
    sessions: ISessionService = Depends(get_session_service),
) -> Optional[Identity]:
    """
    Dependency that optionally resolves the caller's identity.

    Use this for endpoints that work with or without a session, such as
    catalog reads where anonymous viewers get redacted items.

    Usage:
        @router.get("/public")
        async def public_route(identity: Optional[Identity] = Depends(get_optional_identity)):
            ...
    """
    return await sessions.resolve_session(token)


async def require_authenticated(
    identity: Optional[Identity] = Depends(get_optional_identity),
) -> Identity:
    """
    Dependency that requires a valid session.

    Short-circuits with 401 before the handler runs.

    Usage:
        @router.get("/protected")
        async def protected_route(identity: Identity = Depends(require_authenticated)):
            return {"user_id": identity.user_id}
    """
    return ensure_authenticated(identity)


async def require_privileged(
    identity: Optional[Identity] = Depends(get_optional_identity),
) -> Identity:
    """
    Dependency that requires the privileged role.

    Short-circuits with 403, including when there is no session at all.
    """
    return ensure_privileged(identity)


# Type aliases for cleaner route definitions
RequireAuth = Depends(require_authenticated)
RequireAdmin = Depends(require_privileged)
OptionalAuth = Depends(get_optional_identity)
