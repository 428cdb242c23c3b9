"""
Session service implementation.

Issues opaque tokens, stores their digests server-side and resolves them
back to a request identity.
"""

import hashlib
import logging
import re
import secrets
from datetime import datetime, timedelta, timezone
from typing import Optional

import httpx
from postgrest.exceptions import APIError

from shared.models import Identity, UserRole

from .interfaces import ISessionService
from .repository import SessionRepository

logger = logging.getLogger(__name__)

TOKEN_BYTES = 32
TOKEN_PATTERN = re.compile(r"^[A-Za-z0-9_-]{20,128}$")


def hash_token(token: str) -> str:
    """Digest used as the storage key for a session token."""
    return hashlib.sha256(token.encode("utf-8")).hexdigest()


class SessionService(ISessionService):
    """
    Server-side session authority.

    The cookie carries only the random token. Everything else lives in the
    sessions table, so destroying the row logs the client out immediately.
    """

    def __init__(self, repository: SessionRepository, ttl_seconds: int):
        self._repository = repository
        self._ttl = timedelta(seconds=ttl_seconds)

    async def create_session(self, user_id: str, role: UserRole) -> str:
        token = secrets.token_urlsafe(TOKEN_BYTES)
        now = datetime.now(timezone.utc)
        self._repository.create(
            token_hash=hash_token(token),
            user_id=user_id,
            role=role,
            created_at=now,
            expires_at=now + self._ttl,
        )
        logger.info("Session created for user %s", user_id)
        return token

    async def resolve_session(self, token: Optional[str]) -> Optional[Identity]:
        if not token or not TOKEN_PATTERN.match(token):
            return None

        token_hash = hash_token(token)
        try:
            session = self._repository.get(token_hash)
            if session is None:
                return None
            if session.is_expired(datetime.now(timezone.utc)):
                self._repository.delete(token_hash)
                logger.info("Expired session removed for user %s", session.user_id)
                return None
        except (APIError, httpx.HTTPError):
            logger.exception("Session lookup failed; treating request as unauthenticated")
            return None

        return Identity(user_id=session.user_id, role=session.role)

    async def destroy_session(self, token: Optional[str]) -> None:
        if not token or not TOKEN_PATTERN.match(token):
            return
        self._repository.delete(hash_token(token))
        logger.info("Session destroyed")

    async def revoke_user_sessions(self, user_id: str) -> None:
        removed = self._repository.delete_for_user(user_id)
        logger.info("Revoked %d session(s) for user %s", removed, user_id)
