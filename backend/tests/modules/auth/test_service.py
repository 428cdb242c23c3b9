"""Tests for the session service."""

import pytest
from datetime import datetime, timedelta, timezone
from unittest.mock import MagicMock

import httpx
from postgrest.exceptions import APIError

from modules.auth.models import Session
from modules.auth.service import SessionService, hash_token
from shared.models import Identity, UserRole

from tests.fakes import FakeSessionRepository, InMemoryDatabase


@pytest.fixture
def db() -> InMemoryDatabase:
    return InMemoryDatabase()


@pytest.fixture
def service(db: InMemoryDatabase) -> SessionService:
    return SessionService(FakeSessionRepository(db), ttl_seconds=3600)


class TestSessionService:
    @pytest.mark.asyncio
    async def test_create_stores_only_digest(self, service, db):
        token = await service.create_session("user-123", UserRole.STANDARD)

        assert token not in db.sessions
        assert hash_token(token) in db.sessions
        stored = db.sessions[hash_token(token)]
        assert stored.user_id == "user-123"
        assert stored.expires_at - stored.created_at == timedelta(seconds=3600)

    @pytest.mark.asyncio
    async def test_tokens_are_unique(self, service):
        tokens = {await service.create_session("user-123", UserRole.STANDARD) for _ in range(5)}
        assert len(tokens) == 5

    @pytest.mark.asyncio
    async def test_resolve_round_trip(self, service):
        token = await service.create_session("user-123", UserRole.PRIVILEGED)

        identity = await service.resolve_session(token)

        assert identity == Identity(user_id="user-123", role=UserRole.PRIVILEGED)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("token", [None, "", "short", "has spaces in it but long enough", "x" * 200])
    async def test_resolve_rejects_malformed(self, service, token):
        assert await service.resolve_session(token) is None

    @pytest.mark.asyncio
    async def test_resolve_unknown_token(self, service):
        assert await service.resolve_session("A" * 43) is None

    @pytest.mark.asyncio
    async def test_resolve_expired_removes_record(self, service, db):
        token = "B" * 43
        past = datetime.now(timezone.utc) - timedelta(hours=2)
        db.sessions[hash_token(token)] = Session(
            token_hash=hash_token(token),
            user_id="user-123",
            role=UserRole.STANDARD,
            created_at=past,
            expires_at=past + timedelta(hours=1),
        )

        assert await service.resolve_session(token) is None
        assert hash_token(token) not in db.sessions

    @pytest.mark.asyncio
    async def test_destroy_then_resolve(self, service):
        token = await service.create_session("user-123", UserRole.STANDARD)

        await service.destroy_session(token)

        assert await service.resolve_session(token) is None

    @pytest.mark.asyncio
    async def test_destroy_without_token_is_noop(self, service):
        await service.destroy_session(None)

    @pytest.mark.asyncio
    async def test_revoke_user_sessions(self, service):
        first = await service.create_session("user-123", UserRole.STANDARD)
        second = await service.create_session("user-123", UserRole.STANDARD)
        other = await service.create_session("user-456", UserRole.STANDARD)

        await service.revoke_user_sessions("user-123")

        assert await service.resolve_session(first) is None
        assert await service.resolve_session(second) is None
        assert await service.resolve_session(other) is not None

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "error",
        [
            APIError({"code": "XX000", "message": "boom"}),
            httpx.ConnectError("connection refused"),
        ],
    )
    async def test_store_failure_treated_as_anonymous(self, error):
        repository = MagicMock()
        repository.get.side_effect = error
        service = SessionService(repository, ttl_seconds=60)

        assert await service.resolve_session("C" * 43) is None
