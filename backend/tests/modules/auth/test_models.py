from datetime import datetime, timedelta, timezone

from modules.auth.models import Session
from shared.models import UserRole


def make_session(expires_in: timedelta) -> Session:
    now = datetime.now(timezone.utc)
    return Session(
        token_hash="a" * 64,
        user_id="user-123",
        role=UserRole.STANDARD,
        created_at=now,
        expires_at=now + expires_in,
    )


class TestSession:
    def test_not_expired_before_deadline(self):
        session = make_session(timedelta(hours=1))
        assert not session.is_expired(datetime.now(timezone.utc))

    def test_expired_at_deadline(self):
        session = make_session(timedelta(hours=1))
        assert session.is_expired(session.expires_at)

    def test_role_parsed_from_stored_value(self):
        now = datetime.now(timezone.utc)
        session = Session(
            token_hash="b" * 64,
            user_id="user-123",
            role="admin",
            created_at=now,
            expires_at=now,
        )
        assert session.role is UserRole.PRIVILEGED
