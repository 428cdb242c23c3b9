"""Tests for the session repository."""

from datetime import datetime, timedelta, timezone
from unittest.mock import MagicMock

from modules.auth.repository import SessionRepository
from shared.models import UserRole


def create_mock_session_data(user_id: str = "user-123", role: str = "user") -> dict:
    """Helper to create a sessions row."""
    now = datetime.now(timezone.utc)
    return {
        "token_hash": "f" * 64,
        "user_id": user_id,
        "role": role,
        "created_at": now.isoformat(),
        "expires_at": (now + timedelta(days=1)).isoformat(),
    }


class TestSessionRepository:
    def test_create_inserts_row(self):
        mock_db = MagicMock()
        mock_db.table.return_value.insert.return_value.execute.return_value.data = [
            create_mock_session_data()
        ]
        repo = SessionRepository(mock_db)
        now = datetime.now(timezone.utc)

        session = repo.create("f" * 64, "user-123", UserRole.STANDARD, now, now + timedelta(days=1))

        mock_db.table.assert_called_with("sessions")
        inserted = mock_db.table.return_value.insert.call_args[0][0]
        assert inserted["token_hash"] == "f" * 64
        assert inserted["role"] == "user"
        assert session.user_id == "user-123"
        assert session.role is UserRole.STANDARD

    def test_get_returns_none_when_missing(self):
        mock_db = MagicMock()
        mock_db.table.return_value.select.return_value.eq.return_value.execute.return_value.data = []
        repo = SessionRepository(mock_db)

        assert repo.get("missing") is None

    def test_get_maps_row(self):
        mock_db = MagicMock()
        mock_db.table.return_value.select.return_value.eq.return_value.execute.return_value.data = [
            create_mock_session_data(role="admin")
        ]
        repo = SessionRepository(mock_db)

        session = repo.get("f" * 64)

        mock_db.table.return_value.select.return_value.eq.assert_called_with("token_hash", "f" * 64)
        assert session.role is UserRole.PRIVILEGED

    def test_delete_for_user_counts_rows(self):
        mock_db = MagicMock()
        mock_db.table.return_value.delete.return_value.eq.return_value.execute.return_value.data = [
            create_mock_session_data(),
            create_mock_session_data(),
        ]
        repo = SessionRepository(mock_db)

        assert repo.delete_for_user("user-123") == 2
        mock_db.table.return_value.delete.return_value.eq.assert_called_with("user_id", "user-123")
