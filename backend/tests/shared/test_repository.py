"""Tests for shared/repository.py."""

from unittest.mock import MagicMock

from postgrest.exceptions import APIError

from shared.repository import BaseRepository


class TestBaseRepository:
    """Tests for BaseRepository base class."""

    def test_init_stores_db_client(self):
        """Should store the database client in _db attribute."""
        mock_db = MagicMock()
        repo = BaseRepository(mock_db)
        assert repo._db is mock_db

    def test_subclass_can_access_db(self):
        """Subclass should be able to access _db and use it."""
        mock_db = MagicMock()
        mock_db.table.return_value.select.return_value.execute.return_value.data = [
            {"id": "123", "title": "Alien"}
        ]

        class TestRepository(BaseRepository[dict]):
            def get_all(self) -> list[dict]:
                result = self._db.table("catalog_items").select("*").execute()
                return result.data

        repo = TestRepository(mock_db)

        assert repo.get_all() == [{"id": "123", "title": "Alien"}]
        mock_db.table.assert_called_once_with("catalog_items")


class TestErrorClassification:
    def test_unique_violation(self):
        error = APIError({"code": "23505", "message": "duplicate key value"})
        assert BaseRepository._is_unique_violation(error) is True
        assert BaseRepository._is_foreign_key_violation(error) is False

    def test_foreign_key_violation(self):
        error = APIError({"code": "23503", "message": "violates foreign key constraint"})
        assert BaseRepository._is_foreign_key_violation(error) is True
        assert BaseRepository._is_unique_violation(error) is False

    def test_other_errors(self):
        error = APIError({"code": "42P01", "message": "relation does not exist"})
        assert BaseRepository._is_unique_violation(error) is False
        assert BaseRepository._is_foreign_key_violation(error) is False
