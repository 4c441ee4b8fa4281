"""Tests for shared/repository.py."""

from datetime import datetime, timezone
from typing import Optional
from unittest.mock import MagicMock

from shared.repository import BaseRepository, UNIQUE_VIOLATION


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
            {"id": 1, "email": "a@example.com"}
        ]

        class TestRepository(BaseRepository[dict]):
            def get_first(self) -> Optional[dict]:
                result = self._db.table("users").select("*").execute()
                return result.data[0] if result.data else None

        repo = TestRepository(mock_db)

        assert repo.get_first() == {"id": 1, "email": "a@example.com"}
        mock_db.table.assert_called_once_with("users")

    def test_unique_violation_code(self):
        assert UNIQUE_VIOLATION == "23505"


class TestParseDatetime:
    def test_parses_zulu_timestamp(self):
        parsed = BaseRepository._parse_datetime("2024-05-01T10:00:00Z")
        assert parsed == datetime(2024, 5, 1, 10, 0, tzinfo=timezone.utc)

    def test_parses_offset_timestamp(self):
        parsed = BaseRepository._parse_datetime("2024-05-01T10:00:00.123456+00:00")
        assert parsed.microsecond == 123456

    def test_passes_through_non_strings(self):
        now = datetime.now(timezone.utc)
        assert BaseRepository._parse_datetime(now) is now
        assert BaseRepository._parse_datetime(None) is None
