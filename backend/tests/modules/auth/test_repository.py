"""Tests for the user repository."""

import pytest
from unittest.mock import MagicMock
from postgrest.exceptions import APIError

from modules.auth.exceptions import DuplicateEmailError
from modules.auth.repository import UserRepository
from shared.models import UserRole


def create_mock_user_row(
    user_id: int = 1,
    email: str = "a@example.com",
    role: str = "VIEWER",
) -> dict:
    """Helper to create a users row as PostgREST returns it."""
    return {
        "id": user_id,
        "email": email,
        "password_hash": "$2b$10$hash",
        "role": role,
        "created_at": "2024-05-01T10:00:00+00:00",
        "updated_at": "2024-05-01T10:00:00+00:00",
    }


@pytest.fixture
def mock_db():
    return MagicMock()


@pytest.fixture
def repo(mock_db):
    return UserRepository(mock_db)


class TestGetByEmail:
    def test_found(self, repo, mock_db):
        mock_db.table.return_value.select.return_value.eq.return_value.execute.return_value.data = [
            create_mock_user_row(role="ADMIN")
        ]

        user = repo.get_by_email("a@example.com")

        mock_db.table.assert_called_with("users")
        mock_db.table.return_value.select.return_value.eq.assert_called_with(
            "email", "a@example.com"
        )
        assert user.id == 1
        assert user.role is UserRole.ADMIN
        assert user.created_at.year == 2024

    def test_not_found(self, repo, mock_db):
        mock_db.table.return_value.select.return_value.eq.return_value.execute.return_value.data = []
        assert repo.get_by_email("missing@example.com") is None


class TestCreate:
    def test_inserts_row(self, repo, mock_db):
        mock_db.table.return_value.insert.return_value.execute.return_value.data = [
            create_mock_user_row(role="EDITOR")
        ]

        user = repo.create("a@example.com", "$2b$10$hash", UserRole.EDITOR)

        mock_db.table.return_value.insert.assert_called_once_with({
            "email": "a@example.com",
            "password_hash": "$2b$10$hash",
            "role": "EDITOR",
        })
        assert user.role is UserRole.EDITOR

    def test_unique_violation_becomes_duplicate_email(self, repo, mock_db):
        mock_db.table.return_value.insert.return_value.execute.side_effect = APIError(
            {"message": "duplicate key value", "code": "23505"}
        )
        with pytest.raises(DuplicateEmailError):
            repo.create("a@example.com", "hash", UserRole.VIEWER)

    def test_other_errors_propagate(self, repo, mock_db):
        mock_db.table.return_value.insert.return_value.execute.side_effect = APIError(
            {"message": "permission denied", "code": "42501"}
        )
        with pytest.raises(APIError):
            repo.create("a@example.com", "hash", UserRole.VIEWER)


class TestUpdateRole:
    def test_updates(self, repo, mock_db):
        chain = mock_db.table.return_value.update.return_value.eq.return_value
        chain.execute.return_value.data = [create_mock_user_row(role="ADMIN")]

        user = repo.update_role(1, UserRole.ADMIN)

        update_arg = mock_db.table.return_value.update.call_args[0][0]
        assert update_arg["role"] == "ADMIN"
        assert "updated_at" in update_arg
        assert user.role is UserRole.ADMIN

    def test_missing_user(self, repo, mock_db):
        chain = mock_db.table.return_value.update.return_value.eq.return_value
        chain.execute.return_value.data = []
        assert repo.update_role(99, UserRole.ADMIN) is None
