"""
User repository for the credential store.

Encapsulates all Supabase queries against the ``users`` table.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Optional

from postgrest.exceptions import APIError

from shared.models import UserRole
from shared.repository import BaseRepository, UNIQUE_VIOLATION

from .exceptions import DuplicateEmailError
from .models import UserRecord

logger = logging.getLogger(__name__)

USERS_TABLE = "users"


class UserRepository(BaseRepository[UserRecord]):
    """
    Repository for user records.

    Note: This repository does NOT perform authorization checks.
    The caller decides who may create users or change roles.
    """

    def get_by_email(self, email: str) -> Optional[UserRecord]:
        """Return the user with this email, or None."""
        result = self._db.table(USERS_TABLE).select("*").eq("email", email).execute()
        if not result.data:
            return None
        return self._map_to_user(result.data[0])

    def create(self, email: str, password_hash: str, role: UserRole) -> UserRecord:
        """
        Insert a new user.

        Raises:
            DuplicateEmailError: If the unique email constraint is violated
        """
        data = {
            "email": email,
            "password_hash": password_hash,
            "role": UserRole(role).value,
        }
        try:
            result = self._db.table(USERS_TABLE).insert(data).execute()
        except APIError as e:
            if e.code == UNIQUE_VIOLATION:
                raise DuplicateEmailError(email)
            raise
        return self._map_to_user(result.data[0])

    def update_role(self, user_id: int, role: UserRole) -> Optional[UserRecord]:
        """Change a user's role. Returns None if no such user exists."""
        result = (
            self._db.table(USERS_TABLE)
            .update({
                "role": UserRole(role).value,
                "updated_at": datetime.now(timezone.utc).isoformat(),
            })
            .eq("id", user_id)
            .execute()
        )
        if not result.data:
            return None
        logger.info(f"Changed role of user {user_id} to {UserRole(role).value}")
        return self._map_to_user(result.data[0])

    def _map_to_user(self, row: dict[str, Any]) -> UserRecord:
        return UserRecord(
            id=row["id"],
            email=row["email"],
            password_hash=row["password_hash"],
            role=UserRole(row["role"]),
            created_at=self._parse_datetime(row.get("created_at")),
            updated_at=self._parse_datetime(row.get("updated_at")),
        )
