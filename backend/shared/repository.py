"""
Base repository class for database access.

Provides a common abstraction layer for all repositories, encapsulating
Supabase client access and providing shared utilities for data operations.
"""

from datetime import datetime
from typing import Any, TypeVar, Generic
from supabase import Client


T = TypeVar("T")

# PostgreSQL SQLSTATE for unique constraint violations
UNIQUE_VIOLATION = "23505"


class BaseRepository(Generic[T]):
    """
    Base class for all repositories.

    Provides common functionality for database operations:
    - Supabase client access via self._db
    - Generic type parameter for model type hints

    Subclasses implement domain-specific data access methods
    and handle dict-to-Pydantic model mapping internally.

    Example:
        class UserRepository(BaseRepository[UserRecord]):
            def get_by_email(self, email: str) -> Optional[UserRecord]:
                result = self._db.table("users").select("*").eq("email", email).execute()
                if not result.data:
                    return None
                return self._map_to_user(result.data[0])
    """

    def __init__(self, db: Client) -> None:
        """
        Initialize the repository with a Supabase client.

        Args:
            db: Supabase client instance for database operations.
        """
        self._db = db

    @staticmethod
    def _parse_datetime(value: Any) -> Any:
        """Parse ISO timestamps returned by PostgREST; pass through anything else."""
        if isinstance(value, str):
            return datetime.fromisoformat(value.replace("Z", "+00:00"))
        return value
