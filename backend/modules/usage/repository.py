"""
API log repository.

Writes to the ``api_logs`` table. There are deliberately no update or
delete methods.
"""

from shared.repository import BaseRepository

from .models import ApiLogEntry

API_LOGS_TABLE = "api_logs"


class ApiLogRepository(BaseRepository[ApiLogEntry]):
    """Repository for API usage log entries."""

    def append(self, entry: ApiLogEntry) -> ApiLogEntry:
        data = entry.model_dump(mode="json", exclude={"id"})
        result = self._db.table(API_LOGS_TABLE).insert(data).execute()
        row = result.data[0] if result.data else {}
        return entry.model_copy(update={"id": row.get("id")})
