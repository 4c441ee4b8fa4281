"""
Usage module interfaces.
"""

from typing import Protocol, runtime_checkable

from .models import ApiLogEntry


@runtime_checkable
class IApiLogRepository(Protocol):
    """Append-only store for API log entries."""

    def append(self, entry: ApiLogEntry) -> ApiLogEntry:
        """Persist an entry and return it with its stored ID."""
        ...


@runtime_checkable
class IUsageService(Protocol):
    """Records API usage per user."""

    async def log_request(
        self,
        user_id: int,
        endpoint: str,
        method: str,
        status_code: int,
    ) -> ApiLogEntry:
        """Record one completed request."""
        ...
