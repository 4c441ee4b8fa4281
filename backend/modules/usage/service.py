"""
API usage logging service.
"""

import asyncio

from .interfaces import IApiLogRepository, IUsageService
from .models import ApiLogEntry


class UsageService(IUsageService):
    """Records one log entry per completed authenticated request."""

    def __init__(self, repository: IApiLogRepository):
        self._repository = repository

    async def log_request(
        self,
        user_id: int,
        endpoint: str,
        method: str,
        status_code: int,
    ) -> ApiLogEntry:
        entry = ApiLogEntry(
            user_id=user_id,
            endpoint=endpoint,
            method=method.upper(),
            status_code=status_code,
        )
        # Store client is synchronous
        return await asyncio.to_thread(self._repository.append, entry)
