"""
Tasks proxy.

Read-only: task writes are disabled at the route layer and never reach
the upstream API.
"""

from typing import Optional
from urllib.parse import quote

from modules.upstream import UpstreamClient
from modules.upstream.models import ClickUpTask, TaskListPayload

from .models import TaskDetailParams, TaskListFilters


class TasksService:
    """Maps task reads onto the upstream API."""

    def __init__(self, client: UpstreamClient):
        self._client = client

    async def get_tasks_by_list_id(
        self,
        list_id: str,
        filters: Optional[TaskListFilters] = None,
    ) -> TaskListPayload:
        """Get tasks from a specific list."""
        params = filters.to_params() if filters else None
        return await self._client.get(f"/list/{quote(list_id, safe='')}/task", params=params)

    async def get_task_by_id(
        self,
        task_id: str,
        options: Optional[TaskDetailParams] = None,
    ) -> ClickUpTask:
        """Get a specific task by ID."""
        params = options.to_params() if options else None
        return await self._client.get(f"/task/{quote(task_id, safe='')}", params=params)
