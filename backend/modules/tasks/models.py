"""
Task query models.

Filters accepted on the task read endpoints. Field names match the
ClickUp query parameters one to one.
"""

from enum import Enum
from typing import Any, Optional
from pydantic import BaseModel, Field


class TaskOrderBy(str, Enum):
    CREATED = "created"
    UPDATED = "updated"
    DUE_DATE = "due_date"


class TaskListFilters(BaseModel):
    """Filters for listing the tasks of a list."""

    archived: Optional[bool] = None
    page: Optional[int] = Field(None, ge=0)
    order_by: Optional[TaskOrderBy] = None
    reverse: Optional[bool] = None
    subtasks: Optional[bool] = None
    statuses: Optional[list[str]] = None
    include_closed: Optional[bool] = None
    assignees: Optional[list[int]] = None
    tags: Optional[list[str]] = None
    due_date_gt: Optional[int] = None
    due_date_lt: Optional[int] = None
    date_created_gt: Optional[int] = None
    date_created_lt: Optional[int] = None
    date_updated_gt: Optional[int] = None
    date_updated_lt: Optional[int] = None

    def to_params(self) -> dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)


class TaskDetailParams(BaseModel):
    """Options for fetching a single task."""

    custom_task_ids: Optional[bool] = None
    team_id: Optional[str] = None
    include_subtasks: Optional[bool] = None

    def to_params(self) -> dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)
