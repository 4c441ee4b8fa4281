"""
Task API endpoints.

Reads are proxied to the upstream API. Writes are switched off and answer
503 without contacting it.
"""

from typing import Optional
from fastapi import APIRouter, Depends, Query

from api.dependencies import get_tasks_service
from api.middleware.auth import require_auth
from api.models.errors import DISABLED_RESPONSES
from modules.upstream.models import ClickUpTask, TaskListPayload
from shared.exceptions import FeatureDisabledError

from .models import TaskDetailParams, TaskListFilters, TaskOrderBy
from .service import TasksService

router = APIRouter(dependencies=[Depends(require_auth)])


@router.get("/list/{list_id}", response_model=None)
async def get_tasks_by_list_id(
    list_id: str,
    archived: Optional[bool] = Query(None),
    page: Optional[int] = Query(None, ge=0),
    order_by: Optional[TaskOrderBy] = Query(None),
    reverse: Optional[bool] = Query(None),
    subtasks: Optional[bool] = Query(None),
    statuses: Optional[list[str]] = Query(None, description="Status names"),
    include_closed: Optional[bool] = Query(None),
    assignees: Optional[list[int]] = Query(None, description="Assignee user IDs"),
    tags: Optional[list[str]] = Query(None, description="Tag names"),
    due_date_gt: Optional[int] = Query(None),
    due_date_lt: Optional[int] = Query(None),
    date_created_gt: Optional[int] = Query(None),
    date_created_lt: Optional[int] = Query(None),
    date_updated_gt: Optional[int] = Query(None),
    date_updated_lt: Optional[int] = Query(None),
    service: TasksService = Depends(get_tasks_service),
) -> TaskListPayload:
    """Get tasks from a specific list."""
    filters = TaskListFilters(
        archived=archived,
        page=page,
        order_by=order_by,
        reverse=reverse,
        subtasks=subtasks,
        statuses=statuses,
        include_closed=include_closed,
        assignees=assignees,
        tags=tags,
        due_date_gt=due_date_gt,
        due_date_lt=due_date_lt,
        date_created_gt=date_created_gt,
        date_created_lt=date_created_lt,
        date_updated_gt=date_updated_gt,
        date_updated_lt=date_updated_lt,
    )
    return await service.get_tasks_by_list_id(list_id, filters)


@router.get("/{task_id}", response_model=None)
async def get_task_by_id(
    task_id: str,
    custom_task_ids: Optional[bool] = Query(None),
    team_id: Optional[str] = Query(None),
    include_subtasks: Optional[bool] = Query(None),
    service: TasksService = Depends(get_tasks_service),
) -> ClickUpTask:
    """Get a specific task by ID."""
    options = TaskDetailParams(
        custom_task_ids=custom_task_ids,
        team_id=team_id,
        include_subtasks=include_subtasks,
    )
    return await service.get_task_by_id(task_id, options)


@router.post("/list/{list_id}", responses=DISABLED_RESPONSES)
async def create_task(list_id: str) -> None:
    """Create a new task in a list (currently disabled)."""
    raise FeatureDisabledError()


@router.put("/{task_id}", responses=DISABLED_RESPONSES)
async def update_task(task_id: str) -> None:
    """Update an existing task (currently disabled)."""
    raise FeatureDisabledError()


@router.delete("/{task_id}", responses=DISABLED_RESPONSES)
async def delete_task(task_id: str) -> None:
    """Delete a task (currently disabled)."""
    raise FeatureDisabledError()
