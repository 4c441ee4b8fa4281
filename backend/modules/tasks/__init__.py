"""
Tasks module.

Proxies task reads to the upstream API.
"""

from .models import TaskDetailParams, TaskListFilters, TaskOrderBy
from .service import TasksService

__all__ = [
    "TaskDetailParams",
    "TaskListFilters",
    "TaskOrderBy",
    "TasksService",
]
