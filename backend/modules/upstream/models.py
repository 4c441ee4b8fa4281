"""
ClickUp response payload types.

These describe the upstream shapes for type checking only. Payloads are
passed through to clients unchanged, so they are TypedDicts rather than
validating models.
"""

from typing import Any, Optional, TypedDict


class ClickUpUser(TypedDict, total=False):
    id: int
    username: str
    color: str
    profilePicture: Optional[str]
    initials: str
    email: str
    role: int
    custom_role: Any
    last_active: str
    date_joined: str
    date_invited: str


class ClickUpStatus(TypedDict, total=False):
    id: str
    status: str
    color: str
    type: str
    orderindex: Any


class ClickUpTask(TypedDict, total=False):
    id: str
    name: str
    description: Optional[str]
    status: ClickUpStatus
    orderindex: str
    date_created: str
    date_updated: str
    date_closed: Optional[str]
    archived: bool
    creator: ClickUpUser
    assignees: list[ClickUpUser]
    watchers: list[ClickUpUser]
    tags: list[dict[str, Any]]
    parent: Optional[str]
    priority: Optional[dict[str, Any]]
    due_date: Optional[str]
    start_date: Optional[str]
    time_estimate: Optional[int]
    custom_fields: list[Any]
    team_id: str
    url: str
    list: dict[str, Any]
    folder: dict[str, Any]
    space: dict[str, Any]


class ClickUpSpace(TypedDict, total=False):
    id: str
    name: str
    color: Optional[str]
    private: bool
    statuses: list[ClickUpStatus]
    multiple_assignees: bool
    features: dict[str, Any]
    archived: bool


class ClickUpList(TypedDict, total=False):
    id: str
    name: str
    orderindex: int
    status: Optional[str]
    priority: Optional[dict[str, Any]]
    assignee: Optional[ClickUpUser]
    task_count: Optional[int]
    due_date: Optional[str]
    start_date: Optional[str]
    folder: dict[str, Any]
    space: dict[str, Any]
    archived: bool
    statuses: list[ClickUpStatus]
    permission_level: str


class ClickUpWorkspace(TypedDict, total=False):
    id: str
    name: str
    color: str
    avatar: Optional[str]
    members: list[dict[str, Any]]


class TaskListPayload(TypedDict):
    tasks: list[ClickUpTask]


class SpaceListPayload(TypedDict):
    spaces: list[ClickUpSpace]


class ListListPayload(TypedDict):
    lists: list[ClickUpList]


class WorkspaceListPayload(TypedDict):
    teams: list[ClickUpWorkspace]


class CurrentUserPayload(TypedDict):
    user: ClickUpUser


class MembersPayload(TypedDict, total=False):
    team: ClickUpWorkspace
    members: list[ClickUpUser]
