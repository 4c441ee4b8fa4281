"""Tests for the tasks proxy."""

import pytest
from unittest.mock import AsyncMock, MagicMock

from modules.tasks.models import TaskDetailParams, TaskListFilters, TaskOrderBy
from modules.tasks.service import TasksService


@pytest.fixture
def mock_client():
    client = MagicMock()
    client.get = AsyncMock(return_value={"tasks": []})
    return client


class TestGetTasksByListId:
    @pytest.mark.asyncio
    async def test_path_and_filters(self, mock_client):
        service = TasksService(mock_client)
        filters = TaskListFilters(
            archived=False,
            order_by=TaskOrderBy.DUE_DATE,
            statuses=["open", "in progress"],
            assignees=[42],
        )

        result = await service.get_tasks_by_list_id("901", filters)

        assert result == {"tasks": []}
        mock_client.get.assert_awaited_once_with(
            "/list/901/task",
            params={
                "archived": False,
                "order_by": "due_date",
                "statuses": ["open", "in progress"],
                "assignees": [42],
            },
        )

    @pytest.mark.asyncio
    async def test_without_filters(self, mock_client):
        await TasksService(mock_client).get_tasks_by_list_id("901")
        mock_client.get.assert_awaited_once_with("/list/901/task", params=None)

    @pytest.mark.asyncio
    async def test_id_is_escaped(self, mock_client):
        await TasksService(mock_client).get_tasks_by_list_id("a/b")
        assert mock_client.get.call_args[0][0] == "/list/a%2Fb/task"


class TestGetTaskById:
    @pytest.mark.asyncio
    async def test_options(self, mock_client):
        mock_client.get.return_value = {"id": "abc"}
        options = TaskDetailParams(custom_task_ids=True, team_id="123")

        result = await TasksService(mock_client).get_task_by_id("abc", options)

        assert result == {"id": "abc"}
        mock_client.get.assert_awaited_once_with(
            "/task/abc",
            params={"custom_task_ids": True, "team_id": "123"},
        )


class TestTaskListFilters:
    def test_to_params_drops_unset(self):
        assert TaskListFilters().to_params() == {}

    def test_negative_page_rejected(self):
        with pytest.raises(ValueError):
            TaskListFilters(page=-1)
