"""Tests for the users & workspaces proxy."""

import pytest
from pydantic import ValidationError
from unittest.mock import AsyncMock, MagicMock

from modules.workspaces.models import InviteMemberRequest, UpdateMemberRoleRequest
from modules.workspaces.service import WorkspacesService


@pytest.fixture
def mock_client():
    client = MagicMock()
    client.get = AsyncMock(return_value={})
    client.post = AsyncMock(return_value={"team": {}})
    client.put = AsyncMock(return_value={"member": {}})
    client.delete = AsyncMock(return_value={})
    return client


@pytest.fixture
def service(mock_client):
    return WorkspacesService(mock_client)


class TestReads:
    @pytest.mark.asyncio
    async def test_authorized_workspaces(self, service, mock_client):
        await service.get_authorized_workspaces()
        mock_client.get.assert_awaited_once_with("/team")

    @pytest.mark.asyncio
    async def test_current_user(self, service, mock_client):
        await service.get_current_user()
        mock_client.get.assert_awaited_once_with("/user")

    @pytest.mark.asyncio
    async def test_members(self, service, mock_client):
        await service.get_workspace_members("123")
        mock_client.get.assert_awaited_once_with("/team/123")


class TestMembershipWrites:
    @pytest.mark.asyncio
    async def test_invite(self, service, mock_client):
        request = InviteMemberRequest(email="new@example.com", admin=False)

        result = await service.invite_member("123", request)

        assert result == {"team": {}}
        mock_client.post.assert_awaited_once_with(
            "/team/123/user",
            body={"email": "new@example.com", "admin": False},
        )

    @pytest.mark.asyncio
    async def test_remove(self, service, mock_client):
        await service.remove_member("123", "77")
        mock_client.delete.assert_awaited_once_with("/team/123/user/77")

    @pytest.mark.asyncio
    async def test_update_role(self, service, mock_client):
        await service.update_member_role("123", "77", UpdateMemberRoleRequest(custom_role_id=5))
        mock_client.put.assert_awaited_once_with(
            "/team/123/user/77",
            body={"custom_role_id": 5},
        )


class TestRequestModels:
    def test_invite_requires_valid_email(self):
        with pytest.raises(ValidationError):
            InviteMemberRequest(email="nope")

    def test_empty_role_update(self):
        assert UpdateMemberRoleRequest().to_body() == {}
