"""
Users & workspaces proxy.

Unlike the task, space and list proxies, every operation here is live,
writes included.
"""

from typing import Any
from urllib.parse import quote

from modules.upstream import UpstreamClient
from modules.upstream.models import (
    CurrentUserPayload,
    MembersPayload,
    WorkspaceListPayload,
)

from .models import InviteMemberRequest, UpdateMemberRoleRequest


def _member_path(workspace_id: str, user_id: str) -> str:
    return f"/team/{quote(workspace_id, safe='')}/user/{quote(user_id, safe='')}"


class WorkspacesService:
    """Maps user and workspace operations onto the upstream API."""

    def __init__(self, client: UpstreamClient):
        self._client = client

    async def get_authorized_workspaces(self) -> WorkspaceListPayload:
        """Get the workspaces (teams) the upstream token can access."""
        return await self._client.get("/team")

    async def get_current_user(self) -> CurrentUserPayload:
        """Get the upstream account behind the API token."""
        return await self._client.get("/user")

    async def get_workspace_members(self, workspace_id: str) -> MembersPayload:
        return await self._client.get(f"/team/{quote(workspace_id, safe='')}")

    async def invite_member(self, workspace_id: str, request: InviteMemberRequest) -> Any:
        return await self._client.post(
            f"/team/{quote(workspace_id, safe='')}/user",
            body=request.to_body(),
        )

    async def remove_member(self, workspace_id: str, user_id: str) -> Any:
        return await self._client.delete(_member_path(workspace_id, user_id))

    async def update_member_role(
        self,
        workspace_id: str,
        user_id: str,
        request: UpdateMemberRoleRequest,
    ) -> Any:
        return await self._client.put(
            _member_path(workspace_id, user_id),
            body=request.to_body(),
        )
