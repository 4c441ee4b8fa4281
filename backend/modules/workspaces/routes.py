"""
Users & workspaces API endpoints.

Reads are open to every role; membership changes are ADMIN only.
"""

from typing import Any
from fastapi import APIRouter, Depends

from api.dependencies import get_workspaces_service
from api.middleware.auth import require_auth, require_roles
from modules.upstream.models import (
    CurrentUserPayload,
    MembersPayload,
    WorkspaceListPayload,
)
from shared.models import UserRole

from .models import InviteMemberRequest, UpdateMemberRoleRequest
from .service import WorkspacesService

router = APIRouter()

admin_only = require_roles(UserRole.ADMIN)


@router.get("/workspaces", response_model=None, dependencies=[Depends(require_auth)])
async def get_authorized_workspaces(
    service: WorkspacesService = Depends(get_workspaces_service),
) -> WorkspaceListPayload:
    """Get authorized workspaces."""
    return await service.get_authorized_workspaces()


@router.get("/me", response_model=None, dependencies=[Depends(require_auth)])
async def get_current_user(
    service: WorkspacesService = Depends(get_workspaces_service),
) -> CurrentUserPayload:
    """Get the upstream account the gateway acts as."""
    return await service.get_current_user()


@router.get(
    "/workspace/{workspace_id}/members",
    response_model=None,
    dependencies=[Depends(require_auth)],
)
async def get_workspace_members(
    workspace_id: str,
    service: WorkspacesService = Depends(get_workspaces_service),
) -> MembersPayload:
    """Get workspace members."""
    return await service.get_workspace_members(workspace_id)


@router.post(
    "/workspace/{workspace_id}/invite",
    response_model=None,
    status_code=201,
    dependencies=[Depends(admin_only)],
)
async def invite_member(
    workspace_id: str,
    request: InviteMemberRequest,
    service: WorkspacesService = Depends(get_workspaces_service),
) -> Any:
    """Invite a user to a workspace."""
    return await service.invite_member(workspace_id, request)


@router.delete(
    "/workspace/{workspace_id}/user/{user_id}",
    response_model=None,
    dependencies=[Depends(admin_only)],
)
async def remove_member(
    workspace_id: str,
    user_id: str,
    service: WorkspacesService = Depends(get_workspaces_service),
) -> Any:
    """Remove a user from a workspace."""
    return await service.remove_member(workspace_id, user_id)


@router.put(
    "/workspace/{workspace_id}/user/{user_id}/role",
    response_model=None,
    dependencies=[Depends(admin_only)],
)
async def update_member_role(
    workspace_id: str,
    user_id: str,
    request: UpdateMemberRoleRequest,
    service: WorkspacesService = Depends(get_workspaces_service),
) -> Any:
    """Update a member's role in a workspace."""
    return await service.update_member_role(workspace_id, user_id, request)
