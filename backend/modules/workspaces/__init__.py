"""
Workspaces module.

Proxies upstream user, workspace and membership operations.
"""

from .models import InviteMemberRequest, UpdateMemberRoleRequest
from .service import WorkspacesService

__all__ = [
    "InviteMemberRequest",
    "UpdateMemberRoleRequest",
    "WorkspacesService",
]
