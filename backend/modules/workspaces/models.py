"""
Workspace membership request models.
"""

from typing import Any, Optional
from pydantic import BaseModel, EmailStr


class InviteMemberRequest(BaseModel):
    """Invite a user to a workspace by email."""

    email: EmailStr
    admin: Optional[bool] = None
    custom_role_id: Optional[int] = None

    def to_body(self) -> dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)


class UpdateMemberRoleRequest(BaseModel):
    """Change a member's workspace role."""

    admin: Optional[bool] = None
    custom_role_id: Optional[int] = None

    def to_body(self) -> dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)
