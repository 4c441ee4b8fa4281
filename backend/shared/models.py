"""
Shared data models used across modules.

These models are shared infrastructure, not business logic.
Module-specific models should stay in their respective module directories.
"""

from enum import Enum
from pydantic import BaseModel, Field


class UserRole(str, Enum):
    """Roles a gateway user can hold."""

    ADMIN = "ADMIN"
    EDITOR = "EDITOR"
    VIEWER = "VIEWER"


class AuthenticatedUser(BaseModel):
    """
    Represents an authenticated user in the system.

    Populated from verified JWT claims and attached to the request
    by the guard chain. The role is a snapshot taken when the token
    was issued; it is not re-read from the store.
    """

    id: int = Field(..., description="User ID")
    email: str = Field(..., description="User's email address")
    role: UserRole = Field(..., description="User role at token issuance")

    model_config = {
        "frozen": True,  # Make immutable for safety
        "extra": "ignore",
    }
