"""
Usage module data models.
"""

from datetime import datetime, timezone
from typing import Optional
from pydantic import BaseModel, Field


class ApiLogEntry(BaseModel):
    """
    One completed authenticated request.

    Entries are append-only: the gateway never updates or deletes them.
    """

    id: Optional[int] = Field(None, description="Assigned by the store")
    user_id: int
    endpoint: str
    method: str
    status_code: int
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    model_config = {"frozen": True}
