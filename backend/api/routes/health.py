"""
Service information and health check endpoints.

Both endpoints are public.
"""

import time
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, Request
from pydantic import BaseModel

from shared.config import Settings, get_settings
from shared.models import UserRole

from ..middleware.auth import public_route

router = APIRouter(dependencies=[Depends(public_route)])

ENDPOINTS = {
    "auth": {
        "login": "POST /auth/login",
        "register": "POST /auth/register",
        "profile": "POST /auth/profile",
    },
    "tasks": {
        "by_list": "GET /api/tasks/list/:listId",
        "by_id": "GET /api/tasks/:taskId",
    },
    "spaces": {
        "by_workspace": "GET /api/spaces/workspace/:workspaceId",
        "by_id": "GET /api/spaces/:spaceId",
    },
    "lists": {
        "by_space": "GET /api/lists/space/:spaceId",
        "by_folder": "GET /api/lists/folder/:folderId",
        "by_id": "GET /api/lists/:listId",
    },
    "users": {
        "workspaces": "GET /api/users/workspaces",
        "me": "GET /api/users/me",
        "members": "GET /api/users/workspace/:workspaceId/members",
        "invite": "POST /api/users/workspace/:workspaceId/invite",
        "remove": "DELETE /api/users/workspace/:workspaceId/user/:userId",
        "update_role": "PUT /api/users/workspace/:workspaceId/user/:userId/role",
    },
}


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    timestamp: datetime
    uptime: float
    environment: str


@router.get("/")
async def service_info(settings: Settings = Depends(get_settings)) -> dict:
    """Application info and endpoint catalogue."""
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "description": "Authenticated gateway for a third-party task management API",
        "security": {
            "authentication": "Bearer JWT",
            "roles": [role.value for role in UserRole],
            "rate_limits": [
                {"tier": name, "window_seconds": ttl, "limit": limit}
                for name, ttl, limit in settings.rate_limit_tiers
            ],
        },
        "endpoints": ENDPOINTS,
    }


@router.get("/health", response_model=HealthResponse)
async def health_check(
    request: Request,
    settings: Settings = Depends(get_settings),
) -> HealthResponse:
    """
    Basic health check endpoint.

    Returns 200 if the API is running.
    """
    started = getattr(request.app.state, "started_at", time.monotonic())
    return HealthResponse(
        status="ok",
        timestamp=datetime.now(timezone.utc),
        uptime=round(time.monotonic() - started, 3),
        environment=settings.environment,
    )
