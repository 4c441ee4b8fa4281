"""
Space API endpoints.
"""

from typing import Optional
from fastapi import APIRouter, Depends, Query

from api.dependencies import get_spaces_service
from api.middleware.auth import require_auth
from api.models.errors import DISABLED_RESPONSES
from modules.upstream.models import ClickUpSpace, SpaceListPayload
from shared.exceptions import FeatureDisabledError

from .service import SpacesService

router = APIRouter(dependencies=[Depends(require_auth)])


@router.get("/workspace/{workspace_id}", response_model=None)
async def get_spaces(
    workspace_id: str,
    archived: Optional[bool] = Query(None),
    service: SpacesService = Depends(get_spaces_service),
) -> SpaceListPayload:
    """Get spaces in a workspace."""
    return await service.get_spaces(workspace_id, archived)


@router.get("/{space_id}", response_model=None)
async def get_space_by_id(
    space_id: str,
    service: SpacesService = Depends(get_spaces_service),
) -> ClickUpSpace:
    """Get a specific space by ID."""
    return await service.get_space_by_id(space_id)


@router.post("/workspace/{workspace_id}", responses=DISABLED_RESPONSES)
async def create_space(workspace_id: str) -> None:
    """Create a new space (currently disabled)."""
    raise FeatureDisabledError()


@router.put("/{space_id}", responses=DISABLED_RESPONSES)
async def update_space(space_id: str) -> None:
    """Update a space (currently disabled)."""
    raise FeatureDisabledError()


@router.delete("/{space_id}", responses=DISABLED_RESPONSES)
async def delete_space(space_id: str) -> None:
    """Delete a space (currently disabled)."""
    raise FeatureDisabledError()
