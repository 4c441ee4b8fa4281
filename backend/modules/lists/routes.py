"""
List API endpoints.
"""

from typing import Optional
from fastapi import APIRouter, Depends, Query

from api.dependencies import get_lists_service
from api.middleware.auth import require_auth
from api.models.errors import DISABLED_RESPONSES
from modules.upstream.models import ClickUpList, ListListPayload
from shared.exceptions import FeatureDisabledError

from .service import ListsService

router = APIRouter(dependencies=[Depends(require_auth)])


@router.get("/space/{space_id}", response_model=None)
async def get_lists_by_space_id(
    space_id: str,
    archived: Optional[bool] = Query(None),
    service: ListsService = Depends(get_lists_service),
) -> ListListPayload:
    """Get lists in a space."""
    return await service.get_lists_by_space_id(space_id, archived)


@router.get("/folder/{folder_id}", response_model=None)
async def get_lists_by_folder_id(
    folder_id: str,
    archived: Optional[bool] = Query(None),
    service: ListsService = Depends(get_lists_service),
) -> ListListPayload:
    """Get lists in a folder."""
    return await service.get_lists_by_folder_id(folder_id, archived)


@router.get("/{list_id}", response_model=None)
async def get_list_by_id(
    list_id: str,
    service: ListsService = Depends(get_lists_service),
) -> ClickUpList:
    """Get a specific list by ID."""
    return await service.get_list_by_id(list_id)


@router.post("/folder/{folder_id}", responses=DISABLED_RESPONSES)
async def create_list_in_folder(folder_id: str) -> None:
    """Create a new list in a folder (currently disabled)."""
    raise FeatureDisabledError()


@router.post("/space/{space_id}", responses=DISABLED_RESPONSES)
async def create_list_in_space(space_id: str) -> None:
    """Create a new folderless list in a space (currently disabled)."""
    raise FeatureDisabledError()


@router.put("/{list_id}", responses=DISABLED_RESPONSES)
async def update_list(list_id: str) -> None:
    """Update a list (currently disabled)."""
    raise FeatureDisabledError()


@router.delete("/{list_id}", responses=DISABLED_RESPONSES)
async def delete_list(list_id: str) -> None:
    """Delete a list (currently disabled)."""
    raise FeatureDisabledError()
