"""
Lists proxy.

Read-only: list writes are disabled at the route layer.
"""

from typing import Optional
from urllib.parse import quote

from modules.upstream import UpstreamClient
from modules.upstream.models import ClickUpList, ListListPayload


class ListsService:
    """Maps list reads onto the upstream API."""

    def __init__(self, client: UpstreamClient):
        self._client = client

    async def get_lists_by_space_id(
        self,
        space_id: str,
        archived: Optional[bool] = None,
    ) -> ListListPayload:
        """Get folderless lists in a space."""
        return await self._client.get(
            f"/space/{quote(space_id, safe='')}/list",
            params={"archived": archived},
        )

    async def get_lists_by_folder_id(
        self,
        folder_id: str,
        archived: Optional[bool] = None,
    ) -> ListListPayload:
        """Get lists in a folder."""
        return await self._client.get(
            f"/folder/{quote(folder_id, safe='')}/list",
            params={"archived": archived},
        )

    async def get_list_by_id(self, list_id: str) -> ClickUpList:
        """Get a specific list by ID."""
        return await self._client.get(f"/list/{quote(list_id, safe='')}")
