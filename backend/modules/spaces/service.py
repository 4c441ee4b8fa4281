"""
Spaces proxy.

Read-only: space writes are disabled at the route layer.
"""

from typing import Optional
from urllib.parse import quote

from modules.upstream import UpstreamClient
from modules.upstream.models import ClickUpSpace, SpaceListPayload


class SpacesService:
    """Maps space reads onto the upstream API."""

    def __init__(self, client: UpstreamClient):
        self._client = client

    async def get_spaces(
        self,
        workspace_id: str,
        archived: Optional[bool] = None,
    ) -> SpaceListPayload:
        """Get spaces in a workspace."""
        return await self._client.get(
            f"/team/{quote(workspace_id, safe='')}/space",
            params={"archived": archived},
        )

    async def get_space_by_id(self, space_id: str) -> ClickUpSpace:
        """Get a specific space by ID."""
        return await self._client.get(f"/space/{quote(space_id, safe='')}")
