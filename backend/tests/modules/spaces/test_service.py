"""Tests for the spaces proxy."""

import pytest
from unittest.mock import AsyncMock, MagicMock

from modules.spaces.service import SpacesService


@pytest.fixture
def mock_client():
    client = MagicMock()
    client.get = AsyncMock(return_value={"spaces": []})
    return client


@pytest.mark.asyncio
async def test_get_spaces(mock_client):
    result = await SpacesService(mock_client).get_spaces("123", archived=True)

    assert result == {"spaces": []}
    mock_client.get.assert_awaited_once_with("/team/123/space", params={"archived": True})


@pytest.mark.asyncio
async def test_get_spaces_without_archived(mock_client):
    await SpacesService(mock_client).get_spaces("123")
    mock_client.get.assert_awaited_once_with("/team/123/space", params={"archived": None})


@pytest.mark.asyncio
async def test_get_space_by_id(mock_client):
    mock_client.get.return_value = {"id": "790"}
    assert await SpacesService(mock_client).get_space_by_id("790") == {"id": "790"}
    mock_client.get.assert_awaited_once_with("/space/790")
