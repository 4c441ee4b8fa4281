"""
Tests for the request logging middleware.
"""

import asyncio
import logging

import httpx
import pytest
from unittest.mock import AsyncMock, MagicMock, patch

from api.app import create_app
from api.dependencies import get_token_service, get_upstream_client


@pytest.fixture
def logging_app(test_settings, token_service, upstream):
    settings = test_settings.model_copy(update={"enable_usage_logging": True})
    application = create_app(settings)
    application.dependency_overrides[get_token_service] = lambda: token_service
    application.dependency_overrides[get_upstream_client] = upstream.client
    return application


@pytest.fixture
def usage_service():
    service = MagicMock()
    service.log_request = AsyncMock()
    return service


async def call(app, method: str, path: str, **kwargs) -> httpx.Response:
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as client:
        response = await client.request(method, path, **kwargs)
    # Let scheduled background tasks run
    await asyncio.sleep(0.05)
    return response


class TestUsageRecording:
    @pytest.mark.asyncio
    async def test_authenticated_request_logged_once(self, logging_app, usage_service, viewer_headers):
        with patch("api.middleware.usage_logging.get_usage_service", return_value=usage_service):
            response = await call(logging_app, "GET", "/api/lists/901", headers=viewer_headers)

        assert response.status_code == 200
        usage_service.log_request.assert_awaited_once_with(3, "/api/lists/901", "GET", 200)

    @pytest.mark.asyncio
    async def test_endpoint_includes_query_string(self, logging_app, usage_service, viewer_headers):
        with patch("api.middleware.usage_logging.get_usage_service", return_value=usage_service):
            await call(
                logging_app,
                "GET",
                "/api/spaces/workspace/123?archived=true",
                headers=viewer_headers,
            )

        usage_service.log_request.assert_awaited_once_with(
            3, "/api/spaces/workspace/123?archived=true", "GET", 200
        )

    @pytest.mark.asyncio
    async def test_uses_service_from_app_container(self, logging_app, usage_service, viewer_headers):
        with patch(
            "api.middleware.usage_logging.get_usage_service", return_value=usage_service
        ) as accessor:
            await call(logging_app, "GET", "/api/lists/901", headers=viewer_headers)

        accessor.assert_called_once_with(logging_app.state.container)

    @pytest.mark.asyncio
    async def test_failed_request_still_logged(self, logging_app, usage_service, viewer_headers):
        with patch("api.middleware.usage_logging.get_usage_service", return_value=usage_service):
            response = await call(logging_app, "PUT", "/api/lists/901", headers=viewer_headers)

        assert response.status_code == 503
        usage_service.log_request.assert_awaited_once_with(3, "/api/lists/901", "PUT", 503)

    @pytest.mark.asyncio
    async def test_anonymous_request_not_logged(self, logging_app, usage_service):
        with patch("api.middleware.usage_logging.get_usage_service", return_value=usage_service):
            await call(logging_app, "GET", "/health")
            await call(logging_app, "GET", "/api/lists/901")

        usage_service.log_request.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_store_failure_does_not_change_response(
        self, logging_app, usage_service, viewer_headers, caplog
    ):
        usage_service.log_request.side_effect = RuntimeError("store down")

        with patch("api.middleware.usage_logging.get_usage_service", return_value=usage_service):
            with caplog.at_level(logging.ERROR, logger="api.middleware.usage_logging"):
                response = await call(logging_app, "GET", "/api/lists/901", headers=viewer_headers)

        assert response.status_code == 200
        assert response.json() == {"ok": True}
        assert "Failed to record API usage" in caplog.text

    @pytest.mark.asyncio
    async def test_disabled_by_setting(self, app, usage_service, viewer_headers):
        with patch("api.middleware.usage_logging.get_usage_service", return_value=usage_service):
            await call(app, "GET", "/api/lists/901", headers=viewer_headers)

        usage_service.log_request.assert_not_awaited()


class TestAccessLog:
    @pytest.mark.asyncio
    async def test_request_line(self, app, caplog):
        with caplog.at_level(logging.INFO, logger="api.middleware.usage_logging"):
            await call(app, "GET", "/health?verbose=1")

        assert any(
            record.getMessage().startswith("GET /health?verbose=1 200 - ")
            and record.getMessage().endswith("ms")
            for record in caplog.records
        )

    @pytest.mark.asyncio
    async def test_rate_limited_request_logged(self, test_settings, usage_service, caplog):
        settings = test_settings.model_copy(
            update={
                "rate_limit_enabled": True,
                "throttle_short_limit": 1,
                "enable_usage_logging": True,
            }
        )
        limited_app = create_app(settings)

        with patch("api.middleware.usage_logging.get_usage_service", return_value=usage_service):
            with caplog.at_level(logging.INFO, logger="api.middleware.usage_logging"):
                await call(limited_app, "GET", "/health")
                response = await call(limited_app, "GET", "/health")

        assert response.status_code == 429
        assert any(
            record.getMessage().startswith("GET /health 429 - ") for record in caplog.records
        )
        usage_service.log_request.assert_not_awaited()
