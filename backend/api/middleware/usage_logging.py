"""
Request logging middleware.

Logs one line per request and, for authenticated requests, persists an
API usage entry in the background. Persisting never delays or fails the
response.
"""

import asyncio
import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.types import ASGIApp

from ..dependencies import ServiceContainer, get_usage_service

logger = logging.getLogger(__name__)


class ApiLoggingMiddleware(BaseHTTPMiddleware):
    """Access log plus fire-and-forget usage recording."""

    def __init__(self, app: ASGIApp, persist: bool = True):
        super().__init__(app)
        self.persist = persist
        self._pending: set[asyncio.Task] = set()

    async def dispatch(self, request: Request, call_next):
        started = time.perf_counter()
        target = request.url.path
        if request.url.query:
            target = f"{target}?{request.url.query}"

        try:
            response = await call_next(request)
        except Exception:
            elapsed = int((time.perf_counter() - started) * 1000)
            logger.error(f"{request.method} {target} 500 - {elapsed}ms")
            raise

        elapsed = int((time.perf_counter() - started) * 1000)
        logger.info(f"{request.method} {target} {response.status_code} - {elapsed}ms")

        user = getattr(request.state, "user", None)
        if self.persist and user is not None:
            self._schedule(
                request.app.state.container, user.id, target, request.method, response.status_code
            )
        return response

    def _schedule(
        self,
        container: ServiceContainer,
        user_id: int,
        endpoint: str,
        method: str,
        status_code: int,
    ) -> None:
        task = asyncio.create_task(
            self._record(container, user_id, endpoint, method, status_code)
        )
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)

    async def _record(
        self,
        container: ServiceContainer,
        user_id: int,
        endpoint: str,
        method: str,
        status_code: int,
    ) -> None:
        try:
            usage = get_usage_service(container)
            await usage.log_request(user_id, endpoint, method, status_code)
        except Exception as e:
            logger.error(f"Failed to record API usage for user {user_id}: {e}")
