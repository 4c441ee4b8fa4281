"""
Fixed-window rate limiting keyed by client address.

Each configured tier (short, medium, long) keeps its own counter per
client. A request is admitted only if every tier still has room; the
first exhausted tier answers 429 with a Retry-After header. Buckets whose
window has closed are swept once per shortest window.
"""

import logging
import math
import time
from typing import Callable, Optional

from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.types import ASGIApp

logger = logging.getLogger(__name__)

# (window_start, count) per (tier, client)
Bucket = tuple[float, int]


class RateLimitMiddleware(BaseHTTPMiddleware):
    """
    In-process limiter; buckets belong to this middleware instance, so
    every application (and every test app) starts empty.
    """

    def __init__(
        self,
        app: ASGIApp,
        tiers: list[tuple[str, int, int]],
        enabled: bool = True,
        clock: Optional[Callable[[], float]] = None,
    ):
        super().__init__(app)
        self.tiers = tiers
        self.enabled = enabled
        self._clock = clock or time.monotonic
        self._buckets: dict[tuple[str, str], Bucket] = {}
        self._sweep_every = min((ttl for _, ttl, _ in tiers), default=60)
        self._last_sweep: Optional[float] = None

    def _client_key(self, request: Request) -> str:
        return request.client.host if request.client else "unknown"

    def _sweep(self, now: float) -> None:
        """Drop buckets whose window has already closed."""
        ttls = {name: ttl for name, ttl, _ in self.tiers}
        self._buckets = {
            key: bucket
            for key, bucket in self._buckets.items()
            if now - bucket[0] < ttls.get(key[0], 0)
        }
        self._last_sweep = now

    def hit(self, client: str) -> Optional[int]:
        """
        Count one request for ``client``.

        Returns None when admitted, otherwise the seconds until the
        exhausted window resets. Rejected requests are not counted.
        """
        now = self._clock()
        if self._last_sweep is None:
            self._last_sweep = now
        elif now - self._last_sweep >= self._sweep_every:
            self._sweep(now)
        current: dict[tuple[str, str], Bucket] = {}

        for name, ttl, limit in self.tiers:
            key = (name, client)
            start, count = self._buckets.get(key, (now, 0))
            if now - start >= ttl:
                start, count = now, 0
            if count >= limit:
                return max(1, math.ceil(start + ttl - now))
            current[key] = (start, count)

        for key, (start, count) in current.items():
            self._buckets[key] = (start, count + 1)
        return None

    async def dispatch(self, request: Request, call_next):
        if not self.enabled or request.method == "OPTIONS":
            return await call_next(request)

        client = self._client_key(request)
        retry_after = self.hit(client)
        if retry_after is not None:
            logger.warning(f"Rate limit exceeded for {client} on {request.url.path}")
            return JSONResponse(
                status_code=429,
                content={
                    "status_code": 429,
                    "error": "RATE_LIMITED",
                    "message": "Too many requests",
                },
                headers={"Retry-After": str(retry_after)},
            )
        return await call_next(request)
