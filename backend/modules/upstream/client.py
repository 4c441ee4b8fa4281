"""
Upstream API client.

One pooled httpx.AsyncClient shared by every resource proxy. Each call
is a single round trip: no retries, no backoff, no caching. Whatever goes
wrong, callers only ever see an UpstreamError.
"""

import logging
from typing import Any, Mapping, Optional

import httpx

from shared.config import Settings
from shared.exceptions import ConfigurationError, TaskBridgeError

from .exceptions import GENERIC_UPSTREAM_MESSAGE, UpstreamError
from .query import build_query

logger = logging.getLogger(__name__)

# Body fields checked, in order, for a human-readable upstream error message
ERROR_MESSAGE_FIELDS = ("message", "error", "err", "description")


def extract_error_message(response: httpx.Response) -> Optional[str]:
    """
    Pull a readable message out of an upstream error response.

    Returns the first non-blank string among ERROR_MESSAGE_FIELDS in a JSON
    object body, or a non-JSON text body as-is. None if neither is present.
    """
    try:
        data = response.json()
    except ValueError:
        text = response.text.strip()
        return text or None

    if isinstance(data, str):
        return data if data.strip() else None

    if isinstance(data, dict):
        for field in ERROR_MESSAGE_FIELDS:
            value = data.get(field)
            if isinstance(value, str) and value.strip():
                return value

    return None


class UpstreamClient:
    """
    Authenticated client for the ClickUp REST API.

    The server-held API token is sent verbatim in the Authorization header;
    the caller's own bearer token never leaves the gateway.
    """

    def __init__(
        self,
        base_url: str,
        api_token: str,
        timeout_seconds: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        """
        Args:
            base_url: Upstream API root, e.g. https://api.clickup.com/api/v2
            api_token: Upstream credential
            timeout_seconds: Transport timeout for each call
            transport: Optional transport override (tests substitute a mock)
            client: Optional pre-built httpx client; not closed by aclose()

        Raises:
            ConfigurationError: If no API token is configured
        """
        if not api_token:
            raise ConfigurationError(
                "CLICKUP_API_TOKEN is required",
                code="UPSTREAM_TOKEN_MISSING",
            )

        self._base_url = base_url.rstrip("/")
        self._headers = {
            "Authorization": api_token,
            "Content-Type": "application/json",
        }
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            timeout=timeout_seconds,
            transport=transport,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "UpstreamClient":
        """Build a client from application settings."""
        return cls(
            base_url=settings.clickup_api_base_url,
            api_token=settings.clickup_api_token,
            timeout_seconds=settings.clickup_timeout_seconds,
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    async def aclose(self) -> None:
        """Close the connection pool when this client owns it."""
        if self._owns_client:
            await self._client.aclose()

    async def get(self, path: str, params: Optional[Mapping[str, Any]] = None) -> Any:
        return await self.request("GET", path, params=params)

    async def post(
        self,
        path: str,
        body: Any = None,
        params: Optional[Mapping[str, Any]] = None,
    ) -> Any:
        return await self.request("POST", path, params=params, body=body)

    async def put(
        self,
        path: str,
        body: Any = None,
        params: Optional[Mapping[str, Any]] = None,
    ) -> Any:
        return await self.request("PUT", path, params=params, body=body)

    async def delete(self, path: str, params: Optional[Mapping[str, Any]] = None) -> Any:
        return await self.request("DELETE", path, params=params)

    async def request(
        self,
        method: str,
        path: str,
        params: Optional[Mapping[str, Any]] = None,
        body: Any = None,
    ) -> Any:
        """
        Issue one call to the upstream API and decode its JSON payload.

        Args:
            method: HTTP verb
            path: Path relative to the base URL, starting with "/"
            params: Query filters, serialized with build_query()
            body: JSON body for POST/PUT

        Returns:
            The decoded response body ({} for an empty body)

        Raises:
            UpstreamError: For every failure
        """
        url = f"{self._base_url}{path}"
        logger.debug(f"{method} {url}")

        try:
            response = await self._client.request(
                method,
                url,
                params=build_query(params),
                json=body,
                headers=self._headers,
            )
            response.raise_for_status()
            data = response.json() if response.content else {}
        except Exception as e:
            normalized = self._normalize_error(e, method, url)
            if normalized is e:
                raise
            raise normalized from e

        logger.debug(f"{method} {url} -> {response.status_code}")
        return data

    def _normalize_error(self, error: Exception, method: str, url: str) -> TaskBridgeError:
        if isinstance(error, httpx.HTTPStatusError):
            status = error.response.status_code
            message = (
                extract_error_message(error.response)
                or f"Request failed with status code {status}"
            )
            logger.error(f"{method} {url} failed: {message}")
            return UpstreamError(message, status_code=status)

        if isinstance(error, TaskBridgeError):
            # Already normalized by a nested call
            logger.error(f"{method} {url} failed: {error.message}")
            return error

        logger.error(f"{method} {url} failed: {error!r}", exc_info=error)
        return UpstreamError(GENERIC_UPSTREAM_MESSAGE, status_code=500)
