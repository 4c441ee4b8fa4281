"""
Upstream module.

The single client every resource proxy uses to reach the ClickUp API,
plus its error type and query serialization.
"""

from .client import UpstreamClient, extract_error_message
from .exceptions import UpstreamError, GENERIC_UPSTREAM_MESSAGE
from .query import build_query, serialize_value

__all__ = [
    "UpstreamClient",
    "UpstreamError",
    "GENERIC_UPSTREAM_MESSAGE",
    "build_query",
    "extract_error_message",
    "serialize_value",
]
