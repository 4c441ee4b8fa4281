"""
Upstream module exceptions.

UpstreamError is the only error type that leaves the upstream client.
"""

from typing import Optional, Any

from shared.exceptions import ExternalServiceError

UPSTREAM_SERVICE = "clickup"
GENERIC_UPSTREAM_MESSAGE = "Unexpected error occurred while calling the upstream API"


class UpstreamError(ExternalServiceError):
    """
    Normalized failure of an upstream call.

    Carries the HTTP status to answer with: the upstream's own status when
    it responded with an error, 500 otherwise.
    """

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(
            message,
            service=UPSTREAM_SERVICE,
            code="UPSTREAM_ERROR",
            details=details,
            status_code=status_code,
        )
