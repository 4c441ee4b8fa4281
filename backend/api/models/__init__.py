"""API models package."""

from .errors import DISABLED_RESPONSES, ErrorResponse, ValidationErrorResponse

__all__ = [
    "DISABLED_RESPONSES",
    "ErrorResponse",
    "ValidationErrorResponse",
]
