"""
Error response models.

Standardized error responses for the API.
"""

from pydantic import BaseModel
from typing import Any


class ErrorResponse(BaseModel):
    """Standard error response format."""

    status_code: int
    error: str
    message: str


class ValidationErrorResponse(ErrorResponse):
    """Validation error response format."""

    status_code: int = 422
    error: str = "VALIDATION_ERROR"
    message: str = "Request validation failed"
    details: list[dict[str, Any]]


# OpenAPI documentation for endpoints that are switched off
DISABLED_RESPONSES: dict[int | str, dict[str, Any]] = {
    503: {"model": ErrorResponse, "description": "Feature currently disabled"},
}
