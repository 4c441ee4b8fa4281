"""
Base exception classes for the TaskBridge backend.

Each module defines its own exceptions that inherit from these bases.
Every exception carries the HTTP status it maps to, so the API layer can
render any of them the same way.
"""

from typing import Optional, Any


class TaskBridgeError(Exception):
    """
    Base exception for all TaskBridge errors.

    All custom exceptions should inherit from this class.
    """

    status_code: int = 500

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
        status_code: Optional[int] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}
        if status_code is not None:
            self.status_code = status_code

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for API responses."""
        return {
            "status_code": self.status_code,
            "error": self.code,
            "message": self.message,
        }


class AuthenticationError(TaskBridgeError):
    """Authentication failed (invalid or missing credentials)."""

    status_code = 401


class AuthorizationError(TaskBridgeError):
    """Authorization failed (insufficient permissions)."""

    status_code = 403


class ConflictError(TaskBridgeError):
    """The request conflicts with existing state."""

    status_code = 409


class ConfigurationError(TaskBridgeError):
    """Required server configuration is missing or invalid."""

    status_code = 500


class InternalError(TaskBridgeError):
    """Catch-all for unexpected failures."""

    status_code = 500

    def __init__(self, message: str = "Internal server error"):
        super().__init__(message, code="INTERNAL_ERROR")


class FeatureDisabledError(TaskBridgeError):
    """Raised by endpoints that are intentionally switched off."""

    status_code = 503

    def __init__(self, message: str = "This feature is currently disabled"):
        super().__init__(message, code="FEATURE_DISABLED")


class ExternalServiceError(TaskBridgeError):
    """Error communicating with an external service."""

    status_code = 502

    def __init__(
        self,
        message: str,
        service: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
        status_code: Optional[int] = None,
    ):
        super().__init__(message, code, details, status_code)
        self.service = service
        self.details["service"] = service
