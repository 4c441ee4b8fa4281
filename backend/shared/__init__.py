"""
Shared infrastructure for the TaskBridge backend.

This package contains cross-cutting concerns that are used by multiple modules:
- config: Centralized settings management
- database: Supabase client factory
- exceptions: Base exception classes
- repository: Base class for store access
- models: Identity and role types shared by every module

Note: Business logic should NOT go here. This is for infrastructure only.
"""

from .config import Settings, get_settings
from .database import get_supabase_client, reset_client_cache
from .exceptions import (
    TaskBridgeError,
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    ConfigurationError,
    InternalError,
    FeatureDisabledError,
    ExternalServiceError,
)
from .models import AuthenticatedUser, UserRole

__all__ = [
    "Settings",
    "get_settings",
    "get_supabase_client",
    "reset_client_cache",
    "TaskBridgeError",
    "AuthenticationError",
    "AuthorizationError",
    "ConflictError",
    "ConfigurationError",
    "InternalError",
    "FeatureDisabledError",
    "ExternalServiceError",
    "AuthenticatedUser",
    "UserRole",
]
