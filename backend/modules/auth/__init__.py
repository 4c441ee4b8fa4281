"""
Authentication module.

Handles credential checks, registration, token issuing/verification
and the user store.

Public API:
- IAuthService / IUserRepository: Interfaces for auth operations and storage
- TokenService, PasswordHasher: Token and password primitives
- SanitizedUser, UserRecord, LoginResponse: Models
- Auth exceptions: InvalidCredentialsError, InvalidTokenError, etc.
"""

from .interfaces import IAuthService, IUserRepository
from .models import (
    JWTPayload,
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    SanitizedUser,
    UserRecord,
)
from .exceptions import (
    InvalidCredentialsError,
    InvalidTokenError,
    MissingTokenError,
    DuplicateEmailError,
    ForbiddenError,
)
from .passwords import PasswordHasher
from .tokens import TokenService

__all__ = [
    # Interfaces
    "IAuthService",
    "IUserRepository",
    # Primitives
    "PasswordHasher",
    "TokenService",
    # Models
    "JWTPayload",
    "LoginRequest",
    "LoginResponse",
    "RegisterRequest",
    "SanitizedUser",
    "UserRecord",
    # Exceptions
    "InvalidCredentialsError",
    "InvalidTokenError",
    "MissingTokenError",
    "DuplicateEmailError",
    "ForbiddenError",
]
