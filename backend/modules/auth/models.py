"""
Authentication module data models.

These models define the data structures used by the auth module
and exposed to other modules through the interface.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, EmailStr, Field, field_validator

from shared.models import UserRole

# bcrypt only uses the first 72 bytes and newer releases reject longer input
MAX_PASSWORD_BYTES = 72


class JWTPayload(BaseModel):
    """
    Decoded bearer token payload.

    ``sub`` is the user ID as a string, as required by RFC 7519.
    """

    sub: str = Field(..., description="Subject (user ID)")
    email: str = Field(..., description="User's email")
    role: UserRole = Field(..., description="User role at issuance")
    exp: int = Field(..., description="Expiration timestamp")
    iat: int = Field(..., description="Issued at timestamp")


class SanitizedUser(BaseModel):
    """A user record as returned to clients: never carries the password hash."""

    id: int
    email: str
    role: UserRole
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class UserRecord(BaseModel):
    """
    A stored user, including its password hash.

    Only the auth module handles this model; everything leaving the
    module goes through sanitized().
    """

    id: int
    email: str
    password_hash: str = Field(..., repr=False)
    role: UserRole = UserRole.VIEWER
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def sanitized(self) -> SanitizedUser:
        """Strip the password hash."""
        return SanitizedUser(**self.model_dump(exclude={"password_hash"}))


class LoginRequest(BaseModel):
    """Credentials for POST /auth/login."""

    email: EmailStr
    password: str = Field(..., min_length=1)


class RegisterRequest(BaseModel):
    """Body for POST /auth/register."""

    email: EmailStr
    password: str = Field(..., min_length=6)
    role: Optional[UserRole] = None

    @field_validator("password")
    @classmethod
    def _fits_bcrypt(cls, value: str) -> str:
        if len(value.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise ValueError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")
        return value


class LoginResponse(BaseModel):
    """Issued access token plus the sanitized user."""

    access_token: str
    user: SanitizedUser
