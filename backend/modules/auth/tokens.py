"""
Bearer token issuing and verification.

Tokens are HS256 JWTs carrying the user ID, email and role. They are
stateless: verification checks signature and expiry only.
"""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import ValidationError as PydanticValidationError

from shared.exceptions import ConfigurationError
from shared.models import AuthenticatedUser, UserRole

from .exceptions import InvalidTokenError
from .models import JWTPayload

ALGORITHM = "HS256"


class TokenService:
    """Issues and verifies signed, time-limited access tokens."""

    def __init__(self, secret: str, expires_in: int = 3600):
        """
        Args:
            secret: Server signing secret
            expires_in: Token lifetime in seconds
        """
        self._secret = secret
        self._expires_in = expires_in

    @property
    def expires_in(self) -> int:
        return self._expires_in

    def issue(self, subject: int, email: str, role: UserRole) -> str:
        """
        Sign a token for a user.

        Raises:
            ConfigurationError: If no signing secret is configured
        """
        if not self._secret:
            raise ConfigurationError(
                "Server authentication not configured",
                code="JWT_SECRET_MISSING",
            )

        now = datetime.now(timezone.utc)
        payload = {
            "sub": str(subject),
            "email": email,
            "role": UserRole(role).value,
            "iat": int(now.timestamp()),
            "exp": int((now + timedelta(seconds=self._expires_in)).timestamp()),
        }
        return jwt.encode(payload, self._secret, algorithm=ALGORITHM)

    def verify(self, token: str) -> AuthenticatedUser:
        """
        Decode and validate a token.

        Raises:
            InvalidTokenError: For any token that cannot be trusted
        """
        if not self._secret:
            raise InvalidTokenError()

        try:
            decoded = jwt.decode(
                token,
                self._secret,
                algorithms=[ALGORITHM],
                options={"require": ["sub", "exp", "iat"]},
            )
            payload = JWTPayload(**decoded)
            return AuthenticatedUser(
                id=int(payload.sub),
                email=payload.email,
                role=payload.role,
            )
        except (jwt.InvalidTokenError, PydanticValidationError, ValueError, TypeError):
            raise InvalidTokenError()
