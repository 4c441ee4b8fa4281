"""
Authentication service implementation.

Checks credentials against the user store, registers users and issues
bearer tokens.
"""

import asyncio
import logging
from typing import Optional

from shared.models import UserRole

from .exceptions import DuplicateEmailError, InvalidCredentialsError
from .interfaces import IAuthService, IUserRepository
from .models import LoginResponse, SanitizedUser
from .passwords import PasswordHasher
from .tokens import TokenService

logger = logging.getLogger(__name__)


class AuthService(IAuthService):
    """
    Implementation of the authentication service.

    Store lookups and bcrypt run in worker threads so they do not
    block the event loop.
    """

    def __init__(
        self,
        users: IUserRepository,
        tokens: TokenService,
        hasher: Optional[PasswordHasher] = None,
    ):
        self._users = users
        self._tokens = tokens
        self._hasher = hasher or PasswordHasher()

    async def login(self, email: str, password: str) -> LoginResponse:
        """Check credentials and issue an access token."""
        user = await asyncio.to_thread(self._users.get_by_email, email)
        if user is None:
            logger.info("Login failed: unknown email")
            raise InvalidCredentialsError()

        valid = await asyncio.to_thread(self._hasher.verify, password, user.password_hash)
        if not valid:
            logger.info(f"Login failed for user {user.id}: wrong password")
            raise InvalidCredentialsError()

        token = self._tokens.issue(user.id, user.email, user.role)
        return LoginResponse(access_token=token, user=user.sanitized())

    async def register(
        self,
        email: str,
        password: str,
        role: Optional[UserRole] = None,
    ) -> SanitizedUser:
        """Create a user; VIEWER unless a role is given."""
        existing = await asyncio.to_thread(self._users.get_by_email, email)
        if existing is not None:
            raise DuplicateEmailError(email)

        password_hash = await asyncio.to_thread(self._hasher.hash, password)
        user = await asyncio.to_thread(
            self._users.create,
            email,
            password_hash,
            role or UserRole.VIEWER,
        )
        logger.info(f"Registered user {user.id} with role {user.role.value}")
        return user.sanitized()
