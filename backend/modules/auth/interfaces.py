"""
Authentication module interface.

Other modules should depend on these protocols, not the concrete
implementations. This enables testing with in-memory fakes.
"""

from typing import Protocol, Optional, runtime_checkable

from shared.models import UserRole

from .models import LoginResponse, SanitizedUser, UserRecord


@runtime_checkable
class IUserRepository(Protocol):
    """Credential store for user records."""

    def get_by_email(self, email: str) -> Optional[UserRecord]:
        """Return the user with this email, or None."""
        ...

    def create(self, email: str, password_hash: str, role: UserRole) -> UserRecord:
        """
        Insert a new user.

        Raises:
            DuplicateEmailError: If the email is already taken
        """
        ...

    def update_role(self, user_id: int, role: UserRole) -> Optional[UserRecord]:
        """Change a user's role (admin action). Returns None if the user is unknown."""
        ...


@runtime_checkable
class IAuthService(Protocol):
    """
    Interface for authentication operations.

    This protocol defines the contract that the auth module exposes
    to the API layer.
    """

    async def login(self, email: str, password: str) -> LoginResponse:
        """
        Check credentials and issue an access token.

        Raises:
            InvalidCredentialsError: If the email is unknown or the password is wrong
        """
        ...

    async def register(
        self,
        email: str,
        password: str,
        role: Optional[UserRole] = None,
    ) -> SanitizedUser:
        """
        Create a user with a hashed password (VIEWER unless a role is given).

        Raises:
            DuplicateEmailError: If the email already exists
        """
        ...
