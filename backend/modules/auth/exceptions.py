"""
Authentication module exceptions.

These exceptions are raised by the auth module and the guard chain and
are rendered by the API error handlers with their status code.
"""

from shared.exceptions import AuthenticationError, AuthorizationError, ConflictError


class InvalidCredentialsError(AuthenticationError):
    """Raised when the email is unknown or the password does not match."""

    def __init__(self, message: str = "Invalid credentials"):
        super().__init__(message, code="INVALID_CREDENTIALS")


class InvalidTokenError(AuthenticationError):
    """
    Raised when a bearer token cannot be trusted.

    Malformed, badly signed and expired tokens all raise this one error
    with the same message.
    """

    def __init__(self, message: str = "Invalid or expired token"):
        super().__init__(message, code="INVALID_TOKEN")


class MissingTokenError(AuthenticationError):
    """Raised when no authentication token is provided."""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message, code="MISSING_TOKEN")


class DuplicateEmailError(ConflictError):
    """Raised when registering an email that already has an account."""

    def __init__(self, email: str):
        super().__init__(
            "Email already exists",
            code="DUPLICATE_EMAIL",
            details={"email": email},
        )


class ForbiddenError(AuthorizationError):
    """Raised when the user's role is not allowed on a route."""

    def __init__(self, required_roles: list[str], user_role: str):
        super().__init__(
            "Insufficient permissions",
            code="FORBIDDEN",
            details={"required_roles": required_roles, "user_role": user_role},
        )
