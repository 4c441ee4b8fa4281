"""
Bearer token guard chain.

Every protected route runs the same ordered checks:

1. public routes pass without a token;
2. the bearer token is verified and the identity attached to the request;
3. if the route names required roles, the identity's role must be one of them.

The first failing check ends the request (401 for steps 1-2, 403 for 3),
and the route handler never runs.
"""

import logging
from typing import Iterable, Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from modules.auth.exceptions import ForbiddenError, MissingTokenError
from modules.auth.tokens import TokenService
from shared.models import AuthenticatedUser, UserRole

from ..dependencies import get_token_service

logger = logging.getLogger(__name__)

# Bearer token extractor; a missing header is reported by the guard itself
bearer_scheme = HTTPBearer(auto_error=False)


class AccessGuard:
    """
    Dependency enforcing authentication and, optionally, a role set.

    Usage:
        router = APIRouter(dependencies=[Depends(require_auth)])

        @router.post("/members", dependencies=[Depends(require_roles(UserRole.ADMIN))])
        async def invite(...): ...
    """

    def __init__(self, roles: Optional[Iterable[UserRole]] = None, public: bool = False):
        self.roles = frozenset(roles or ())
        self.public = public

    def check(self, token: Optional[str], tokens: TokenService) -> Optional[AuthenticatedUser]:
        """
        Run the checks in order and return the identity (None on public routes).

        Raises:
            MissingTokenError: No bearer token was sent
            InvalidTokenError: The token failed verification
            ForbiddenError: The identity lacks every required role
        """
        if self.public:
            return None

        if not token:
            raise MissingTokenError()
        user = tokens.verify(token)

        if self.roles and user.role not in self.roles:
            logger.info(f"User {user.id} with role {user.role.value} denied")
            raise ForbiddenError(
                required_roles=sorted(role.value for role in self.roles),
                user_role=user.role.value,
            )
        return user

    async def __call__(
        self,
        request: Request,
        credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
        tokens: TokenService = Depends(get_token_service),
    ) -> Optional[AuthenticatedUser]:
        token = credentials.credentials if credentials else None
        user = self.check(token, tokens)
        if user is not None:
            request.state.user = user
        return user


require_auth = AccessGuard()
public_route = AccessGuard(public=True)


def require_roles(*roles: UserRole) -> AccessGuard:
    """Guard that authenticates and then requires one of ``roles``."""
    return AccessGuard(roles=roles)


async def get_current_user(
    user: Optional[AuthenticatedUser] = Depends(require_auth),
) -> AuthenticatedUser:
    """
    Dependency that requires authentication and returns the identity.

    Usage:
        @router.post("/profile")
        async def profile(user: AuthenticatedUser = Depends(get_current_user)):
            return {"user_id": user.id}
    """
    return user
