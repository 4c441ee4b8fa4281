"""
Authentication API endpoints.

Login and registration are public; profile requires a valid token.
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_auth_service
from api.middleware.auth import get_current_user, public_route
from shared.models import AuthenticatedUser

from .interfaces import IAuthService
from .models import LoginRequest, LoginResponse, RegisterRequest, SanitizedUser

router = APIRouter()


@router.post(
    "/login",
    response_model=LoginResponse,
    dependencies=[Depends(public_route)],
)
async def login(
    request: LoginRequest,
    service: IAuthService = Depends(get_auth_service),
) -> LoginResponse:
    """Exchange email and password for an access token."""
    return await service.login(request.email, request.password)


@router.post(
    "/register",
    response_model=SanitizedUser,
    status_code=201,
    dependencies=[Depends(public_route)],
)
async def register(
    request: RegisterRequest,
    service: IAuthService = Depends(get_auth_service),
) -> SanitizedUser:
    """Create a new user. The role defaults to VIEWER."""
    return await service.register(request.email, request.password, request.role)


@router.post("/profile", response_model=AuthenticatedUser)
async def profile(
    user: AuthenticatedUser = Depends(get_current_user),
) -> AuthenticatedUser:
    """Return the identity carried by the bearer token."""
    return user
