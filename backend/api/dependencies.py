"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. Each module exposes its service through an interface,
and this file creates the concrete implementations.

Every application built by create_app owns one container, created from
the settings that app was given and kept on ``app.state.container``.

Resource proxies are built per request around the one shared upstream
client, so overriding get_upstream_client swaps the transport for every
proxy at once.
"""

from typing import TYPE_CHECKING

from fastapi import Depends, Request

from modules.upstream.client import UpstreamClient
from shared.config import Settings, get_settings

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from modules.auth.interfaces import IAuthService, IUserRepository
    from modules.auth.tokens import TokenService
    from modules.usage.interfaces import IUsageService
    from modules.tasks.service import TasksService
    from modules.spaces.service import SpacesService
    from modules.lists.service import ListsService
    from modules.workspaces.service import WorkspacesService


class ServiceContainer:
    """
    Container for all service instances.

    This class manages the lifecycle of service instances and their
    dependencies. Services are created lazily on first access.

    All services are cached as singletons within the container.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or get_settings()
        self._token_service: "TokenService | None" = None
        self._user_repository: "IUserRepository | None" = None
        self._auth_service: "IAuthService | None" = None
        self._usage_service: "IUsageService | None" = None
        self._upstream_client: UpstreamClient | None = None

    @property
    def tokens(self) -> "TokenService":
        """Get the token issuer/verifier."""
        if self._token_service is None:
            from modules.auth.tokens import TokenService
            self._token_service = TokenService(
                secret=self.settings.jwt_secret,
                expires_in=self.settings.jwt_expires_in,
            )
        return self._token_service

    @property
    def users(self) -> "IUserRepository":
        """Get the user repository instance."""
        if self._user_repository is None:
            from modules.auth.repository import UserRepository
            from shared.database import get_supabase_client
            self._user_repository = UserRepository(get_supabase_client())
        return self._user_repository

    @property
    def auth(self) -> "IAuthService":
        """Get the auth service instance."""
        if self._auth_service is None:
            from modules.auth.service import AuthService
            self._auth_service = AuthService(users=self.users, tokens=self.tokens)
        return self._auth_service

    @property
    def usage(self) -> "IUsageService":
        """Get the usage logging service instance."""
        if self._usage_service is None:
            from modules.usage.repository import ApiLogRepository
            from modules.usage.service import UsageService
            from shared.database import get_supabase_client
            self._usage_service = UsageService(ApiLogRepository(get_supabase_client()))
        return self._usage_service

    @property
    def upstream(self) -> UpstreamClient:
        """Get the shared upstream API client."""
        if self._upstream_client is None:
            self._upstream_client = UpstreamClient.from_settings(self.settings)
        return self._upstream_client

    async def aclose(self) -> None:
        """Release pooled connections."""
        if self._upstream_client is not None:
            await self._upstream_client.aclose()
            self._upstream_client = None


def get_container(request: Request) -> ServiceContainer:
    """The service container of the application serving this request."""
    return request.app.state.container


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_token_service(container: ServiceContainer = Depends(get_container)) -> "TokenService":
    """FastAPI dependency for the token service."""
    return container.tokens


def get_auth_service(container: ServiceContainer = Depends(get_container)) -> "IAuthService":
    """FastAPI dependency for auth service."""
    return container.auth


def get_usage_service(container: ServiceContainer) -> "IUsageService":
    """Usage service accessor (used by the usage logging middleware)."""
    return container.usage


def get_upstream_client(container: ServiceContainer = Depends(get_container)) -> UpstreamClient:
    """FastAPI dependency for the shared upstream client."""
    return container.upstream


def get_tasks_service(
    client: UpstreamClient = Depends(get_upstream_client),
) -> "TasksService":
    """FastAPI dependency for the tasks proxy."""
    from modules.tasks.service import TasksService
    return TasksService(client)


def get_spaces_service(
    client: UpstreamClient = Depends(get_upstream_client),
) -> "SpacesService":
    """FastAPI dependency for the spaces proxy."""
    from modules.spaces.service import SpacesService
    return SpacesService(client)


def get_lists_service(
    client: UpstreamClient = Depends(get_upstream_client),
) -> "ListsService":
    """FastAPI dependency for the lists proxy."""
    from modules.lists.service import ListsService
    return ListsService(client)


def get_workspaces_service(
    client: UpstreamClient = Depends(get_upstream_client),
) -> "WorkspacesService":
    """FastAPI dependency for the users & workspaces proxy."""
    from modules.workspaces.service import WorkspacesService
    return WorkspacesService(client)
