"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

import logging
import time
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shared.config import Settings, get_settings
from modules.auth.routes import router as auth_router
from modules.lists.routes import router as lists_router
from modules.spaces.routes import router as spaces_router
from modules.tasks.routes import router as tasks_router
from modules.workspaces.routes import router as users_router

from .dependencies import ServiceContainer
from .errors import register_exception_handlers
from .middleware.rate_limit import RateLimitMiddleware
from .middleware.usage_logging import ApiLoggingMiddleware
from .routes import health

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Runs startup and shutdown logic.
    """
    # Startup
    settings: Settings = app.state.settings
    app.state.started_at = time.monotonic()
    logger.info(f"Starting {settings.app_name} on {settings.host}:{settings.port}")
    if not settings.jwt_secret:
        logger.warning("JWT_SECRET is not set; logins will fail")
    if not settings.clickup_api_token:
        logger.warning("CLICKUP_API_TOKEN is not set; proxied reads will fail")
    yield
    # Shutdown
    await app.state.container.aclose()
    logger.info(f"Shutting down {settings.app_name}")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Settings to use instead of the environment (tests)

    Returns:
        Configured FastAPI instance
    """
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Authenticated gateway for a third-party task management API",
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/api/docs" if settings.debug else None,
        redoc_url="/api/redoc" if settings.debug else None,
    )
    app.state.settings = settings
    app.state.container = ServiceContainer(settings)
    app.state.started_at = time.monotonic()
    app.dependency_overrides[get_settings] = lambda: settings

    register_exception_handlers(app)

    # Last added runs first: CORS, then request logging, then rate limiting
    app.add_middleware(
        RateLimitMiddleware,
        tiers=settings.rate_limit_tiers,
        enabled=settings.rate_limit_enabled,
    )
    app.add_middleware(ApiLoggingMiddleware, persist=settings.enable_usage_logging)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    # Register routes
    app.include_router(health.router, tags=["health"])
    app.include_router(auth_router, prefix="/auth", tags=["auth"])
    app.include_router(tasks_router, prefix="/api/tasks", tags=["tasks"])
    app.include_router(spaces_router, prefix="/api/spaces", tags=["spaces"])
    app.include_router(lists_router, prefix="/api/lists", tags=["lists"])
    app.include_router(users_router, prefix="/api/users", tags=["users"])

    return app


# Application instance for uvicorn
app = create_app()
