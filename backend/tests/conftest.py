"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules.
"""

from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

import httpx
import jwt  # PyJWT
import pytest
from fastapi.testclient import TestClient

from api.app import create_app
from api.dependencies import (
    get_auth_service,
    get_token_service,
    get_upstream_client,
)
from modules.auth.exceptions import DuplicateEmailError
from modules.auth.models import UserRecord
from modules.auth.passwords import PasswordHasher
from modules.auth.service import AuthService
from modules.auth.tokens import TokenService
from modules.upstream.client import UpstreamClient
from modules.usage.models import ApiLogEntry
from shared.config import Settings
from shared.models import UserRole


# Test JWT secret (only for testing)
TEST_JWT_SECRET = "test-secret-key-for-testing-only"
TEST_UPSTREAM_TOKEN = "pk_test_upstream_token"
TEST_UPSTREAM_BASE = "https://upstream.test/api/v2"


def create_test_token(
    user_id: int = 1,
    email: str = "test@example.com",
    role: str = "VIEWER",
    expired: bool = False,
    secret: str = TEST_JWT_SECRET,
) -> str:
    """
    Create a test JWT token for authentication.

    Args:
        user_id: User ID to include in the token
        email: Email to include in the token
        role: Role claim
        expired: If True, creates an expired token
        secret: Signing secret

    Returns:
        JWT token string
    """
    now = datetime.now(timezone.utc)
    exp = now - timedelta(hours=1) if expired else now + timedelta(hours=1)

    payload = {
        "sub": str(user_id),
        "email": email,
        "role": role,
        "exp": int(exp.timestamp()),
        "iat": int(now.timestamp()),
    }
    return jwt.encode(payload, secret, algorithm="HS256")


def bearer(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


class InMemoryUserRepository:
    """Dict-backed user store with the same contract as UserRepository."""

    def __init__(self):
        self.users: dict[int, UserRecord] = {}
        self._next_id = 1

    def get_by_email(self, email: str) -> Optional[UserRecord]:
        return next((u for u in self.users.values() if u.email == email), None)

    def create(self, email: str, password_hash: str, role: UserRole) -> UserRecord:
        if self.get_by_email(email) is not None:
            raise DuplicateEmailError(email)
        now = datetime.now(timezone.utc)
        user = UserRecord(
            id=self._next_id,
            email=email,
            password_hash=password_hash,
            role=role,
            created_at=now,
            updated_at=now,
        )
        self.users[user.id] = user
        self._next_id += 1
        return user

    def update_role(self, user_id: int, role: UserRole) -> Optional[UserRecord]:
        user = self.users.get(user_id)
        if user is None:
            return None
        updated = user.model_copy(update={"role": role})
        self.users[user_id] = updated
        return updated


class InMemoryApiLogRepository:
    """List-backed API log store."""

    def __init__(self):
        self.entries: list[ApiLogEntry] = []

    def append(self, entry: ApiLogEntry) -> ApiLogEntry:
        stored = entry.model_copy(update={"id": len(self.entries) + 1})
        self.entries.append(stored)
        return stored


class RecordingTransport:
    """
    Mock upstream: records every request and answers with ``handler``.

    The default handler returns ``{"ok": true}``.
    """

    def __init__(self, handler: Optional[Callable[[httpx.Request], httpx.Response]] = None):
        self.requests: list[httpx.Request] = []
        self.handler = handler or (lambda request: httpx.Response(200, json={"ok": True}))

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.handler(request)

    def client(self) -> UpstreamClient:
        return UpstreamClient(
            base_url=TEST_UPSTREAM_BASE,
            api_token=TEST_UPSTREAM_TOKEN,
            transport=httpx.MockTransport(self),
        )


@pytest.fixture
def test_settings() -> Settings:
    """Settings isolated from the environment and any .env file."""
    return Settings(
        _env_file=None,
        jwt_secret=TEST_JWT_SECRET,
        clickup_api_base_url=TEST_UPSTREAM_BASE,
        clickup_api_token=TEST_UPSTREAM_TOKEN,
        rate_limit_enabled=False,
        enable_usage_logging=False,
    )


@pytest.fixture
def token_service() -> TokenService:
    return TokenService(secret=TEST_JWT_SECRET, expires_in=3600)


@pytest.fixture
def fast_hasher() -> PasswordHasher:
    """bcrypt with the minimum cost so tests stay fast."""
    return PasswordHasher(rounds=4)


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def auth_service(user_repository, token_service, fast_hasher) -> AuthService:
    return AuthService(users=user_repository, tokens=token_service, hasher=fast_hasher)


@pytest.fixture
def upstream() -> RecordingTransport:
    """Recording mock of the upstream API."""
    return RecordingTransport()


@pytest.fixture
def app(test_settings, token_service, auth_service, upstream):
    """A fresh app with the store and upstream substituted."""
    application = create_app(test_settings)
    application.dependency_overrides[get_token_service] = lambda: token_service
    application.dependency_overrides[get_auth_service] = lambda: auth_service
    application.dependency_overrides[get_upstream_client] = upstream.client
    return application


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


@pytest.fixture
def viewer_headers() -> dict[str, str]:
    return bearer(create_test_token(user_id=3, email="viewer@example.com", role="VIEWER"))


@pytest.fixture
def editor_headers() -> dict[str, str]:
    return bearer(create_test_token(user_id=2, email="editor@example.com", role="EDITOR"))


@pytest.fixture
def admin_headers() -> dict[str, str]:
    return bearer(create_test_token(user_id=1, email="admin@example.com", role="ADMIN"))
