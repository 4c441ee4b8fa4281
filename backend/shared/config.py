"""
Centralized configuration for the TaskBridge backend.

All settings are loaded from environment variables with sensible defaults.
Module-specific settings are namespaced (e.g., CLICKUP_*, SUPABASE_*, JWT_*).
"""

import re
from functools import lru_cache
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


_DURATION_PATTERN = re.compile(r"^\s*(\d+)\s*([smhd]?)\s*$", re.IGNORECASE)
_DURATION_UNITS = {"": 1, "s": 1, "m": 60, "h": 3600, "d": 86400}


def parse_duration(value: str | int) -> int:
    """
    Convert a duration such as ``3600``, ``"30m"``, ``"1h"`` or ``"7d"`` to seconds.

    Raises:
        ValueError: If the value is not a positive duration
    """
    if isinstance(value, int):
        seconds = value
    else:
        match = _DURATION_PATTERN.match(value)
        if not match:
            raise ValueError(f"Invalid duration: {value!r}")
        seconds = int(match.group(1)) * _DURATION_UNITS[match.group(2).lower()]

    if seconds <= 0:
        raise ValueError(f"Duration must be positive: {value!r}")
    return seconds


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "TaskBridge API"
    app_version: str = "1.0.0"
    environment: str = "development"
    debug: bool = False
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 3000
    reload: bool = False

    # CORS settings
    cors_origins: list[str] = ["*"]
    cors_allow_credentials: bool = False
    cors_allow_methods: list[str] = ["*"]
    cors_allow_headers: list[str] = ["*"]

    # Upstream task API (ClickUp)
    clickup_api_base_url: str = "https://api.clickup.com/api/v2"
    clickup_api_token: str = ""
    clickup_timeout_seconds: float = 30.0

    # Credential store
    database_url: str = ""  # PostgreSQL connection string (migrations, seeding)
    supabase_url: str = ""
    supabase_service_role_key: str = ""

    # Token signing
    jwt_secret: str = ""
    jwt_expires_in: int = 3600  # seconds; accepts "30m", "1h", "7d"

    # Rate limiting tiers (window in seconds, max requests per window)
    rate_limit_enabled: bool = True
    throttle_short_ttl: int = 60
    throttle_short_limit: int = 10
    throttle_medium_ttl: int = 600
    throttle_medium_limit: int = 100
    throttle_long_ttl: int = 3600
    throttle_long_limit: int = 1000

    # Feature Flags
    enable_usage_logging: bool = True

    @field_validator("jwt_expires_in", mode="before")
    @classmethod
    def _parse_jwt_expiry(cls, value):
        return parse_duration(value)

    @field_validator("clickup_api_base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @property
    def rate_limit_tiers(self) -> list[tuple[str, int, int]]:
        """Rate limit tiers as ``(name, window_seconds, limit)`` tuples."""
        return [
            ("short", self.throttle_short_ttl, self.throttle_short_limit),
            ("medium", self.throttle_medium_ttl, self.throttle_medium_limit),
            ("long", self.throttle_long_ttl, self.throttle_long_limit),
        ]


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
