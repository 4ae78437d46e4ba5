"""Configuration module for the ShipHero SDK.

Uses pydantic-settings for environment variable loading and validation.
"""

from enum import Enum
from functools import lru_cache
from typing import Literal

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://public-api.shiphero.com"


class LogFormat(str, Enum):
    """Log output format."""

    CONSOLE = "console"
    JSON = "json"


class RetryPolicy(BaseModel):
    """Retry behaviour for transient transport failures.

    Timeouts, connection errors, HTTP 429 and HTTP 5xx responses are retried.

    Attributes:
        max_retries: Number of retries after the first attempt.
        retry_delay: Base delay in seconds between attempts.
        use_exponential_backoff: Double the delay on every further retry.
    """

    max_retries: int = Field(default=3, ge=0)
    retry_delay: float = Field(default=1.0, ge=0)
    use_exponential_backoff: bool = True


class ShipHeroSettings(BaseSettings):
    """SDK settings loaded from ``SHIPHERO_*`` environment variables.

    Environment variables can be set directly or via a .env file. Nested
    retry settings use a double underscore, e.g.
    ``SHIPHERO_RETRY_POLICY__MAX_RETRIES=5``.
    """

    model_config = SettingsConfigDict(
        env_prefix="SHIPHERO_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    # Credentials
    username: str = Field(
        ...,
        description="ShipHero account username or email",
    )
    password: str = Field(
        ...,
        description="ShipHero account password",
    )

    # Transport
    base_url: str = Field(
        default=DEFAULT_BASE_URL,
        description="Base URL of the ShipHero public API",
    )
    timeout: float = Field(
        default=30.0,
        gt=0,
        description="Per-request timeout in seconds",
    )
    auto_refresh_tokens: bool = Field(
        default=True,
        description="Renew the access token before it expires and on HTTP 401",
    )
    retry_policy: RetryPolicy | None = Field(
        default=None,
        description="Retry policy for transient failures (None disables retries)",
    )

    # Logging configuration
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )
    log_format: LogFormat = Field(
        default=LogFormat.CONSOLE,
        description="Log output format: console or json",
    )

    @field_validator("base_url", mode="after")
    @classmethod
    def normalize_base_url(cls, v: str) -> str:
        """Strip whitespace and trailing slashes from the base URL."""
        return v.strip().rstrip("/")

    @property
    def graphql_url(self) -> str:
        """Full GraphQL endpoint URL."""
        return f"{self.base_url}/graphql"

    @property
    def token_url(self) -> str:
        """Credential exchange endpoint URL."""
        return f"{self.base_url}/auth/token"

    @property
    def refresh_url(self) -> str:
        """Token refresh endpoint URL."""
        return f"{self.base_url}/auth/refresh"


@lru_cache
def get_settings() -> ShipHeroSettings:
    """Get cached SDK settings.

    Uses lru_cache to ensure settings are only loaded once.
    Call get_settings.cache_clear() to reload settings if needed.
    """
    return ShipHeroSettings()
