"""
Configuration management using Pydantic Settings.

This module provides type-safe, validated configuration loading from environment
variables. Everything here is fixed at process start; nothing is hot-reloaded.

Architecture:
- Flat Settings structure (no nesting)
- All config loaded from environment variables
- Type validation via Pydantic
- No hard-coded values in handlers or workers (they receive settings values)

Usage:
    from src.core.config import get_settings

    settings = get_settings()
    capacity = settings.notification_queue_capacity
    interval = settings.ban_expiry_interval_seconds

    # Environment detection
    if settings.is_production:
        # Real notification transport
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.core.enums import Environment


class Settings(BaseSettings):
    """
    Main application settings (flat structure).

    Loads configuration from environment variables. Every field has a default
    suitable for local development so the side-effect runtime can start with
    an empty environment.

    Configuration precedence:
        1. Environment variables
        2. Default values
    """

    # Environment detection
    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Application environment (development, testing, ci, production)",
    )

    # Core application settings
    debug: bool = Field(
        default=False,
        description="Enable debug mode",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    app_name: str = Field(
        default="Fuel App Side Effects",
        description="Application name",
    )
    app_version: str = Field(
        default="0.1.0",
        description="Application version",
    )
    aws_region: str = Field(
        default="us-east-1",
        description="AWS region for SES notification delivery",
    )

    # Cache configuration (Redis)
    redis_url: str = Field(
        default="redis://localhost:6379/0",
        description="Redis connection URL (e.g., redis://host:port/db)",
    )
    cache_key_namespace: str | None = Field(
        default=None,
        description="Optional namespace prepended to every cache key (namespace:key)",
    )
    cache_default_ttl_seconds: int = Field(
        default=1800,
        description="TTL applied by cache-aside reads when none is given (30 minutes)",
    )
    cache_delete_batch_size: int = Field(
        default=500,
        description="Keys per DEL command when bulk-deleting by prefix",
    )

    # Outbound notifications
    notification_queue_capacity: int = Field(
        default=1000,
        description="Maximum queued notifications before producers wait (backpressure)",
    )
    notification_enqueue_timeout_seconds: float | None = Field(
        default=None,
        description="Give up enqueueing after this many seconds (None = wait indefinitely)",
    )
    mail_from: str = Field(
        default="no-reply@fuelapp.local",
        description="Sender address for outbound notifications",
    )
    mail_display_name: str = Field(
        default="Fuel App",
        description="Sender display name for outbound notifications",
    )
    frontend_url: str = Field(
        default="http://localhost:4000",
        description="Frontend base URL used to build confirmation links",
    )

    # Reconciliation workers
    ban_expiry_interval_seconds: float = Field(
        default=1800,
        description="Seconds between ban-expiry sweeps (30 minutes)",
    )
    proposal_expiry_interval_seconds: float = Field(
        default=3600,
        description="Seconds between proposal-expiry sweeps (1 hour)",
    )
    proposal_expiry_window_hours: float = Field(
        default=24,
        description="Pending proposals older than this are auto-rejected",
    )

    model_config = SettingsConfigDict(
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator(
        "notification_queue_capacity",
        "cache_delete_batch_size",
        "cache_default_ttl_seconds",
    )
    @classmethod
    def validate_positive_int(cls, v: int) -> int:
        """
        Validate sizes and TTLs are strictly positive.

        Args:
            v: Configured value.

        Returns:
            int: Validated value.

        Raises:
            ValueError: If the value is zero or negative.
        """
        if v <= 0:
            raise ValueError("value must be greater than 0")
        return v

    @field_validator(
        "ban_expiry_interval_seconds",
        "proposal_expiry_interval_seconds",
        "proposal_expiry_window_hours",
    )
    @classmethod
    def validate_positive_duration(cls, v: float) -> float:
        """
        Validate sweep intervals and expiry windows are strictly positive.

        Args:
            v: Configured duration.

        Returns:
            float: Validated duration.

        Raises:
            ValueError: If the duration is zero or negative.
        """
        if v <= 0:
            raise ValueError("duration must be greater than 0")
        return v

    @field_validator("notification_enqueue_timeout_seconds")
    @classmethod
    def validate_enqueue_timeout(cls, v: float | None) -> float | None:
        """
        Validate the optional enqueue timeout.

        Args:
            v: Timeout in seconds, or None to wait indefinitely.

        Returns:
            float | None: Validated timeout.

        Raises:
            ValueError: If a timeout is given and is not positive.
        """
        if v is not None and v <= 0:
            raise ValueError("notification_enqueue_timeout_seconds must be positive")
        return v

    @field_validator("frontend_url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """
        Validate URL format and strip the trailing slash.

        Args:
            v: URL string.

        Returns:
            str: URL without trailing slash.

        Raises:
            ValueError: If URL doesn't start with http:// or https://.
        """
        if not v.startswith(("http://", "https://")):
            raise ValueError("URL must start with http:// or https://")
        return v.rstrip("/")

    @property
    def is_development(self) -> bool:
        """
        Check if running in development environment.

        Returns:
            bool: True if environment is development.
        """
        return self.environment == Environment.DEVELOPMENT

    @property
    def is_testing(self) -> bool:
        """
        Check if running in testing environment.

        Returns:
            bool: True if environment is testing.
        """
        return self.environment == Environment.TESTING

    @property
    def is_production(self) -> bool:
        """
        Check if running in production environment.

        Returns:
            bool: True if environment is production.
        """
        return self.environment == Environment.PRODUCTION


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are loaded only once per process.

    Returns:
        Settings: Cached settings instance.
    """
    return Settings()
