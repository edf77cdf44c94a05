"""
Configuration Management Module

Loads client settings from environment variables (or a .env file) and turns
them into the immutable ClientConfig the API client is built from.

Uses Pydantic Settings for validation and type conversion. All variables use
the IONOMY_ prefix:

    IONOMY_API_URL=https://ionomy.com/api/v1/
    IONOMY_API_KEY=...
    IONOMY_API_SECRET=...
    IONOMY_KEEP_ALIVE=true
    IONOMY_REQUEST_TIMEOUT=30
    IONOMY_LOG_LEVEL=INFO

Usage:
    from ionomy.core.config import settings

    config = settings.client_config()
"""

from typing import Optional
from urllib.parse import urlparse

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from ionomy.core.schemas import ClientConfig, DEFAULT_API_URL


class Settings(BaseSettings):
    """
    Client Settings

    Attributes:
        api_url: Base URL of the Ionomy API
        api_key: API key (optional, not needed for public endpoints)
        api_secret: API secret (optional, not needed for public endpoints)
        keep_alive: Reuse HTTP connections between requests
        request_timeout: Total timeout per HTTP request in seconds
        log_level: Logging level used by setup_logging()
    """

    # ============================================
    # Ionomy API Configuration
    # ============================================

    api_url: str = Field(
        default=DEFAULT_API_URL,
        description="Ionomy API base URL"
    )

    api_key: str = Field(
        default="",
        description="Ionomy API key (optional for public endpoints)"
    )

    api_secret: str = Field(
        default="",
        description="Ionomy API secret (optional for public endpoints)"
    )

    # ============================================
    # HTTP Configuration
    # ============================================

    keep_alive: bool = Field(
        default=True,
        description="Use persistent (keep-alive) connections"
    )

    request_timeout: Optional[float] = Field(
        default=30.0,
        description="HTTP request timeout in seconds"
    )

    # ============================================
    # Application Configuration
    # ============================================

    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )

    model_config = SettingsConfigDict(
        env_prefix="IONOMY_",
        env_file=".env",
        extra="ignore",
        case_sensitive=False
    )

    @property
    def has_credentials(self) -> bool:
        """True when both API key and secret are configured"""
        return bool(self.api_key and self.api_secret)

    def client_config(self, **overrides) -> ClientConfig:
        """
        Build an immutable ClientConfig from these settings.

        Args:
            **overrides: ClientConfig fields that take precedence over settings

        Example:
            >>> Settings(api_key="k", api_secret="s").client_config(keep_alive=False).keep_alive
            False
        """
        values = {
            "api": self.api_url,
            "api_key": self.api_key or None,
            "api_secret": self.api_secret or None,
            "keep_alive": self.keep_alive,
            "request_timeout": self.request_timeout,
        }
        values.update(overrides)
        return ClientConfig(**values)


settings = Settings()


# ============================================
# Configuration Validation
# ============================================

def validate_configuration(config: Optional[Settings] = None) -> None:
    """
    Validate settings before building a client.

    Args:
        config: Settings to check (defaults to the module-level settings)

    Raises:
        ValueError: If a setting is invalid
    """
    from ionomy.core.logging import logger

    config = config or settings

    parsed = urlparse(config.api_url)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ValueError(
            f"Invalid IONOMY_API_URL: '{config.api_url}'. "
            f"Must be an absolute http(s) URL"
        )

    if config.request_timeout is not None and config.request_timeout <= 0:
        raise ValueError(
            f"Invalid IONOMY_REQUEST_TIMEOUT: {config.request_timeout}. Must be positive"
        )

    valid_log_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
    if config.log_level.upper() not in valid_log_levels:
        raise ValueError(
            f"Invalid IONOMY_LOG_LEVEL: '{config.log_level}'. "
            f"Must be one of: {', '.join(valid_log_levels)}"
        )

    if bool(config.api_key) != bool(config.api_secret):
        logger.warning("Only one of IONOMY_API_KEY / IONOMY_API_SECRET is set; requests will be unsigned")

    logger.info("Configuration validated successfully")
    logger.info(f"Ionomy API: {config.api_url}")
    logger.info(f"Authenticated: {'yes' if config.has_credentials else 'no'}")
    logger.info(f"Keep-alive: {config.keep_alive}")
