# =============================================================================
# deej_web/config.py - Application Settings
# =============================================================================
# This module loads configuration from environment variables using pydantic-settings.
# It provides a single Settings class with all configuration values.
#
# Usage:
#   from deej_web.config import settings
#   print(settings.WEB_PORT)
#
# Environment variables are loaded from:
# 1. System environment variables
# 2. .env file in the working directory (if exists)
#
# These are start-up defaults only. A running WebServer never re-reads them;
# its port is fixed when it is constructed.
# =============================================================================

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_WEB_PORT = 9123
DEFAULT_SHUTDOWN_TIMEOUT_SECONDS = 5.0


class Settings(BaseSettings):
    """
    Web UI settings loaded from environment variables.

    Every value has a sensible default so the server starts with no
    configuration at all.
    """

    # -------------------------------------------------------------------------
    # Server Settings
    # -------------------------------------------------------------------------

    WEB_HOST: str = Field(
        default="0.0.0.0",
        description="Interface the web server binds to"
    )

    WEB_PORT: int = Field(
        default=DEFAULT_WEB_PORT,
        ge=1,
        le=65535,
        description="Port for the web server"
    )

    SHUTDOWN_TIMEOUT_SECONDS: float = Field(
        default=DEFAULT_SHUTDOWN_TIMEOUT_SECONDS,
        gt=0,
        le=60,
        description="How long stop() waits for in-flight requests"
    )

    STATIC_DIR: str | None = Field(
        default=None,
        description="Directory holding the web UI bundle (defaults to the packaged one)"
    )

    # -------------------------------------------------------------------------
    # Host Integration
    # -------------------------------------------------------------------------

    CONFIG_PATH: str = Field(
        default="config.json",
        description="Slider mapping file used by the command-line runner"
    )

    # -------------------------------------------------------------------------
    # Application Settings
    # -------------------------------------------------------------------------

    DEBUG: bool = Field(
        default=False,
        description="Enable debug logging (includes the HTTP access log)"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        case_sensitive=True,
        extra="ignore",
    )

    @property
    def web_url(self) -> str:
        """URL the web UI is reachable at on this machine."""
        return f"http://localhost:{self.WEB_PORT}"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached Settings instance.

    Using lru_cache ensures we only parse .env and validate once.
    """
    return Settings()


# Global settings instance for easy importing
settings = get_settings()
