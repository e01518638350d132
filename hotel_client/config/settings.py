"""
Settings and configuration management for the Hotel Mania API client.

Provides environment-based configuration using Pydantic settings for the
API endpoint, retry policy, session persistence and logging.
"""

from pathlib import Path

from pydantic import ConfigDict, Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Configuration settings for the Hotel Mania API client.

    Uses environment variables with HOTEL_ prefix for configuration.
    """

    # API Configuration
    api_url: str = Field(
        "http://localhost:5002", description="Base URL of the Hotel Mania API"
    )
    environment: str = Field(
        "development",
        description="Deployment environment (production/staging/development)",
    )

    # Client Configuration
    request_timeout: float = Field(
        30.0, description="HTTP request timeout in seconds", ge=1, le=300
    )
    max_retries: int = Field(
        3, description="Maximum number of retry attempts", ge=0, le=10
    )
    retry_delay: float = Field(
        1.0, description="Base retry backoff time in seconds", ge=0.0, le=60.0
    )
    retry_multiplier: float = Field(
        2.0, description="Exponential backoff multiplier", ge=1.0, le=10.0
    )

    # Session Configuration
    persist_session: bool = Field(
        True, description="Persist the session credential to disk"
    )
    session_file: str | None = Field(
        None,
        description="Session storage file (defaults to ~/.hotel_client/session.json)",
    )
    auth_redirect_path: str = Field(
        "/auth", description="Path navigated to when the session expires"
    )
    auth_paths: list[str] = Field(
        default_factory=lambda: ["/auth", "/login"],
        description="Locations treated as authentication pages",
    )
    home_path: str = Field(
        "/", description="Path navigated to after a login that stores a session"
    )

    # Monitoring Configuration
    enable_monitoring: bool = Field(
        True, description="Record request metrics in the health monitor"
    )

    # Logging Configuration
    enable_debug: bool = Field(
        False, description="Log every request with its duration"
    )
    log_level: str = Field(
        "INFO", description="Logging level (DEBUG, INFO, WARNING, ERROR)"
    )
    log_format: str = Field(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Logging format string",
    )
    enable_structured_logging: bool = Field(
        False, description="Enable structured logging with JSON format"
    )

    model_config = ConfigDict(
        env_file=".env", env_prefix="HOTEL_", case_sensitive=False, extra="ignore"
    )

    def get_client_config(self) -> dict[str, str | float]:
        """
        Get HTTP transport configuration dictionary.

        Returns:
            Dictionary containing transport configuration
        """
        return {
            "base_url": self.api_url,
            "timeout": self.request_timeout,
        }

    def get_retry_config(self) -> dict[str, int | float]:
        """
        Get retry policy configuration dictionary.

        Returns:
            Dictionary containing retry configuration
        """
        return {
            "max_retries": self.max_retries,
            "base_delay": self.retry_delay,
            "multiplier": self.retry_multiplier,
        }

    def get_session_file(self) -> Path:
        """Resolve the session storage file path."""
        if self.session_file:
            return Path(self.session_file).expanduser()
        return Path.home() / ".hotel_client" / "session.json"

    def get_effective_log_level(self) -> str:
        return "DEBUG" if self.enable_debug else self.log_level.upper()

    def validate_required_settings(self) -> list[str]:
        """
        Validate that all required settings are present.

        Returns:
            List of missing settings (empty if all present)
        """
        missing = []

        if not self.api_url:
            missing.append("HOTEL_API_URL")

        if not self.auth_redirect_path:
            missing.append("HOTEL_AUTH_REDIRECT_PATH")

        return missing


# Global settings instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """
    Get the global settings instance.

    Returns:
        Settings instance
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
