"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here, including the error boundary.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode. Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        rate_limit_default: Default rate limit for all endpoints.
        internal_error_limit: Error codes at or below this value are
            internal-only and never exposed verbatim to API clients.
        strict_unique_codes: Refuse to start when the error catalog
            registers the same code twice.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    project_name: str = "Errno"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    rate_limit_default: str = "60/minute"
    internal_error_limit: int = 10007
    strict_unique_codes: bool = True


settings = Settings()
