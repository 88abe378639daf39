"""
Application configuration.

Loads settings from environment variables (prefix ``HELPS_``) and .env file.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode. Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        host: Interface the listener binds to.
        port: Port the listener binds to.
        error_id_header: Response header carrying the error id.
        rate_limit_enabled: Apply the default rate limit to all routes.
        rate_limit_default: Default rate limit for all endpoints.
    """

    model_config = SettingsConfigDict(
        env_prefix="HELPS_", env_file=".env", env_file_encoding="utf-8"
    )

    project_name: str = "helps"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 9090
    error_id_header: str = "X-Error-Id"
    rate_limit_enabled: bool = True
    rate_limit_default: str = "60/minute"


settings = Settings()
