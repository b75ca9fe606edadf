"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here — no scattered magic strings.
"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode. Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        rate_limit_default: Default rate limit for all endpoints.
        rate_limit_subscribe: Rate limit for the subscribe endpoint.
        rate_limit_publish: Rate limit for the publish endpoint.

    AWS settings use the standard AWS environment variable names. When the
    access key or secret is left unset, boto3 resolves credentials from the
    execution environment (instance profile, shared config, etc.).
    """

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    project_name: str = "Trading History Notifications"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    rate_limit_default: str = "60/minute"
    rate_limit_subscribe: str = "10/minute"
    rate_limit_publish: str = "30/minute"

    # AWS / SNS
    aws_access_key_id: Optional[str] = None
    aws_secret_access_key: Optional[str] = None
    aws_session_token: Optional[str] = None
    aws_region: str = "us-east-1"
    sns_topic_arn: str = ""
    sns_filter_categories: list[str] = Field(default_factory=list)
    sns_timeout_seconds: float = Field(default=10.0, gt=0)


def load_settings() -> Settings:
    """Read a fresh Settings instance.

    Used where a configuration change must take effect on the next call
    without restarting the process.
    """
    return Settings()


settings = Settings()
