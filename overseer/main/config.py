"""
Application Settings - Main Layer

Use Pydantic Settings for configuration management.
This module handles configuration settings provided using
environment variables, .env files and default values.
"""

from typing import Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from overseer.shared import EnumEnvironment, EnumLogLevel, EnumRetryStrategy
from overseer.shared.env import load_secret_file_variables  # noqa: F401


class DatabaseSettings(BaseSettings):
    """Database configuration settings."""

    mongo_uri: str = Field(
        default="mongodb://localhost:27017/overseer",
        description="MongoDB connection URI",
    )
    database_name: str = Field(
        default="overseer", description="Name of the MongoDB database"
    )

    model_config = SettingsConfigDict(
        env_prefix="DB_", case_sensitive=False, extra="ignore"
    )


class APISettings(BaseSettings):
    """HTTP API and build metadata settings."""

    title: str = Field(default="Overseer", description="API title")
    description: str = Field(
        default="Tracks which version runs in which instance, "
        "sourced from the Nomad event stream",
        description="API description",
    )
    version: str = Field(default="1.0.0", description="API version")
    git_commit: str = Field(
        default="unknown",
        description="Git commit hash",
        validation_alias=AliasChoices("API_GIT_COMMIT", "GIT_COMMIT"),
    )
    build_time: str = Field(
        default="unknown",
        description="Build timestamp",
        validation_alias=AliasChoices("API_BUILD_TIME", "BUILD_TIME"),
    )
    debug: bool = Field(default=False, description="Enable debug mode")
    port: int = Field(default=8000, description="Port to bind the server")

    model_config = SettingsConfigDict(
        env_prefix="API_", case_sensitive=False, extra="ignore"
    )


class NomadSettings(BaseSettings):
    """Nomad event stream settings."""

    enabled: bool = Field(
        default=True,
        description="Consume the Nomad event stream (an idle source otherwise)",
    )
    address: str = Field(
        default="http://localhost:4646", description="Nomad HTTP API address"
    )
    token: str = Field(default="", description="ACL token (or NOMAD_TOKEN_FILE)")
    topic: str = Field(default="Job", description="Event stream topic filter")
    queue_size: int = Field(
        default=10, ge=1, description="Capacity of the deployment event channel"
    )
    retry_strategy: EnumRetryStrategy = Field(
        default=EnumRetryStrategy.FIXED, description="Reconnect delay curve"
    )
    retry_delay_seconds: float = Field(
        default=5.0, ge=0, description="Fixed delay, or first exponential delay"
    )
    retry_max_delay_seconds: float = Field(
        default=60.0, ge=0, description="Upper bound of exponential delays"
    )
    retry_multiplier: float = Field(
        default=2.0, ge=1, description="Growth factor of exponential delays"
    )
    retry_jitter: bool = Field(
        default=False, description="Randomize exponential delays"
    )
    connect_timeout_seconds: float = Field(
        default=10.0, gt=0, description="Connection timeout of the event stream"
    )
    resume_from_cursor: bool = Field(
        default=True,
        description="Persist the last consumed index and resume from it",
    )
    subscription_name: str = Field(
        default="overseer", description="Key of the persisted stream cursor"
    )

    model_config = SettingsConfigDict(
        env_prefix="NOMAD_", case_sensitive=False, extra="ignore"
    )


class LoggingSettings(BaseSettings):
    """Logging configuration settings."""

    level: EnumLogLevel = Field(default=EnumLogLevel.INFO, description="Logging level")
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Logging format",
    )
    file_path: Optional[str] = Field(
        default=None, description="Log file path (if None, logs to console)"
    )

    model_config = SettingsConfigDict(
        env_prefix="LOG_", case_sensitive=False, extra="ignore"
    )


class AppSettings(BaseSettings):
    """Main application settings, aggregating all sub-settings."""

    environment: EnumEnvironment = Field(
        default=EnumEnvironment.DEVELOPMENT, description="Application environment"
    )

    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    api: APISettings = Field(default_factory=APISettings)
    nomad: NomadSettings = Field(default_factory=NomadSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_nested_delimiter="__",
        extra="ignore",
    )


def get_settings() -> AppSettings:
    """
    Build the application settings.

    Patched in tests to provide settings per environment.
    """
    return AppSettings()


settings = get_settings()
