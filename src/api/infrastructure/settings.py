"""Application settings using pydantic-settings.

Settings are loaded from environment variables with sensible defaults
for development. The router launches the plugin as a subprocess, so every
value can also be supplied through a local `.env` file.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["debug", "info", "warning", "error", "critical"]


class PluginSettings(BaseSettings):
    """gRPC server settings for the plugin process.

    Environment variables:
        USERS_PLUGIN_GRPC_HOST: Interface the gRPC server binds to (default: 127.0.0.1)
        USERS_PLUGIN_GRPC_PORT: Port the gRPC server binds to, 0 picks a free port (default: 50051)
        USERS_PLUGIN_MAX_WORKERS: Size of the RPC handler thread pool (default: 10)
        USERS_PLUGIN_LOG_LEVEL: Minimum log level (default: info)
    """

    model_config = SettingsConfigDict(
        env_prefix="USERS_PLUGIN_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    grpc_host: str = Field(default="127.0.0.1", description="gRPC bind host")
    grpc_port: int = Field(
        default=50051,
        description="gRPC bind port (0 selects an ephemeral port)",
        ge=0,
        le=65535,
    )
    max_workers: int = Field(
        default=10,
        description="Thread pool size for RPC handlers",
        ge=1,
        le=256,
    )
    log_level: LogLevel = Field(default="info", description="Minimum log level")

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value: object) -> object:
        """Accept log levels in any case (INFO, Info, info)."""
        if isinstance(value, str):
            return value.lower()
        return value

    @property
    def bind_address(self) -> str:
        """Address string passed to the gRPC server."""
        return f"{self.grpc_host}:{self.grpc_port}"


class ExternalApiSettings(BaseSettings):
    """Settings for the external user REST API.

    Environment variables:
        USERS_PLUGIN_EXTERNAL_BASE_URL: Base URL of the REST API (default: https://jsonplaceholder.typicode.com)
        USERS_PLUGIN_EXTERNAL_TIMEOUT_SECONDS: Per-request timeout in seconds (default: 5.0)
    """

    model_config = SettingsConfigDict(
        env_prefix="USERS_PLUGIN_EXTERNAL_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    base_url: str = Field(
        default="https://jsonplaceholder.typicode.com",
        description="Base URL of the external user API",
    )
    timeout_seconds: float = Field(
        default=5.0,
        description="Timeout applied to every external request",
        gt=0,
        le=60,
    )

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        """Store the base URL without a trailing slash."""
        return value.rstrip("/")


class Settings(BaseSettings):
    """Main application settings aggregating all configuration sections."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application metadata
    app_name: str = Field(default="Users Plugin", description="Application name")
    debug: bool = Field(default=False, description="Debug mode")

    @property
    def plugin(self) -> PluginSettings:
        """Get plugin server settings."""
        return get_plugin_settings()

    @property
    def external_api(self) -> ExternalApiSettings:
        """Get external API settings."""
        return get_external_api_settings()


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()


@lru_cache
def get_plugin_settings() -> PluginSettings:
    """Get cached plugin server settings."""
    return PluginSettings()


@lru_cache
def get_external_api_settings() -> ExternalApiSettings:
    """Get cached external API settings."""
    return ExternalApiSettings()
