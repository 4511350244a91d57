"""Configuration for Dataproc Hive URL resolution.

Settings are loaded from environment variables with the DATAPROC_HIVE_
prefix or from a .env file in the working directory.
"""

from __future__ import annotations

from enum import Enum

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LogLevel(str, Enum):
    """Logging levels accepted by the CLI."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


class DataprocConfig(BaseSettings):
    """Settings for talking to the Dataproc cluster controller."""

    model_config = SettingsConfigDict(
        env_prefix="DATAPROC_HIVE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    api_endpoint: str = Field(
        default="https://{region}-dataproc.googleapis.com",
        description="Base URL of the Dataproc REST API; {region} is substituted per request",
    )
    access_token: str | None = Field(
        default=None,
        description="OAuth2 bearer token attached to Dataproc API requests",
    )
    request_timeout: float = Field(
        default=30.0,
        gt=0,
        description="Timeout in seconds for each Dataproc API request",
    )
    page_size: int = Field(
        default=100,
        ge=1,
        le=1000,
        description="Clusters requested per page when listing",
    )
    preferred_endpoint_port: str = Field(
        default="YARN ResourceManager",
        description="Component Gateway port whose URL supplies the cluster host",
    )
    log_level: LogLevel = Field(
        default=LogLevel.INFO,
        description="Logging level for the CLI",
    )

    def endpoint_for(self, region: str) -> str:
        """Get the API base URL for a region."""
        return self.api_endpoint.replace("{region}", region).rstrip("/")


def get_config() -> DataprocConfig:
    """Load configuration from the environment."""
    return DataprocConfig()
