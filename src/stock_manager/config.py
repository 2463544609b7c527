"""Configuration management for the Stock Manager backend.

This module handles application configuration using Pydantic settings.
Configuration is loaded from environment variables, falling back to a
.env file in the working directory.
"""

from __future__ import annotations

from enum import Enum
from functools import lru_cache
from typing import Literal

from pydantic import Field, SecretStr, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from stock_manager.exceptions import ConfigurationError


class StartupPolicy(str, Enum):
    """What the application does with the database probe at startup."""

    BACKGROUND = "background"
    DEGRADE = "degrade"
    FAIL_FAST = "fail_fast"


class Settings(BaseSettings):
    """Application settings with environment variable support.

    Database credentials use the plain DB_* names (DB_HOST, DB_NAME,
    DB_USER, DB_PASSWORD) shared with the rest of the deployment.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Database Configuration
    db_host: str = Field(..., min_length=1, description="Hostname or IP address of the MySQL server")
    db_name: str = Field(..., min_length=1, description="Name of the inventory database")
    db_user: str = Field(..., min_length=1, description="Database username")
    # MySQL accounts may have an empty password, so only presence is required.
    db_password: SecretStr = Field(..., description="Database password")

    db_startup_policy: StartupPolicy = Field(
        default=StartupPolicy.DEGRADE,
        description=(
            "How startup reacts to the connectivity probe: 'background' only logs, "
            "'degrade' waits and reports the outcome on /health, 'fail_fast' aborts."
        ),
    )

    # Application Configuration
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL), case-insensitive",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, v: object) -> object:
        return v.upper() if isinstance(v, str) else v


def load_settings() -> Settings:
    """Build settings, turning validation failures into ConfigurationError.

    Only the offending field names are reported so secrets never end up
    in an error message.
    """
    try:
        return Settings()
    except ValidationError as e:
        fields = sorted({str(err["loc"][0]).upper() for err in e.errors() if err.get("loc")})
        raise ConfigurationError(
            f"Invalid or missing configuration: {', '.join(fields)}"
        ) from None


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings.

    Returns:
        Settings: Application settings instance.

    Raises:
        ConfigurationError: If a required value is missing or malformed.
    """
    return load_settings()
