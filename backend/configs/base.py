"""
Base configuration settings.

Shared pydantic-settings behaviour (`.env` loading, case-insensitive
variables, unknown keys ignored) plus the process-level options every
deployment sets: app title, environment, log level and CORS origins.

Dependencies: pydantic_settings
System role: Foundation for the Portfolio Assistant configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings as PydanticBaseSettings, SettingsConfigDict


class BaseSettings(PydanticBaseSettings):
    """Base configuration class; sub-settings add their own env prefix."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    app_name: str = Field(default="Portfolio Assistant", description="FastAPI title")
    environment: str = Field(default="development", description="development, staging or production")
    debug: bool = Field(default=False, description="Enable debug mode")
    log_level: str = Field(default="INFO", description="Root log level name")
    cors_origins: list[str] = Field(
        default=["*"],
        description="Origins allowed to call the API (JSON list in the environment)",
    )
