"""
Admin authentication settings.

Credentials for the HTTP Basic gate in front of upload and admin routes.

Dependencies: pydantic_settings
System role: Admin surface configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AdminSettings(BaseSettings):
    """Basic auth credentials for admin endpoints."""

    model_config = SettingsConfigDict(
        env_prefix="ADMIN_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    username: str = Field(default="admin", description="Admin username")
    password: str = Field(default="password", description="Admin password")
