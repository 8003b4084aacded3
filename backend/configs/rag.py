"""
Retrieval configuration settings.

Dependencies: pydantic_settings
System role: Retrieval tuning for the portfolio RAG pipeline
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class RAGSettings(BaseSettings):
    """Retrieval configuration."""

    model_config = SettingsConfigDict(
        env_prefix="RAG_",
        case_sensitive=False,
        extra="ignore",
    )

    top_k: int = Field(default=5, description="Number of chunks returned per query", ge=1)
