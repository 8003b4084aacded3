"""
LLM provider configuration settings.

Selects the generative/embedding provider and tunes completion and
embedding calls. API keys live in ProviderKeySettings because they keep the
vendor's conventional, unprefixed environment variable names.

Dependencies: pydantic, pydantic_settings
System role: Provider selection and call tuning for the RAG pipeline
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LLMSettings(BaseSettings):
    """Provider selection and model tuning."""

    model_config = SettingsConfigDict(
        env_prefix="LLM_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    provider: str = Field(
        default="openai",
        description="Provider key: openai, huggingface, openrouter, gemini or bedrock",
    )
    chat_model: str | None = Field(
        default=None,
        description="Override for the provider's default chat model",
    )
    embedding_model: str | None = Field(
        default=None,
        description="Override for the provider's default embedding model",
    )
    max_tokens: int = Field(default=500, description="Maximum completion tokens", ge=1)
    temperature: float = Field(
        default=0.7,
        description="Sampling temperature for chat completions",
        ge=0.0,
        le=2.0,
    )
    request_timeout_seconds: float = Field(
        default=30.0,
        description="Timeout applied to every provider call",
        gt=0.0,
    )
    embedding_concurrency: int = Field(
        default=8,
        description="Maximum concurrent embedding calls during a cache rebuild",
        ge=1,
    )
    aws_region: str = Field(default="us-east-1", description="AWS region for Bedrock")


class ProviderKeySettings(BaseSettings):
    """Vendor API keys read from their conventional environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    openai_api_key: str | None = Field(default=None, description="OPENAI_API_KEY")
    huggingface_api_key: str | None = Field(default=None, description="HUGGINGFACE_API_KEY")
    openrouter_api_key: str | None = Field(default=None, description="OPENROUTER_API_KEY")
    gemini_api_key: str | None = Field(default=None, description="GEMINI_API_KEY")
    site_url: str = Field(
        default="http://localhost:3000",
        description="Public site URL sent as OpenRouter HTTP-Referer",
    )
