"""
Provider status schemas.

Diagnostic view of the configured generative/embedding provider for the
admin surface.

Dependencies: pydantic, backend.models.retrieval
System role: Provider introspection contracts
"""

from pydantic import BaseModel, Field

from backend.models.retrieval import CacheMode


class ProviderStatus(BaseModel):
    """Static description of the selected provider."""

    provider: str = Field(description="Provider key")
    name: str = Field(description="Human-readable provider name")
    is_configured: bool
    chat_model: str | None = None
    embedding_model: str | None = None
    supports_embeddings: bool


class ProviderStatusResponse(ProviderStatus):
    """Provider status plus the state of the live retrieval cache."""

    cache_mode: CacheMode
    cache_size: int
    cache_built_at: str
