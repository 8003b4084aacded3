"""
Status service.

Pass-through diagnostics for the admin surface: the selected provider and
the state of the live retrieval cache.

Dependencies: backend.boundary.llm, backend.core.rag_query
System role: Provider and cache introspection
"""

from backend.boundary.llm.base import LLMProvider
from backend.core.rag_query.embedding_store import EmbeddingStore
from backend.models.provider import ProviderStatusResponse
from backend.models.retrieval import EmbeddingCache


class StatusService:
    """Provider and cache status reporting."""

    def __init__(self, provider: LLMProvider, embedding_store: EmbeddingStore) -> None:
        self.provider = provider
        self.embedding_store = embedding_store

    def provider_status(self) -> ProviderStatusResponse:
        cache = self.embedding_store.current_cache()
        return ProviderStatusResponse(
            **self.provider.status().model_dump(),
            cache_mode=cache.mode,
            cache_size=len(cache),
            cache_built_at=cache.built_at.isoformat(),
        )

    def current_cache(self) -> EmbeddingCache:
        return self.embedding_store.current_cache()
