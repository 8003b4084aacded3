"""
Dependency injection container.

Builds the provider, stores, RAG pipeline and services once from settings
and exposes them as FastAPI dependencies.

Dependencies: backend.configs, backend.application, backend.boundary, backend.core.rag_query
System role: DI container for service injection
"""

from fastapi import Depends

from backend.application.services import (
    AnalyticsService,
    ChatService,
    PortfolioService,
    StatusService,
)
from backend.boundary.llm import LLMProvider, get_llm_provider
from backend.boundary.storage import PortfolioStore, ThemeAnalyticsStore
from backend.configs import Settings, get_settings
from backend.configs.admin import AdminSettings
from backend.core.rag_query import EmbeddingStore, Responder, Retriever


class ServiceCache:
    """
    Container for cached service instances.

    Every collaborator is created on first access and shared afterwards, so
    the embedding store rebuilt at startup is the one the retriever reads.
    """

    def __init__(self, settings: Settings | None = None, provider: LLMProvider | None = None):
        self._settings = settings
        self._provider = provider
        self._portfolio_store = None
        self._analytics_store = None
        self._embedding_store = None
        self._retriever = None
        self._responder = None

    @property
    def settings(self) -> Settings:
        """Get settings, defaulting to the environment."""
        if self._settings is None:
            self._settings = get_settings()
        return self._settings

    @property
    def provider(self) -> LLMProvider:
        """Get the provider selected by configuration."""
        if self._provider is None:
            self._provider = get_llm_provider(self.settings.llm, self.settings.provider_keys)
        return self._provider

    @property
    def portfolio_store(self) -> PortfolioStore:
        """Get cached portfolio document store."""
        if self._portfolio_store is None:
            self._portfolio_store = PortfolioStore(self.settings.portfolio.portfolio_path)
        return self._portfolio_store

    @property
    def analytics_store(self) -> ThemeAnalyticsStore:
        """Get cached theme analytics store."""
        if self._analytics_store is None:
            self._analytics_store = ThemeAnalyticsStore(self.settings.portfolio.analytics_path)
        return self._analytics_store

    @property
    def embedding_store(self) -> EmbeddingStore:
        """Get cached embedding store."""
        if self._embedding_store is None:
            llm = self.settings.llm
            self._embedding_store = EmbeddingStore(
                provider=self.provider,
                document_loader=self.portfolio_store.load,
                concurrency=llm.embedding_concurrency,
                timeout_seconds=llm.request_timeout_seconds,
            )
        return self._embedding_store

    @property
    def retriever(self) -> Retriever:
        """Get cached retriever."""
        if self._retriever is None:
            self._retriever = Retriever(self.embedding_store, top_k=self.settings.rag.top_k)
        return self._retriever

    @property
    def responder(self) -> Responder:
        """Get cached responder."""
        if self._responder is None:
            llm = self.settings.llm
            self._responder = Responder(
                provider=self.provider,
                max_tokens=llm.max_tokens,
                temperature=llm.temperature,
                timeout_seconds=llm.request_timeout_seconds,
            )
        return self._responder

    def clear(self) -> None:
        """Clear all cached instances."""
        self._portfolio_store = None
        self._analytics_store = None
        self._embedding_store = None
        self._retriever = None
        self._responder = None


# Global service cache
_service_cache = ServiceCache()


def get_service_cache() -> ServiceCache:
    """Get service cache singleton."""
    return _service_cache


def get_chat_service(cache: ServiceCache = Depends(get_service_cache)) -> ChatService:
    """
    Get chat service instance.

    Args:
        cache: Service cache (injected via Depends)

    Returns:
        ChatService: Chat service over the shared retriever and responder
    """
    return ChatService(retriever=cache.retriever, responder=cache.responder)


def get_portfolio_service(cache: ServiceCache = Depends(get_service_cache)) -> PortfolioService:
    """
    Get portfolio service instance.

    Args:
        cache: Service cache (injected via Depends)

    Returns:
        PortfolioService: Portfolio service over the shared stores
    """
    return PortfolioService(store=cache.portfolio_store, embedding_store=cache.embedding_store)


def get_analytics_service(cache: ServiceCache = Depends(get_service_cache)) -> AnalyticsService:
    """Get theme analytics service instance."""
    return AnalyticsService(store=cache.analytics_store)


def get_status_service(cache: ServiceCache = Depends(get_service_cache)) -> StatusService:
    """Get provider status service instance."""
    return StatusService(provider=cache.provider, embedding_store=cache.embedding_store)


def get_admin_settings(cache: ServiceCache = Depends(get_service_cache)) -> AdminSettings:
    """Get admin credentials from the cache's settings."""
    return cache.settings.admin
