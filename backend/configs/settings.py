"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.
Provides dependency injection factory for FastAPI.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from backend.configs.admin import AdminSettings
from backend.configs.base import BaseSettings
from backend.configs.llm import LLMSettings, ProviderKeySettings
from backend.configs.portfolio import PortfolioSettings
from backend.configs.rag import RAGSettings


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    # Aggregated settings
    llm: LLMSettings = LLMSettings()
    provider_keys: ProviderKeySettings = ProviderKeySettings()
    portfolio: PortfolioSettings = PortfolioSettings()
    admin: AdminSettings = AdminSettings()
    rag: RAGSettings = RAGSettings()


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Returns Settings instance, cached for dependency injection.
    Environment variables loaded once at startup.

    Returns:
        Settings: Application settings instance

    Usage:
        from backend.configs import get_settings
        settings = get_settings()
    """
    return Settings()
