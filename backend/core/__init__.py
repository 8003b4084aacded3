"""
Core business logic module.

Contains domain business logic, exception hierarchy, and the RAG pipeline.
All business rules and domain-specific logic reside here.
"""

from backend.core.exceptions import (
    PortfolioAssistantException,
    ValidationError,
    PortfolioStoreError,
    PortfolioNotFoundError,
    InvalidPortfolioError,
    ProviderError,
    ProviderNotConfiguredError,
    EmbeddingError,
    GenerationError,
)

__all__ = [
    "PortfolioAssistantException",
    "ValidationError",
    "PortfolioStoreError",
    "PortfolioNotFoundError",
    "InvalidPortfolioError",
    "ProviderError",
    "ProviderNotConfiguredError",
    "EmbeddingError",
    "GenerationError",
]
