"""
Exception hierarchy for the Portfolio Assistant application.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class PortfolioAssistantException(Exception):
    """Base exception for all Portfolio Assistant application errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging

        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ValidationError(PortfolioAssistantException):
    """Raised when input validation fails."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize validation error.

        Args:
            message: Error message
            field: Field name that failed validation
            details: Additional context
        """
        self.field = field
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, details)


class PortfolioStoreError(PortfolioAssistantException):
    """Base exception for portfolio document storage errors."""

    def __init__(
        self,
        message: str,
        path: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize portfolio store error.

        Args:
            message: Error message
            path: Filesystem path involved in the failure
            details: Additional context
        """
        details = details or {}
        if path:
            details["path"] = path
        super().__init__(message, details)


class PortfolioNotFoundError(PortfolioStoreError):
    """Raised when the portfolio document does not exist."""

    def __init__(self, path: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(f"Portfolio document not found: {path}", path, details)


class InvalidPortfolioError(PortfolioStoreError):
    """Raised when a portfolio document is unparsable or structurally invalid."""

    pass


class ProviderError(PortfolioAssistantException):
    """Base exception for generative/embedding provider failures."""

    def __init__(
        self,
        message: str,
        provider: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize provider error.

        Args:
            message: Error message
            provider: Provider key (openai, gemini, ...)
            details: Additional context
        """
        details = details or {}
        if provider:
            details["provider"] = provider
        super().__init__(message, details)


class ProviderNotConfiguredError(ProviderError):
    """Raised when a provider call is attempted without credentials."""

    pass


class EmbeddingError(ProviderError):
    """Raised when embedding generation fails or is unsupported."""

    pass


class GenerationError(ProviderError):
    """Raised when a chat completion fails or returns no usable text."""

    pass
