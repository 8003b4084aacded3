"""
Provider capability interface.

The RAG pipeline consumes a generative/embedding backend only through this
surface: configuration checks, single-text embedding, one-shot chat
completion and a status report. Concrete vendors live beside this module.

Dependencies: abc, backend.models.provider
System role: Pluggable LLM capability contract
"""

import re
from abc import ABC, abstractmethod
from typing import Any

from backend.models.provider import ProviderStatus

_PLACEHOLDER_KEY = re.compile(r"your[-_]", re.IGNORECASE)
MIN_API_KEY_LENGTH = 10


def is_usable_api_key(api_key: str | None) -> bool:
    """
    Check whether an API key looks real.

    Rejects missing keys, short keys and template placeholders such as
    ``sk-your-key-here``.

    Args:
        api_key: Raw key from configuration

    Returns:
        bool: True when the key can be sent to a vendor
    """
    if not api_key:
        return False
    if _PLACEHOLDER_KEY.search(api_key):
        return False
    return len(api_key) > MIN_API_KEY_LENGTH


def message_text(content: Any) -> str:
    """Flatten LangChain message content (str or list of parts) into text."""
    if isinstance(content, list):
        return "".join(
            item if isinstance(item, str) else (item.get("text", "") if isinstance(item, dict) else str(item))
            for item in content
        )
    return str(content) if content is not None else ""


class LLMProvider(ABC):
    """Generative and embedding capability backed by one vendor."""

    provider: str
    name: str

    @abstractmethod
    def is_configured(self) -> bool:
        """Return True when credentials for the vendor are present."""

    @abstractmethod
    def supports_embeddings(self) -> bool:
        """Return True when the vendor exposes an embedding model."""

    @abstractmethod
    async def embed(self, text: str) -> list[float]:
        """
        Embed a single text.

        Raises:
            ProviderNotConfiguredError: Credentials missing
            EmbeddingError: Embeddings unsupported or the call failed
        """

    @abstractmethod
    async def complete(
        self,
        system_prompt: str,
        user_message: str,
        max_tokens: int,
        temperature: float,
    ) -> str:
        """
        Run one chat completion.

        Raises:
            ProviderNotConfiguredError: Credentials missing
            GenerationError: The call failed or returned no text
        """

    @property
    @abstractmethod
    def chat_model(self) -> str | None:
        """Chat model identifier."""

    @property
    @abstractmethod
    def embedding_model(self) -> str | None:
        """Embedding model identifier, None when unsupported."""

    def status_name(self) -> str:
        return self.name

    def status(self) -> ProviderStatus:
        """Describe the provider for diagnostics."""
        return ProviderStatus(
            provider=self.provider,
            name=self.name,
            is_configured=self.is_configured(),
            chat_model=self.chat_model,
            embedding_model=self.embedding_model,
            supports_embeddings=self.supports_embeddings(),
        )
