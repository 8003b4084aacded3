"""
OpenAI-compatible provider.

Serves every vendor that speaks the OpenAI REST dialect (OpenAI itself,
the Hugging Face router, OpenRouter) through one AsyncOpenAI client with a
vendor-specific base URL and headers.

Dependencies: openai, backend.boundary.llm.base, backend.core.exceptions
System role: LLM capability adapter for OpenAI-style endpoints
"""

import logging

from openai import AsyncOpenAI, OpenAIError

from backend.boundary.llm.base import LLMProvider, is_usable_api_key
from backend.core.exceptions import (
    EmbeddingError,
    GenerationError,
    ProviderNotConfiguredError,
)

logger = logging.getLogger(__name__)


class OpenAICompatibleProvider(LLMProvider):
    """LLM capability backed by an OpenAI-compatible HTTP API."""

    def __init__(
        self,
        provider: str,
        name: str,
        api_key: str | None,
        base_url: str,
        chat_model: str,
        embedding_model: str | None = None,
        default_headers: dict[str, str] | None = None,
        timeout: float = 30.0,
    ) -> None:
        """
        Initialize provider; the HTTP client is created on first use.

        Args:
            provider: Provider key (openai, huggingface, openrouter)
            name: Display name for logs and status
            api_key: Vendor API key
            base_url: OpenAI-compatible API root
            chat_model: Chat completion model
            embedding_model: Embedding model, None when unsupported
            default_headers: Extra headers sent on every request
            timeout: HTTP timeout in seconds
        """
        self.provider = provider
        self.name = name
        self._api_key = api_key
        self._base_url = base_url
        self._chat_model = chat_model
        self._embedding_model = embedding_model
        self._default_headers = default_headers
        self._timeout = timeout
        self._client: AsyncOpenAI | None = None

    @property
    def chat_model(self) -> str | None:
        return self._chat_model

    @property
    def embedding_model(self) -> str | None:
        return self._embedding_model

    def is_configured(self) -> bool:
        return is_usable_api_key(self._api_key)

    def supports_embeddings(self) -> bool:
        return self._embedding_model is not None

    def _get_client(self) -> AsyncOpenAI:
        """Return the shared AsyncOpenAI client, creating it lazily."""
        if not self.is_configured():
            raise ProviderNotConfiguredError(f"{self.name} API key is not configured", self.provider)

        if self._client is None:
            self._client = AsyncOpenAI(
                api_key=self._api_key,
                base_url=self._base_url,
                default_headers=self._default_headers,
                timeout=self._timeout,
            )
            logger.info(f"{__name__}:_get_client - Created client for {self.name} ({self._base_url})")
        return self._client

    async def embed(self, text: str) -> list[float]:
        if not self.supports_embeddings():
            raise EmbeddingError(f"{self.name} does not support embeddings", self.provider)

        client = self._get_client()
        try:
            response = await client.embeddings.create(
                model=self._embedding_model,
                input=text,
            )
        except OpenAIError as e:
            raise EmbeddingError(f"{self.name} embedding call failed: {e}", self.provider) from e

        if not response.data:
            raise EmbeddingError(f"{self.name} returned no embedding data", self.provider)
        return list(response.data[0].embedding)

    async def complete(
        self,
        system_prompt: str,
        user_message: str,
        max_tokens: int,
        temperature: float,
    ) -> str:
        client = self._get_client()
        try:
            response = await client.chat.completions.create(
                model=self._chat_model,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_message},
                ],
                max_tokens=max_tokens,
                temperature=temperature,
            )
        except OpenAIError as e:
            raise GenerationError(f"{self.name} completion call failed: {e}", self.provider) from e

        content = response.choices[0].message.content if response.choices else None
        if not content:
            raise GenerationError(f"{self.name} returned an empty completion", self.provider)
        return content
