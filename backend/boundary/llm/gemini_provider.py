"""
Google Gemini provider.

Chat completions through ChatGoogleGenerativeAI and embeddings through
GoogleGenerativeAIEmbeddings.

Dependencies: langchain_google_genai, langchain_core, backend.boundary.llm.base
System role: LLM capability adapter for Google Gemini
"""

import logging

from langchain_core.messages import HumanMessage, SystemMessage
from langchain_google_genai import ChatGoogleGenerativeAI, GoogleGenerativeAIEmbeddings

from backend.boundary.llm.base import LLMProvider, is_usable_api_key, message_text
from backend.core.exceptions import (
    EmbeddingError,
    GenerationError,
    ProviderNotConfiguredError,
)

logger = logging.getLogger(__name__)

DEFAULT_CHAT_MODEL = "gemini-2.0-flash"
DEFAULT_EMBEDDING_MODEL = "models/gemini-embedding-001"


class GeminiProvider(LLMProvider):
    """LLM capability backed by Google Gemini."""

    provider = "gemini"
    name = "Google Gemini"

    def __init__(
        self,
        api_key: str | None,
        chat_model: str | None = None,
        embedding_model: str | None = None,
    ) -> None:
        self._api_key = api_key
        self._chat_model = chat_model or DEFAULT_CHAT_MODEL
        self._embedding_model = embedding_model or DEFAULT_EMBEDDING_MODEL
        self._embeddings: GoogleGenerativeAIEmbeddings | None = None
        self._chat_models: dict[tuple[int, float], ChatGoogleGenerativeAI] = {}

    @property
    def chat_model(self) -> str | None:
        return self._chat_model

    @property
    def embedding_model(self) -> str | None:
        return self._embedding_model

    def is_configured(self) -> bool:
        return is_usable_api_key(self._api_key)

    def supports_embeddings(self) -> bool:
        return True

    def _require_configured(self) -> None:
        if not self.is_configured():
            raise ProviderNotConfiguredError("GEMINI_API_KEY is not configured", self.provider)

    async def embed(self, text: str) -> list[float]:
        self._require_configured()
        if self._embeddings is None:
            self._embeddings = GoogleGenerativeAIEmbeddings(
                model=self._embedding_model,
                google_api_key=self._api_key,
            )
        try:
            return list(await self._embeddings.aembed_query(text))
        except Exception as e:
            raise EmbeddingError(f"Gemini embedding call failed: {e}", self.provider) from e

    def _get_chat_model(self, max_tokens: int, temperature: float) -> ChatGoogleGenerativeAI:
        """Return the cached chat client for these sampling settings, creating it once."""
        key = (max_tokens, temperature)
        if key not in self._chat_models:
            self._chat_models[key] = ChatGoogleGenerativeAI(
                model=self._chat_model,
                google_api_key=self._api_key,
                temperature=temperature,
                max_output_tokens=max_tokens,
            )
        return self._chat_models[key]

    async def complete(
        self,
        system_prompt: str,
        user_message: str,
        max_tokens: int,
        temperature: float,
    ) -> str:
        self._require_configured()
        model = self._get_chat_model(max_tokens, temperature)
        try:
            response = await model.ainvoke([
                SystemMessage(content=system_prompt),
                HumanMessage(content=user_message),
            ])
        except Exception as e:
            raise GenerationError(f"Gemini completion call failed: {e}", self.provider) from e

        text = message_text(response.content)
        if not text:
            raise GenerationError("Gemini returned an empty completion", self.provider)
        return text
