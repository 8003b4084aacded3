"""
AWS Bedrock provider.

Chat completions through ChatBedrockConverse and embeddings through
BedrockEmbeddings. Credentials come from the standard boto3 chain.

Dependencies: langchain_aws, boto3, fastapi.concurrency, backend.boundary.llm.base
System role: LLM capability adapter for AWS Bedrock
"""

import logging

import boto3
from fastapi.concurrency import run_in_threadpool
from langchain_aws import BedrockEmbeddings, ChatBedrockConverse
from langchain_core.messages import HumanMessage, SystemMessage

from backend.boundary.llm.base import LLMProvider, message_text
from backend.core.exceptions import (
    EmbeddingError,
    GenerationError,
    ProviderNotConfiguredError,
)

logger = logging.getLogger(__name__)

DEFAULT_CHAT_MODEL = "anthropic.claude-3-haiku-20240307-v1:0"
DEFAULT_EMBEDDING_MODEL = "amazon.titan-embed-text-v2:0"


class BedrockProvider(LLMProvider):
    """LLM capability backed by AWS Bedrock."""

    provider = "bedrock"
    name = "AWS Bedrock"

    def __init__(
        self,
        region: str = "us-east-1",
        chat_model: str | None = None,
        embedding_model: str | None = None,
    ) -> None:
        self._region = region
        self._chat_model = chat_model or DEFAULT_CHAT_MODEL
        self._embedding_model = embedding_model or DEFAULT_EMBEDDING_MODEL
        self._configured: bool | None = None
        self._embeddings: BedrockEmbeddings | None = None
        # One client per (max_tokens, temperature); the responder uses a single pair
        self._chat_models: dict[tuple[int, float], ChatBedrockConverse] = {}

    @property
    def chat_model(self) -> str | None:
        return self._chat_model

    @property
    def embedding_model(self) -> str | None:
        return self._embedding_model

    def is_configured(self) -> bool:
        # Credential resolution walks env, profile and instance metadata once
        if self._configured is None:
            self._configured = boto3.Session().get_credentials() is not None
            logger.info(f"{__name__}:is_configured - AWS credentials found={self._configured}")
        return self._configured

    def supports_embeddings(self) -> bool:
        return True

    def _require_configured(self) -> None:
        if not self.is_configured():
            raise ProviderNotConfiguredError("AWS credentials are not configured", self.provider)

    async def embed(self, text: str) -> list[float]:
        self._require_configured()
        if self._embeddings is None:
            # boto3 client construction reads config files; keep it off the event loop
            self._embeddings = await run_in_threadpool(
                BedrockEmbeddings,
                model_id=self._embedding_model,
                region_name=self._region,
            )
        try:
            return list(await self._embeddings.aembed_query(text))
        except Exception as e:
            raise EmbeddingError(f"Bedrock embedding call failed: {e}", self.provider) from e

    async def _get_chat_model(self, max_tokens: int, temperature: float) -> ChatBedrockConverse:
        """Return the cached Converse client for these sampling settings, creating it once."""
        key = (max_tokens, temperature)
        model = self._chat_models.get(key)
        if model is None:
            model = await run_in_threadpool(
                ChatBedrockConverse,
                model=self._chat_model,
                region_name=self._region,
                temperature=temperature,
                max_tokens=max_tokens,
            )
            self._chat_models[key] = model
            logger.info(f"{__name__}:_get_chat_model - Created Converse client for {self._chat_model}")
        return model

    async def complete(
        self,
        system_prompt: str,
        user_message: str,
        max_tokens: int,
        temperature: float,
    ) -> str:
        self._require_configured()
        model = await self._get_chat_model(max_tokens, temperature)
        try:
            response = await model.ainvoke([
                SystemMessage(content=system_prompt),
                HumanMessage(content=user_message),
            ])
        except Exception as e:
            raise GenerationError(f"Bedrock completion call failed: {e}", self.provider) from e

        text = message_text(response.content)
        if not text:
            raise GenerationError("Bedrock returned an empty completion", self.provider)
        return text
