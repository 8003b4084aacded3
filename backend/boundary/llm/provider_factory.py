"""
LLM provider factory.

Selects the provider once at startup from LLM_PROVIDER and wires its
credentials and model overrides. Callers receive the provider instance and
pass it down explicitly; nothing below this module reads the environment.

Dependencies: backend.configs, backend.boundary.llm
System role: Provider instantiation and selection
"""

import logging
from dataclasses import dataclass

from backend.boundary.llm.base import LLMProvider
from backend.boundary.llm.bedrock_provider import BedrockProvider
from backend.boundary.llm.gemini_provider import GeminiProvider
from backend.boundary.llm.openai_compatible import OpenAICompatibleProvider
from backend.configs.llm import LLMSettings, ProviderKeySettings

logger = logging.getLogger(__name__)

DEFAULT_PROVIDER = "openai"


@dataclass(frozen=True)
class OpenAICompatibleEndpoint:
    """Static endpoint description for an OpenAI-compatible vendor."""

    name: str
    key_field: str
    base_url: str
    chat_model: str
    embedding_model: str | None


OPENAI_COMPATIBLE_PROVIDERS: dict[str, OpenAICompatibleEndpoint] = {
    "openai": OpenAICompatibleEndpoint(
        name="OpenAI",
        key_field="openai_api_key",
        base_url="https://api.openai.com/v1",
        chat_model="gpt-4o-mini",
        embedding_model="text-embedding-3-small",
    ),
    "huggingface": OpenAICompatibleEndpoint(
        name="Hugging Face",
        key_field="huggingface_api_key",
        base_url="https://router.huggingface.co/v1",
        chat_model="Qwen/Qwen2.5-72B-Instruct",
        embedding_model=None,
    ),
    "openrouter": OpenAICompatibleEndpoint(
        name="OpenRouter",
        key_field="openrouter_api_key",
        base_url="https://openrouter.ai/api/v1",
        chat_model="meta-llama/llama-3.1-8b-instruct:free",
        embedding_model=None,
    ),
}

SUPPORTED_PROVIDERS = (*OPENAI_COMPATIBLE_PROVIDERS, "gemini", "bedrock")


def get_llm_provider(
    llm: LLMSettings,
    keys: ProviderKeySettings,
) -> LLMProvider:
    """
    Build the provider selected by configuration.

    Unknown provider keys log a warning and fall back to OpenAI.

    Args:
        llm: Provider selection and model overrides
        keys: Vendor API keys

    Returns:
        LLMProvider: Configured (or unconfigured) provider instance
    """
    provider_key = llm.provider.strip().lower()

    if provider_key not in SUPPORTED_PROVIDERS:
        logger.warning(
            f"{__name__}:get_llm_provider - Unknown provider '{provider_key}', "
            f"falling back to {DEFAULT_PROVIDER}"
        )
        provider_key = DEFAULT_PROVIDER

    if provider_key == "gemini":
        provider: LLMProvider = GeminiProvider(
            api_key=keys.gemini_api_key,
            chat_model=llm.chat_model,
            embedding_model=llm.embedding_model,
        )
    elif provider_key == "bedrock":
        provider = BedrockProvider(
            region=llm.aws_region,
            chat_model=llm.chat_model,
            embedding_model=llm.embedding_model,
        )
    else:
        endpoint = OPENAI_COMPATIBLE_PROVIDERS[provider_key]
        headers = None
        if provider_key == "openrouter":
            headers = {"HTTP-Referer": keys.site_url, "X-Title": "Portfolio Chatbot"}

        # Embedding override only applies where the vendor exposes embeddings
        embedding_model = endpoint.embedding_model
        if embedding_model is not None and llm.embedding_model:
            embedding_model = llm.embedding_model

        provider = OpenAICompatibleProvider(
            provider=provider_key,
            name=endpoint.name,
            api_key=getattr(keys, endpoint.key_field),
            base_url=endpoint.base_url,
            chat_model=llm.chat_model or endpoint.chat_model,
            embedding_model=embedding_model,
            default_headers=headers,
            timeout=llm.request_timeout_seconds,
        )

    logger.info(
        f"{__name__}:get_llm_provider - Selected {provider.status_name()} "
        f"(configured={provider.is_configured()}, embeddings={provider.supports_embeddings()})"
    )
    return provider
