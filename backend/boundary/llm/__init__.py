"""
LLM provider boundary layer.

Pluggable generative/embedding capability with OpenAI-compatible,
Google Gemini and AWS Bedrock implementations.

Dependencies: openai, langchain_google_genai, langchain_aws
System role: Vendor adapters for the RAG pipeline
"""

from backend.boundary.llm.base import LLMProvider, is_usable_api_key
from backend.boundary.llm.provider_factory import SUPPORTED_PROVIDERS, get_llm_provider

__all__ = [
    "LLMProvider",
    "SUPPORTED_PROVIDERS",
    "get_llm_provider",
    "is_usable_api_key",
]
