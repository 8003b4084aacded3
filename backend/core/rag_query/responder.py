"""
Responder for portfolio questions.

Generative-first, template-fallback answering. With a configured provider
the retrieved chunks become the context of one chat completion; when the
provider is unconfigured, fails, times out or returns nothing, a
deterministic templated answer is built from the chunks. `answer` never
raises to its caller.

Dependencies: backend.boundary.llm, backend.core.rag_query.responder_prompt
System role: Final stage of the RAG pipeline (chunks -> answer text)
"""

import asyncio
import logging
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

from backend.boundary.llm.base import LLMProvider
from backend.core.rag_query.responder_prompt import build_system_prompt
from backend.core.rag_query.topic_keywords import (
    ANSWER_TOPICS,
    DEFAULT_ANSWER_TEMPLATE,
    NO_CONTEXT_ANSWER,
)
from backend.models.retrieval import RetrievedChunk
from backend.observability.log_utils import log_exception_with_context

logger = logging.getLogger(__name__)


class AnswerSource(str, Enum):
    """Which tier produced an answer."""

    GENERATED = "generated"
    TEMPLATE = "template"


@dataclass(frozen=True)
class ResponderAnswer:
    """Answer text tagged with its source tier."""

    text: str
    source: AnswerSource


def fallback_answer(query: str, chunks: Sequence[RetrievedChunk]) -> str:
    """
    Build a templated answer without a generative model.

    Args:
        query: User question
        chunks: Retrieved chunks, highest relevance first

    Returns:
        str: Topic template around the first chunk of the matched type, or
        the generic template around the top chunk
    """
    if not chunks:
        return NO_CONTEXT_ANSWER

    query_lower = query.lower()
    for topic in ANSWER_TOPICS:
        if not any(trigger in query_lower for trigger in topic.triggers):
            continue
        match = next((chunk for chunk in chunks if chunk.type == topic.chunk_type), None)
        if match is not None:
            return topic.template.format(text=match.text)

    return DEFAULT_ANSWER_TEMPLATE.format(text=chunks[0].text)


class Responder:
    """Turns a question and its retrieved chunks into an answer."""

    def __init__(
        self,
        provider: LLMProvider,
        max_tokens: int = 500,
        temperature: float = 0.7,
        timeout_seconds: float = 30.0,
    ) -> None:
        """
        Initialize responder.

        Args:
            provider: Generative capability
            max_tokens: Completion length bound
            temperature: Sampling temperature
            timeout_seconds: Timeout for the completion call
        """
        self._provider = provider
        self._max_tokens = max_tokens
        self._temperature = temperature
        self._timeout = timeout_seconds

    async def answer(self, query: str, chunks: Sequence[RetrievedChunk]) -> str:
        """Answer text only; see `compose`."""
        return (await self.compose(query, chunks)).text

    async def compose(self, query: str, chunks: Sequence[RetrievedChunk]) -> ResponderAnswer:
        """
        Answer a question from retrieved chunks.

        Args:
            query: User question
            chunks: Retrieved chunks, highest relevance first

        Returns:
            ResponderAnswer: Generated text verbatim, or the templated fallback
        """
        if not self._provider.is_configured():
            logger.info(
                f"{__name__}:compose - {self._provider.status_name()} not configured, using template"
            )
            return self._template(query, chunks)

        system_prompt = build_system_prompt(chunks)
        try:
            text = await asyncio.wait_for(
                self._provider.complete(
                    system_prompt,
                    query,
                    self._max_tokens,
                    self._temperature,
                ),
                self._timeout,
            )
        except Exception as e:
            log_exception_with_context(
                logger,
                f"{__name__}:compose - Generation failed, using template",
                e,
                level=logging.WARNING,
                provider=self._provider.status_name(),
            )
            return self._template(query, chunks)

        if not isinstance(text, str) or not text.strip():
            logger.warning(f"{__name__}:compose - Empty completion, using template")
            return self._template(query, chunks)

        return ResponderAnswer(text=text, source=AnswerSource.GENERATED)

    @staticmethod
    def _template(query: str, chunks: Sequence[RetrievedChunk]) -> ResponderAnswer:
        return ResponderAnswer(text=fallback_answer(query, chunks), source=AnswerSource.TEMPLATE)
