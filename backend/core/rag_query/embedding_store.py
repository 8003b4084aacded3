"""
Embedding store for the portfolio retrieval cache.

Owns the process-wide cache of embedding records. `rebuild` re-chunks the
current document and embeds every chunk through the injected provider,
then publishes the finished cache with a single reference assignment, so
readers see either the old cache or the new one and never a mix.

Vector population is all-or-nothing: when the provider is unconfigured,
lacks embeddings, or any per-chunk call fails or times out, every record
in the new cache carries no vector and retrieval runs in keyword mode.

Dependencies: fastapi.concurrency, backend.boundary.llm, backend.core.rag_query.chunker
System role: Embedding cache owner and similarity scoring
"""

import asyncio
import logging
import math
from collections.abc import Callable, Sequence
from typing import Any

from fastapi.concurrency import run_in_threadpool

from backend.boundary.llm.base import LLMProvider
from backend.core.exceptions import EmbeddingError, PortfolioStoreError
from backend.core.rag_query.chunker import chunk_portfolio
from backend.models.chunk import EmbeddingRecord, PortfolioChunk
from backend.models.retrieval import CacheMode, EmbeddingCache
from backend.observability.log_utils import log_exception_with_context

logger = logging.getLogger(__name__)

DocumentLoader = Callable[[], dict[str, Any]]

EMPTY_CACHE_WARNING = "No chunks to embed; retrieval cache is empty"


def cosine_similarity(
    vec_a: Sequence[float] | None,
    vec_b: Sequence[float] | None,
) -> float:
    """
    Cosine similarity of two vectors.

    Returns exactly 0.0 when either vector is missing, the lengths differ,
    or either vector has zero norm, so scoring is defined for every record.
    """
    if not vec_a or not vec_b or len(vec_a) != len(vec_b):
        return 0.0

    dot = sum(a * b for a, b in zip(vec_a, vec_b))
    norm_a = math.sqrt(sum(a * a for a in vec_a))
    norm_b = math.sqrt(sum(b * b for b in vec_b))
    if norm_a == 0 or norm_b == 0:
        return 0.0
    return dot / (norm_a * norm_b)


class EmbeddingStore:
    """
    Owner of the embedding cache for one portfolio document at a time.

    Instances are independent; the application builds one and hands it to
    the retriever, tests build as many as they need.
    """

    similarity = staticmethod(cosine_similarity)

    def __init__(
        self,
        provider: LLMProvider,
        document_loader: DocumentLoader,
        concurrency: int = 8,
        timeout_seconds: float = 30.0,
    ) -> None:
        """
        Initialize store with an empty cache.

        Args:
            provider: Embedding capability
            document_loader: Returns the current portfolio document
            concurrency: Maximum in-flight embedding calls during rebuild
            timeout_seconds: Timeout for each embedding call
        """
        self._provider = provider
        self._document_loader = document_loader
        self._concurrency = max(1, concurrency)
        self._timeout = timeout_seconds
        self._cache = EmbeddingCache()
        self._generation = 0
        self._published_generation = 0

    def current_cache(self) -> EmbeddingCache:
        """Return the published cache snapshot."""
        return self._cache

    async def rebuild(self) -> EmbeddingCache:
        """
        Rebuild the cache from the current document and publish it.

        A rebuild publishes unless a newer rebuild has already published;
        an older one that finishes later discards its work. Cancellation
        leaves the previous cache in place and does not block older
        rebuilds still in flight.

        Returns:
            EmbeddingCache: The cache published after this call
        """
        self._generation += 1
        generation = self._generation
        logger.info(f"{__name__}:rebuild - START generation={generation}")

        try:
            chunks = await self._load_chunks()
            if not chunks:
                logger.warning(f"{__name__}:rebuild - {EMPTY_CACHE_WARNING}")
                cache = EmbeddingCache(warning=EMPTY_CACHE_WARNING)
            else:
                cache = await self._build_cache(chunks)
        except asyncio.CancelledError:
            logger.warning(
                f"{__name__}:rebuild - Cancelled generation={generation}, keeping previous cache"
            )
            raise

        if generation < self._published_generation:
            logger.info(
                f"{__name__}:rebuild - Generation {generation} superseded by published "
                f"{self._published_generation}, discarding"
            )
            return self._cache

        self._cache = cache
        self._published_generation = generation
        logger.info(
            f"{__name__}:rebuild - END generation={generation}, "
            f"records={len(cache)}, mode={cache.mode.value}"
        )
        return cache

    async def embed_query(self, text: str) -> tuple[float, ...] | None:
        """
        Embed a live query.

        Returns:
            tuple[float, ...] | None: Query vector, None when the provider
            is unconfigured, lacks embeddings, or the call fails
        """
        if not self._provider.is_configured() or not self._provider.supports_embeddings():
            return None

        try:
            vector = await asyncio.wait_for(self._provider.embed(text), self._timeout)
        except Exception as e:
            log_exception_with_context(
                logger,
                f"{__name__}:embed_query - Query embedding failed",
                e,
                level=logging.WARNING,
                provider=self._provider.status_name(),
            )
            return None

        return tuple(vector) if vector else None

    async def _load_chunks(self) -> list[PortfolioChunk]:
        """Load the document and chunk it; unreadable documents yield no chunks."""
        try:
            document = await run_in_threadpool(self._document_loader)
        except PortfolioStoreError as e:
            log_exception_with_context(
                logger,
                f"{__name__}:_load_chunks - Portfolio unavailable, nothing to retrieve",
                e,
                level=logging.WARNING,
            )
            return []
        return chunk_portfolio(document)

    async def _build_cache(self, chunks: list[PortfolioChunk]) -> EmbeddingCache:
        """Embed every chunk, or fall back to a cache without vectors."""
        provider_name = self._provider.status_name()

        if not self._provider.is_configured():
            logger.warning(
                f"{__name__}:_build_cache - {provider_name} not configured, using keyword matching"
            )
            return self._unscored(chunks)

        if not self._provider.supports_embeddings():
            logger.warning(
                f"{__name__}:_build_cache - {provider_name} does not support embeddings, "
                f"using keyword matching"
            )
            return self._unscored(chunks)

        logger.info(
            f"{__name__}:_build_cache - Embedding {len(chunks)} chunks with {provider_name} "
            f"({self._provider.embedding_model}), concurrency={self._concurrency}"
        )
        try:
            vectors = await self._embed_all([chunk.text for chunk in chunks])
        except Exception as e:
            log_exception_with_context(
                logger,
                f"{__name__}:_build_cache - Embedding failed, using keyword matching",
                e,
                level=logging.WARNING,
                provider=provider_name,
            )
            return self._unscored(chunks)

        records = tuple(
            EmbeddingRecord(chunk=chunk, embedding=tuple(vector))
            for chunk, vector in zip(chunks, vectors)
        )
        return EmbeddingCache(records=records, mode=CacheMode.SCORED)

    async def _embed_all(self, texts: list[str]) -> list[list[float]]:
        """Embed texts concurrently; the first failure cancels the rest."""
        semaphore = asyncio.Semaphore(self._concurrency)

        async def embed_one(text: str) -> list[float]:
            async with semaphore:
                vector = await asyncio.wait_for(self._provider.embed(text), self._timeout)
            if not vector:
                raise EmbeddingError("Provider returned an empty vector", self._provider.provider)
            return vector

        tasks = [asyncio.ensure_future(embed_one(text)) for text in texts]
        try:
            return list(await asyncio.gather(*tasks))
        except BaseException:
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            raise

    @staticmethod
    def _unscored(chunks: list[PortfolioChunk]) -> EmbeddingCache:
        return EmbeddingCache(
            records=tuple(EmbeddingRecord(chunk=chunk) for chunk in chunks),
            mode=CacheMode.UNSCORED,
        )
