"""
Retriever for portfolio chunks.

Ranks the published embedding cache against a question and returns the
top-K chunks. Degrades through three explicit tiers:

- SCORED: cosine similarity between the query vector and chunk vectors
- UNSCORED / KEYWORD_FALLBACK: token and topic-keyword matching, used when
  the cache has no vectors or the query could not be embedded
- document order: keyword mode returns the first K chunks when fewer than
  K chunks score above zero, so a non-empty cache never yields nothing

Dependencies: backend.core.rag_query.embedding_store, backend.core.rag_query.topic_keywords
System role: RAG retrieval business logic
"""

import logging
from collections.abc import Sequence

from backend.core.rag_query.embedding_store import EmbeddingStore
from backend.core.rag_query.topic_keywords import TYPE_KEYWORDS
from backend.models.chunk import EmbeddingRecord
from backend.models.retrieval import RetrievalMode, RetrievalResult, RetrievedChunk

logger = logging.getLogger(__name__)

DEFAULT_TOP_K = 5
MIN_TOKEN_LENGTH = 3


def tokenize(query: str) -> list[str]:
    """Lower-case, whitespace-split, and drop tokens shorter than three characters."""
    return [token for token in query.lower().split() if len(token) >= MIN_TOKEN_LENGTH]


def keyword_score(tokens: Sequence[str], chunk_type: str, text: str) -> int:
    """
    Heuristic relevance of one chunk for a tokenized query.

    One point per token found in the chunk text, two points per topic
    keyword of the chunk's type that some token contains or is contained by.
    """
    text_lower = text.lower()
    score = sum(1 for token in tokens if token in text_lower)

    for keyword in TYPE_KEYWORDS.get(chunk_type, ()):
        if any(token in keyword or keyword in token for token in tokens):
            score += 2
    return score


class Retriever:
    """Top-K retrieval over the embedding store's current cache."""

    def __init__(self, embedding_store: EmbeddingStore, top_k: int = DEFAULT_TOP_K) -> None:
        """
        Initialize retriever.

        Args:
            embedding_store: Owner of the cache and query embeddings
            top_k: Maximum chunks per result
        """
        self._store = embedding_store
        self._top_k = top_k

    async def retrieve(self, query: str) -> RetrievalResult:
        """
        Retrieve the most relevant chunks for a question.

        Args:
            query: User question

        Returns:
            RetrievalResult: Up to top_k chunks, highest relevance first
        """
        # One snapshot per call; a concurrent rebuild cannot change it
        cache = self._store.current_cache()
        if cache.is_empty:
            logger.warning(f"{__name__}:retrieve - Cache is empty, nothing to retrieve")
            return RetrievalResult(mode=RetrievalMode.EMPTY)

        if not cache.has_vectors:
            return self._rank_by_keyword(query, cache.records, RetrievalMode.UNSCORED)

        query_vector = await self._store.embed_query(query)
        if query_vector is None:
            logger.warning(
                f"{__name__}:retrieve - Query embedding unavailable, keyword fallback for this call"
            )
            return self._rank_by_keyword(query, cache.records, RetrievalMode.KEYWORD_FALLBACK)

        return self._rank_by_embedding(query_vector, cache.records)

    def _rank_by_embedding(
        self,
        query_vector: Sequence[float],
        records: Sequence[EmbeddingRecord],
    ) -> RetrievalResult:
        scored = [
            RetrievedChunk(
                text=record.text,
                type=record.type,
                score=self._store.similarity(query_vector, record.embedding),
            )
            for record in records
        ]
        # sorted() is stable: equal scores keep document order
        ranked = sorted(scored, key=lambda chunk: chunk.score, reverse=True)
        result = RetrievalResult(chunks=tuple(ranked[: self._top_k]), mode=RetrievalMode.SCORED)
        self._log_result(result)
        return result

    def _rank_by_keyword(
        self,
        query: str,
        records: Sequence[EmbeddingRecord],
        mode: RetrievalMode,
    ) -> RetrievalResult:
        tokens = tokenize(query)
        scored = [
            RetrievedChunk(
                text=record.text,
                type=record.type,
                score=keyword_score(tokens, record.type, record.text),
            )
            for record in records
        ]
        ranked = sorted(scored, key=lambda chunk: chunk.score, reverse=True)

        relevant = [chunk for chunk in ranked if chunk.score > 0]
        if len(relevant) >= self._top_k:
            ranked = relevant
        elif not relevant:
            logger.info(f"{__name__}:_rank_by_keyword - No keyword matches, returning document order")

        result = RetrievalResult(chunks=tuple(ranked[: self._top_k]), mode=mode)
        self._log_result(result)
        return result

    @staticmethod
    def _log_result(result: RetrievalResult) -> None:
        logger.info(
            f"{__name__}:retrieve - mode={result.mode.value}, chunks={len(result)}, "
            f"types={[chunk.type for chunk in result]}"
        )
