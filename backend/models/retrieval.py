"""
Retrieval state models.

Tagged states for the embedding cache and for each retrieval call, so every
degradation tier (vector, keyword, document order) is explicit instead of
inferred from missing vectors.

Dependencies: dataclasses, backend.models.chunk
System role: Embedding cache snapshot and retrieval result structures
"""

from collections.abc import Iterator
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from backend.models.chunk import EmbeddingRecord


class CacheMode(str, Enum):
    """How the records of an embedding cache can be scored."""

    SCORED = "scored"
    UNSCORED = "unscored"


class RetrievalMode(str, Enum):
    """Which tier produced a retrieval result."""

    SCORED = "scored"
    UNSCORED = "unscored"
    KEYWORD_FALLBACK = "keyword_fallback"
    EMPTY = "empty"


@dataclass(frozen=True)
class EmbeddingCache:
    """Immutable snapshot of the embedding records for one portfolio document."""

    records: tuple[EmbeddingRecord, ...] = ()
    mode: CacheMode = CacheMode.UNSCORED
    built_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    warning: str | None = None

    def __len__(self) -> int:
        return len(self.records)

    @property
    def is_empty(self) -> bool:
        return not self.records

    @property
    def has_vectors(self) -> bool:
        return any(record.embedding is not None for record in self.records)


@dataclass(frozen=True)
class RetrievedChunk:
    """Single ranked chunk returned by the retriever."""

    text: str
    type: str
    score: float


@dataclass(frozen=True)
class RetrievalResult:
    """Ordered retrieval output, highest relevance first."""

    chunks: tuple[RetrievedChunk, ...] = ()
    mode: RetrievalMode = RetrievalMode.EMPTY

    def __len__(self) -> int:
        return len(self.chunks)

    def __iter__(self) -> Iterator[RetrievedChunk]:
        return iter(self.chunks)

    def __getitem__(self, index: int) -> RetrievedChunk:
        return self.chunks[index]
