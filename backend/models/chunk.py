"""
Chunk domain models.

A chunk is one retrievable unit of portfolio text with a semantic type
label. An embedding record pairs a chunk with its optional vector.

Dependencies: pydantic
System role: Retrieval unit data structures
"""

from pydantic import BaseModel, ConfigDict, Field


class PortfolioChunk(BaseModel):
    """Portfolio chunk produced by a single chunking run."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(description="Identifier unique within one chunking run")
    type: str = Field(description="Semantic label (profile, skill, project, ...)")
    text: str = Field(min_length=1, description="Self-contained natural-language summary")


class EmbeddingRecord(BaseModel):
    """Chunk paired with an optional embedding vector."""

    model_config = ConfigDict(frozen=True)

    chunk: PortfolioChunk
    embedding: tuple[float, ...] | None = Field(
        default=None,
        description="Embedding vector; None means vector retrieval is unavailable",
    )

    @property
    def id(self) -> str:
        return self.chunk.id

    @property
    def type(self) -> str:
        return self.chunk.type

    @property
    def text(self) -> str:
        return self.chunk.text
