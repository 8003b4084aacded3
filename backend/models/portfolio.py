"""
Portfolio upload schemas.

Dependencies: pydantic, backend.models.retrieval
System role: Upload API contracts
"""

from pydantic import Field

from backend.models.common import SuccessResponse
from backend.models.retrieval import CacheMode


class UploadResponse(SuccessResponse):
    """Result of replacing the portfolio document."""

    chunk_count: int = Field(description="Chunks in the rebuilt retrieval cache")
    cache_mode: CacheMode = Field(description="Whether the rebuilt cache carries vectors")
    backup_file: str | None = Field(default=None, description="Backup of the replaced document")
    warning: str | None = Field(default=None, description="Non-fatal rebuild warning")
