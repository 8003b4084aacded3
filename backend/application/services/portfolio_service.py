"""
Portfolio service.

Reads the portfolio document for the site and replaces it on upload,
rebuilding the retrieval cache after every successful replacement.

Dependencies: fastapi.concurrency, backend.boundary.storage, backend.core.rag_query
System role: Document replacement orchestration
"""

import logging
from typing import Any

from fastapi.concurrency import run_in_threadpool

from backend.boundary.storage.portfolio_store import PortfolioStore, parse_portfolio
from backend.core.rag_query.embedding_store import EmbeddingStore
from backend.models.portfolio import UploadResponse

logger = logging.getLogger(__name__)


class PortfolioService:
    """Read and replace the portfolio document."""

    def __init__(self, store: PortfolioStore, embedding_store: EmbeddingStore) -> None:
        """
        Initialize portfolio service.

        Args:
            store: Document store
            embedding_store: Retrieval cache rebuilt after replacement
        """
        self.store = store
        self.embedding_store = embedding_store

    async def get_portfolio(self) -> dict[str, Any]:
        """
        Load the current document.

        Raises:
            PortfolioStoreError: Document missing or unreadable
        """
        return await run_in_threadpool(self.store.load)

    async def upload_raw(self, raw: str | bytes) -> UploadResponse:
        """
        Replace the document from an uploaded JSON file.

        Raises:
            InvalidPortfolioError: Payload is not a valid portfolio
            PortfolioStoreError: Write failed
        """
        return await self.replace_portfolio(parse_portfolio(raw))

    async def replace_portfolio(self, document: dict[str, Any]) -> UploadResponse:
        """
        Replace the document and rebuild the retrieval cache.

        Flow:
        1. Validate, back up the previous document and write the new one
        2. Rebuild the embedding cache from the new document
        3. Report chunk count, cache mode and any rebuild warning

        Args:
            document: New portfolio document

        Returns:
            UploadResponse: Replacement summary

        Raises:
            InvalidPortfolioError: Document failed validation
            PortfolioStoreError: Backup or write failed
        """
        backup_path = await run_in_threadpool(self.store.replace, document)
        cache = await self.embedding_store.rebuild()

        logger.info(
            f"{__name__}:replace_portfolio - Portfolio replaced, "
            f"chunks={len(cache)}, mode={cache.mode.value}"
        )
        return UploadResponse(
            message="Portfolio updated successfully",
            chunk_count=len(cache),
            cache_mode=cache.mode,
            backup_file=backup_path.name if backup_path else None,
            warning=cache.warning,
        )
