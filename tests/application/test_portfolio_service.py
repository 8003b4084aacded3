"""
Test suite for PortfolioService and AnalyticsService.

Uses real file-backed stores in a temp directory and the fake provider.

System role: Verification of document replacement and analytics orchestration
"""

from pathlib import Path

import pytest

from backend.application.services import AnalyticsService, PortfolioService, StatusService
from backend.boundary.storage import PortfolioStore, ThemeAnalyticsStore
from backend.core.exceptions import InvalidPortfolioError, ValidationError
from backend.core.rag_query.embedding_store import EmbeddingStore
from backend.models.retrieval import CacheMode


@pytest.fixture
def embedding_store(portfolio_store: PortfolioStore, fake_provider) -> EmbeddingStore:
    return EmbeddingStore(fake_provider, portfolio_store.load)


@pytest.fixture
def portfolio_service(portfolio_store: PortfolioStore, embedding_store: EmbeddingStore) -> PortfolioService:
    return PortfolioService(store=portfolio_store, embedding_store=embedding_store)


class TestPortfolioService:
    """Test suite for PortfolioService."""

    @pytest.mark.asyncio
    async def test_get_portfolio(self, portfolio_service: PortfolioService, sample_portfolio: dict):
        assert await portfolio_service.get_portfolio() == sample_portfolio

    @pytest.mark.asyncio
    async def test_replace_rebuilds_cache(
        self,
        portfolio_service: PortfolioService,
        embedding_store: EmbeddingStore,
    ):
        """Test replacement publishes a cache built from the new document."""
        # Arrange
        await embedding_store.rebuild()

        # Act
        response = await portfolio_service.replace_portfolio(
            {"profile": {"name": "Sam"}, "projects": [{"title": "Soup", "description": "A recipe app"}]}
        )

        # Assert
        assert response.success is True
        assert response.chunk_count == 2
        assert response.cache_mode == CacheMode.SCORED
        assert response.backup_file.startswith("portfolio.backup-")
        assert [record.id for record in embedding_store.current_cache().records] == ["profile", "project-0"]

    @pytest.mark.asyncio
    async def test_upload_raw_rejects_invalid_json(
        self,
        portfolio_service: PortfolioService,
        embedding_store: EmbeddingStore,
    ):
        with pytest.raises(InvalidPortfolioError):
            await portfolio_service.upload_raw(b"{broken")

        assert embedding_store.current_cache().is_empty

    @pytest.mark.asyncio
    async def test_provider_outage_still_replaces(self, portfolio_store: PortfolioStore, make_provider):
        """Test an embedding outage degrades the cache but not the upload."""
        store = EmbeddingStore(make_provider(embed_error=RuntimeError("down")), portfolio_store.load)
        service = PortfolioService(store=portfolio_store, embedding_store=store)

        response = await service.replace_portfolio({"profile": {"name": "Sam"}})

        assert response.chunk_count == 1
        assert response.cache_mode == CacheMode.UNSCORED


class TestAnalyticsService:
    """Test suite for AnalyticsService."""

    @pytest.mark.asyncio
    async def test_record_and_report(self, tmp_path: Path):
        service = AnalyticsService(ThemeAnalyticsStore(tmp_path / "analytics.json"))

        await service.record_theme("elegant")
        stats = await service.theme_stats()

        assert stats["elegant"] == 1
        assert stats["minimal"] == 0

    @pytest.mark.asyncio
    async def test_unknown_theme(self, tmp_path: Path):
        service = AnalyticsService(ThemeAnalyticsStore(tmp_path / "analytics.json"))

        with pytest.raises(ValidationError):
            await service.record_theme("neon")


class TestStatusService:
    """Test suite for StatusService."""

    @pytest.mark.asyncio
    async def test_provider_status_includes_cache(self, fake_provider, embedding_store: EmbeddingStore):
        await embedding_store.rebuild()

        status = StatusService(fake_provider, embedding_store).provider_status()

        assert status.provider == "fake"
        assert status.cache_mode == CacheMode.SCORED
        assert status.cache_size == 10
