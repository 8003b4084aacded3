"""
Theme analytics service.

Dependencies: fastapi.concurrency, backend.boundary.storage
System role: Theme click counting
"""

from fastapi.concurrency import run_in_threadpool

from backend.boundary.storage.analytics_store import ThemeAnalyticsStore


class AnalyticsService:
    """Record and report theme selections."""

    def __init__(self, store: ThemeAnalyticsStore) -> None:
        self.store = store

    async def record_theme(self, theme: str | None) -> dict[str, int]:
        """
        Count one selection of a theme.

        Raises:
            ValidationError: Unknown theme
        """
        return await run_in_threadpool(self.store.increment, theme)

    async def theme_stats(self) -> dict[str, int]:
        return await run_in_threadpool(self.store.load)
