"""
Theme click analytics store.

Persists per-theme selection counters in a small JSON file.

Dependencies: json, pathlib, backend.core.exceptions
System role: Durable storage for theme analytics
"""

import json
import logging
import threading
from pathlib import Path

from backend.core.exceptions import PortfolioStoreError, ValidationError
from backend.models.analytics import THEMES

logger = logging.getLogger(__name__)


class ThemeAnalyticsStore:
    """Filesystem-backed theme counters."""

    def __init__(self, path: Path, themes: tuple[str, ...] = THEMES) -> None:
        self._path = Path(path)
        self._themes = themes
        self._lock = threading.Lock()

    def _defaults(self) -> dict[str, int]:
        return {theme: 0 for theme in self._themes}

    def load(self) -> dict[str, int]:
        """
        Read counters; a missing or unreadable file counts as all zeros.

        Returns:
            dict[str, int]: Counter per known theme
        """
        counts = self._defaults()
        try:
            stored = json.loads(self._path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            return counts
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"{__name__}:load - Unreadable analytics file {self._path}: {e}")
            return counts

        if isinstance(stored, dict):
            for theme, value in stored.items():
                if isinstance(value, int):
                    counts[theme] = value
        return counts

    def increment(self, theme: str | None) -> dict[str, int]:
        """
        Record one selection of a theme.

        Args:
            theme: Theme name

        Returns:
            dict[str, int]: Updated counters

        Raises:
            ValidationError: Unknown theme
            PortfolioStoreError: Counters could not be written
        """
        if theme not in self._themes:
            raise ValidationError("Invalid theme name", field="theme")

        with self._lock:
            counts = self.load()
            counts[theme] = counts.get(theme, 0) + 1
            try:
                self._path.parent.mkdir(parents=True, exist_ok=True)
                self._path.write_text(json.dumps(counts, indent=2), encoding="utf-8")
            except OSError as e:
                raise PortfolioStoreError(f"Failed to write analytics: {e}", str(self._path)) from e
        return counts
