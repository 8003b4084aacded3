"""
Test suite for the theme analytics store.

System role: Verification of theme counter persistence
"""

from pathlib import Path

import pytest

from backend.boundary.storage import ThemeAnalyticsStore
from backend.core.exceptions import ValidationError


@pytest.fixture
def analytics_store(tmp_path: Path) -> ThemeAnalyticsStore:
    return ThemeAnalyticsStore(tmp_path / "theme-analytics.json")


def test_missing_file_reads_as_zeros(analytics_store: ThemeAnalyticsStore):
    assert analytics_store.load() == {"minimal": 0, "modern": 0, "elegant": 0, "retro": 0}


def test_increment_persists(analytics_store: ThemeAnalyticsStore, tmp_path: Path):
    # Act
    analytics_store.increment("retro")
    counts = analytics_store.increment("retro")

    # Assert
    assert counts["retro"] == 2
    assert ThemeAnalyticsStore(tmp_path / "theme-analytics.json").load()["retro"] == 2


@pytest.mark.parametrize("theme", ["neon", "", None])
def test_unknown_theme_rejected(analytics_store: ThemeAnalyticsStore, theme):
    with pytest.raises(ValidationError, match="Invalid theme name"):
        analytics_store.increment(theme)


def test_corrupt_file_reads_as_zeros(tmp_path: Path):
    path = tmp_path / "theme-analytics.json"
    path.write_text("not json", encoding="utf-8")

    assert ThemeAnalyticsStore(path).load()["modern"] == 0
