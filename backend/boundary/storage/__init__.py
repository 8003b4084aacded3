"""
Storage boundary layer.

JSON file stores for the portfolio document and theme analytics.
"""

from backend.boundary.storage.analytics_store import ThemeAnalyticsStore
from backend.boundary.storage.portfolio_store import (
    PortfolioStore,
    parse_portfolio,
    validate_portfolio,
)

__all__ = [
    "PortfolioStore",
    "ThemeAnalyticsStore",
    "parse_portfolio",
    "validate_portfolio",
]
