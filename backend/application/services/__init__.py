"""Service orchestrators."""

from .analytics_service import AnalyticsService
from .chat_service import ChatService
from .portfolio_service import PortfolioService
from .status_service import StatusService

__all__ = [
    "AnalyticsService",
    "ChatService",
    "PortfolioService",
    "StatusService",
]
