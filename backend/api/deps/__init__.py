"""API-specific dependencies."""

# Re-export common dependencies
from .dependencies import (
    ServiceCache,
    get_analytics_service,
    get_chat_service,
    get_portfolio_service,
    get_service_cache,
    get_status_service,
)
from .security import require_admin

__all__ = [
    "ServiceCache",
    "get_analytics_service",
    "get_chat_service",
    "get_portfolio_service",
    "get_service_cache",
    "get_status_service",
    "require_admin",
]
