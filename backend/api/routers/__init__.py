"""API routers."""

from .admin import router as admin_router
from .analytics import router as analytics_router
from .chat import router as chat_router
from .health import router as health_router
from .portfolio import router as portfolio_router

__all__ = [
    "admin_router",
    "analytics_router",
    "chat_router",
    "health_router",
    "portfolio_router",
]
