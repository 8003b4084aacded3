"""
FastAPI application with assembled routers.

Initializes FastAPI app with all API routers, builds the retrieval cache
at startup and configures uvicorn server.

Dependencies: fastapi, backend.api.routers, uvicorn
System role: API entry point with router assembly and server launch
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from backend.api.deps.dependencies import ServiceCache, get_service_cache
from backend.configs import get_settings
from backend.observability import configure_logging
from .routers import (
    admin_router,
    analytics_router,
    chat_router,
    health_router,
    portfolio_router,
)


def build_lifespan(cache: ServiceCache):
    """Lifespan bound to one service cache."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        Application lifespan context manager.

        Builds the embedding cache before serving so the first question
        already sees the document.
        """
        logger = logging.getLogger("uvicorn")

        # Startup
        logger.info("Building retrieval cache...")
        embedding_cache = await cache.embedding_store.rebuild()
        logger.info(
            f"Retrieval cache ready: records={len(embedding_cache)}, mode={embedding_cache.mode.value}"
        )

        yield

        # Shutdown
        cache.clear()
        logger.info("Service cache cleared")

    return lifespan


def create_app(service_cache: ServiceCache | None = None) -> FastAPI:
    """
    Create and configure FastAPI application with routers.

    Args:
        service_cache: Container to serve from, defaults to the global one

    Returns:
        FastAPI: Configured application instance with all routers registered
    """
    cache = service_cache or get_service_cache()
    configure_logging(cache.settings.log_level)

    app = FastAPI(
        title=cache.settings.app_name,
        description="Retrieval-augmented Q&A over a personal portfolio",
        version="0.1.0",
        lifespan=build_lifespan(cache),
    )

    if service_cache is not None:
        app.dependency_overrides[get_service_cache] = lambda: service_cache

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cache.settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health_router)
    app.include_router(portfolio_router)
    app.include_router(chat_router)
    app.include_router(analytics_router)
    app.include_router(admin_router)

    return app


app = create_app()


if __name__ == "__main__":
    settings = get_settings()
    uvicorn.run(
        "backend.api.main:app",
        host="0.0.0.0",
        port=8000,
        log_level=settings.log_level.lower(),
    )
