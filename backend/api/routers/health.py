"""
Health check API endpoints.

Routes: GET /api/health

Dependencies: backend.application.services.status_service
System role: Health check HTTP API
"""

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from backend.api.deps import get_status_service
from backend.application.services.status_service import StatusService
from backend.models.retrieval import CacheMode


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    message: str
    cache_mode: CacheMode
    cache_size: int


router = APIRouter(prefix="/api/health", tags=["health"])


@router.get("", response_model=HealthResponse)
async def health_check(
    status_service: StatusService = Depends(get_status_service),
) -> HealthResponse:
    """Liveness plus the current retrieval cache mode."""
    cache = status_service.current_cache()
    return HealthResponse(
        status="healthy",
        message="Server Healthy",
        cache_mode=cache.mode,
        cache_size=len(cache),
    )
