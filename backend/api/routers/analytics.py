"""Theme analytics API endpoints.

Routes:
- POST /api/theme-analytics - Count a theme selection
- GET /admin/theme-stats - Theme counters (admin)

Dependencies: backend.application.services.analytics_service
System role: Theme analytics HTTP API
"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from backend.api.deps import get_analytics_service, require_admin
from backend.application.services.analytics_service import AnalyticsService
from backend.core.exceptions import PortfolioStoreError, ValidationError
from backend.models.analytics import ThemeAnalyticsRequest
from backend.models.common import SuccessResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["analytics"])


@router.post("/api/theme-analytics", response_model=SuccessResponse)
async def record_theme(
    request: ThemeAnalyticsRequest,
    analytics_service: AnalyticsService = Depends(get_analytics_service),
) -> SuccessResponse:
    """
    Count one theme selection.

    Raises:
        HTTPException(400): Unknown theme
        HTTPException(500): Counters could not be written
    """
    try:
        await analytics_service.record_theme(request.theme)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=e.message)
    except PortfolioStoreError as e:
        logger.error(f"{__name__}:record_theme - {e}")
        raise HTTPException(status_code=500, detail="Failed to record theme analytics")
    return SuccessResponse()


@router.get("/admin/theme-stats", dependencies=[Depends(require_admin)])
async def theme_stats(
    analytics_service: AnalyticsService = Depends(get_analytics_service),
) -> dict[str, int]:
    """Return the per-theme selection counters."""
    return await analytics_service.theme_stats()
