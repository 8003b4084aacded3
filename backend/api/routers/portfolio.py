"""Portfolio API endpoints.

Routes:
- GET /api/portfolio - Current portfolio document
- POST /api/upload - Replace the document (admin, multipart or JSON body)

Dependencies: backend.application.services.portfolio_service
System role: Portfolio document HTTP API
"""

import logging
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Request
from starlette.datastructures import UploadFile

from backend.api.deps import get_portfolio_service, require_admin
from backend.application.services.portfolio_service import PortfolioService
from backend.core.exceptions import InvalidPortfolioError, PortfolioStoreError
from backend.models.portfolio import UploadResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["portfolio"])

UPLOAD_FIELD = "portfolio"


@router.get("/portfolio")
async def get_portfolio(
    portfolio_service: PortfolioService = Depends(get_portfolio_service),
) -> dict[str, Any]:
    """
    Return the current portfolio document.

    Raises:
        HTTPException(500): Document missing or unreadable
    """
    try:
        return await portfolio_service.get_portfolio()
    except PortfolioStoreError as e:
        logger.error(f"{__name__}:get_portfolio - {e}")
        raise HTTPException(status_code=500, detail="Failed to load portfolio data")


@router.post("/upload", response_model=UploadResponse)
async def upload_portfolio(
    request: Request,
    _: str = Depends(require_admin),
    portfolio_service: PortfolioService = Depends(get_portfolio_service),
) -> UploadResponse:
    """Replace the portfolio document.

    Accepts either a multipart form with a `portfolio` file field or a JSON
    request body holding the document itself.

    Args:
        request: Raw request, read as form or JSON by content type
        portfolio_service: Injected PortfolioService

    Returns:
        UploadResponse: Replacement summary with rebuild outcome

    Raises:
        HTTPException(400): No data, invalid JSON or missing profile.name
        HTTPException(500): Write failure
    """
    content_type = request.headers.get("content-type", "")

    try:
        if content_type.startswith("multipart/form-data"):
            form = await request.form()
            upload = form.get(UPLOAD_FIELD)
            if not isinstance(upload, UploadFile):
                raise HTTPException(status_code=400, detail="No portfolio data provided")
            raw = await upload.read()
            return await portfolio_service.upload_raw(raw)

        raw = await request.body()
        if not raw.strip():
            raise HTTPException(status_code=400, detail="No portfolio data provided")
        return await portfolio_service.upload_raw(raw)

    except InvalidPortfolioError as e:
        raise HTTPException(status_code=400, detail=e.message)
    except PortfolioStoreError as e:
        logger.error(f"{__name__}:upload_portfolio - {e}")
        raise HTTPException(status_code=500, detail="Failed to save portfolio")
