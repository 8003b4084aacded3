"""Admin diagnostics API endpoints.

Routes:
- GET /admin/provider-status - Selected provider and retrieval cache state

Dependencies: backend.application.services.status_service
System role: Admin introspection HTTP API
"""

from fastapi import APIRouter, Depends

from backend.api.deps import get_status_service, require_admin
from backend.application.services.status_service import StatusService
from backend.models.provider import ProviderStatusResponse

router = APIRouter(prefix="/admin", tags=["admin"], dependencies=[Depends(require_admin)])


@router.get("/provider-status", response_model=ProviderStatusResponse)
async def provider_status(
    status_service: StatusService = Depends(get_status_service),
) -> ProviderStatusResponse:
    """Report the selected provider and the live cache mode and size."""
    return status_service.provider_status()
