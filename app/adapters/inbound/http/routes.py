"""HTTP routes."""

from fastapi import APIRouter, status

from app.adapters.inbound.http.content_routes import router as content_router
from app.adapters.inbound.http.counselor_routes import router as counselor_router
from app.adapters.inbound.http.lead_routes import router as lead_router

router = APIRouter()


@router.get("/health", status_code=status.HTTP_200_OK)
async def health_check() -> dict[str, str]:
    """
    Health check endpoint for liveness/readiness.

    Returns:
        Health status
    """
    return {"status": "ok"}


router.include_router(lead_router)
router.include_router(counselor_router)
router.include_router(content_router)
