"""
Health check endpoints for monitoring and orchestration.

- /health: basic liveness check (always 200)
- /health/ready: readiness check (local store database + payment configuration)
"""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from droppit.api.deps import get_db_session
from droppit.config import Settings, get_settings

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/health")
async def health_check():
    """Liveness probe: 200 while the process is up."""
    return {"status": "ok", "service": "droppit-checkout"}


@router.get("/health/ready")
async def health_check_ready(
    session: AsyncSession = Depends(get_db_session),
    settings: Settings = Depends(get_settings),
):
    """
    Readiness probe.

    Returns 503 when the database behind the local store is unreachable.
    Stripe configuration is reported but does not fail readiness in
    in-memory mode, where the stub gateway is used.
    """
    health_status = {
        "status": "ready",
        "checks": {
            "stripe": "configured" if settings.stripe_secret_key else "not_configured",
        },
    }

    try:
        result = await session.execute(text("SELECT 1"))
        result.scalar()
        health_status["checks"]["database"] = "healthy"
    except Exception as e:
        logger.error("Readiness check: Database unhealthy", exc_info=e)
        health_status["status"] = "not_ready"
        health_status["checks"]["database"] = "unhealthy"
        return JSONResponse(status_code=503, content=health_status)

    if not settings.use_in_memory and not settings.stripe_secret_key:
        health_status["status"] = "not_ready"
        return JSONResponse(status_code=503, content=health_status)

    return health_status
