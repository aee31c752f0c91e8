"""
Health check endpoints for monitoring and orchestration.

- /health: liveness (always 200)
- /health/db: backing store connectivity
- /health/ready: store reachable and notification workers running
"""

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from rental.api.dependencies import get_session

logger = logging.getLogger(__name__)

router = APIRouter()


async def _database_ok(session: AsyncSession | None) -> bool:
    if session is None:
        # In-memory backend
        return True
    try:
        result = await session.execute(text("SELECT 1"))
        result.scalar()
        return True
    except Exception as e:
        logger.error("Database health check failed", exc_info=e)
        return False


@router.get("/health")
async def health_check():
    return {"status": "ok", "service": "rental-reservations"}


@router.get("/health/db")
async def health_check_db(session: AsyncSession | None = Depends(get_session)):
    backend = "in_memory" if session is None else "database"
    if await _database_ok(session):
        return {"status": "healthy", "component": backend}
    return JSONResponse(
        status_code=503,
        content={
            "status": "unhealthy",
            "component": backend,
            "error": "Database connection failed",
        },
    )


@router.get("/health/ready")
async def health_check_ready(
    request: Request,
    session: AsyncSession | None = Depends(get_session),
):
    """Returns 503 until the app can serve traffic."""
    dispatcher = getattr(request.app.state, "notification_dispatcher", None)
    checks = {
        "database": "healthy" if await _database_ok(session) else "unhealthy",
        "notifications": "running" if dispatcher is not None and dispatcher.is_running else "stopped",
    }
    if checks["database"] != "healthy" or checks["notifications"] != "running":
        logger.error("Readiness check failed", extra={"checks": checks})
        return JSONResponse(status_code=503, content={"status": "not_ready", "checks": checks})
    return {"status": "ready", "checks": checks}
