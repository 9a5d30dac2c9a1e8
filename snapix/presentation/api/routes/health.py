"""Health check routes."""

from datetime import datetime, timezone

from fastapi import APIRouter, Request

from snapix import __version__

router = APIRouter(tags=["Health"])


@router.get("/health", summary="Health check (liveness)")
async def health_check(request: Request) -> dict:
    settings = request.app.state.settings
    return {
        "status": "healthy",
        "version": settings.app_version or __version__,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "environment": settings.node_env,
    }


@router.get("/health/live", summary="Liveness probe")
async def liveness_check() -> dict:
    return {"status": "alive"}
