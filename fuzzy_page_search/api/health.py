"""Health check and monitoring API endpoints."""

import time
from datetime import datetime

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse

from ..config import Settings, get_settings
from ..core.engine import SearchEngine
from ..engine_instance import get_search_engine
from ..models.response import HealthResponse

router = APIRouter(prefix="/api", tags=["health"])

# Track application start time
app_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Check the health status of the search service"
)
async def health_check(
    engine: SearchEngine = Depends(get_search_engine),
    settings: Settings = Depends(get_settings)
) -> HealthResponse:
    """
    Perform a health check on the search service.

    Runs a tiny search through the engine to make sure matching and
    context extraction work end to end.
    """
    try:
        uptime = time.time() - app_start_time

        dependencies = {
            "search_engine": "healthy",
            "html_parser": "healthy",
        }

        try:
            result = engine.search("health", "service health check")
            if not result.found:
                dependencies["search_engine"] = "degraded"
        except Exception:
            dependencies["search_engine"] = "unhealthy"

        try:
            engine.search_html("ok", "<p>ok</p>")
        except Exception:
            dependencies["html_parser"] = "unhealthy"

        if all(status == "healthy" for status in dependencies.values()):
            status = "healthy"
        elif any(status == "unhealthy" for status in dependencies.values()):
            status = "unhealthy"
        else:
            status = "degraded"

        return HealthResponse(
            status=status,
            version=settings.app_version,
            uptime=uptime,
            dependencies=dependencies
        )

    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Health check failed: {str(e)}"
        )


@router.get(
    "/health/ready",
    summary="Readiness check",
    description="Check if the service is ready to accept requests"
)
async def readiness_check(
    engine: SearchEngine = Depends(get_search_engine)
) -> JSONResponse:
    """Check if the service is ready to accept requests."""
    config = engine.config
    return JSONResponse(
        status_code=200,
        content={
            "status": "ready",
            "timestamp": datetime.utcnow().isoformat(),
            "defaults": {
                "fuzzy_distance": config.fuzzy_distance,
                "count_before": config.words_before,
                "count_after": config.words_after,
            }
        }
    )


@router.get(
    "/health/live",
    summary="Liveness check",
    description="Check if the service is alive and responding"
)
async def liveness_check() -> JSONResponse:
    """Check if the service process is alive."""
    return JSONResponse(
        status_code=200,
        content={
            "status": "alive",
            "timestamp": datetime.utcnow().isoformat(),
            "uptime": time.time() - app_start_time
        }
    )
