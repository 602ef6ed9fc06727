"""Health check and monitoring API endpoints."""

import time
from datetime import datetime

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from ..config import get_settings
from ..core.engine import SearchEngine
from ..exceptions import RetrievalError
from ..models.response import HealthResponse
from .deps import get_engine

router = APIRouter(prefix="/api/v1", tags=["health"])
settings = get_settings()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Check the health status of the search service"
)
def health_check(request: Request, engine: SearchEngine = Depends(get_engine)) -> HealthResponse:
    """
    Perform a health check on the search service.

    The corpus store is probed with a count; an empty corpus is reported as
    degraded and a failing store as unhealthy.
    """
    started_at = getattr(request.app.state, "started_at", time.time())
    uptime = time.time() - started_at

    dependencies = {"search_engine": "healthy"}
    try:
        dependencies["corpus_store"] = "healthy" if engine.count() > 0 else "degraded"
    except RetrievalError:
        dependencies["corpus_store"] = "unhealthy"

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


@router.get(
    "/health/ready",
    summary="Readiness check",
    description="Check if the service is ready to accept requests"
)
def readiness_check(engine: SearchEngine = Depends(get_engine)) -> JSONResponse:
    """
    Check if the service is ready to accept requests.

    Ready means the corpus store answers and holds at least one verse.
    """
    try:
        total_verses = engine.count()
    except RetrievalError as e:
        return JSONResponse(
            status_code=503,
            content={
                "status": "not_ready",
                "error": str(e),
                "timestamp": datetime.utcnow().isoformat()
            }
        )

    if total_verses == 0:
        return JSONResponse(
            status_code=503,
            content={
                "status": "not_ready",
                "error": "Corpus is empty",
                "timestamp": datetime.utcnow().isoformat()
            }
        )

    return JSONResponse(
        status_code=200,
        content={
            "status": "ready",
            "timestamp": datetime.utcnow().isoformat(),
            "total_verses": total_verses
        }
    )
