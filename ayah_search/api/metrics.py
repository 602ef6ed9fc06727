"""Metrics and monitoring API endpoints."""

import os

import psutil
from fastapi import APIRouter, Depends

from ..models.response import MetricsResponse
from .deps import get_metrics
from .stats import SearchMetrics

router = APIRouter(prefix="/api/v1", tags=["metrics"])


def _process_memory_mb() -> float:
    return psutil.Process(os.getpid()).memory_info().rss / (1024 * 1024)


@router.get(
    "/metrics",
    response_model=MetricsResponse,
    summary="Get performance metrics",
    description="Query counters, average response time and process memory usage"
)
def read_metrics(metrics: SearchMetrics = Depends(get_metrics)) -> MetricsResponse:
    """
    Get performance metrics for the search service.

    Counters cover every search served since startup, including batch
    queries. Memory usage is the resident size of this process.
    """
    return MetricsResponse(
        total_queries=metrics.total_queries,
        lafaz_queries=metrics.lafaz_queries,
        makna_queries=metrics.makna_queries,
        empty_results=metrics.empty_results,
        fallback_searches=metrics.fallback_searches,
        retrieval_errors=metrics.retrieval_errors,
        average_response_time_ms=metrics.average_response_time_ms,
        memory_usage_mb=_process_memory_mb(),
    )
