"""
API Dependencies

Dependency injection for FastAPI routes. The engine and metrics live on
``app.state`` and are created by the application lifespan.
"""

from fastapi import HTTPException, Request

from ..core.engine import SearchEngine
from .stats import SearchMetrics


def get_engine(request: Request) -> SearchEngine:
    """Get the search engine bound to the running application."""
    engine = getattr(request.app.state, "engine", None)
    if engine is None:
        raise HTTPException(status_code=503, detail="Search engine is not initialized")
    return engine


def get_metrics(request: Request) -> SearchMetrics:
    """Get the query metrics collector."""
    metrics = getattr(request.app.state, "metrics", None)
    if metrics is None:
        metrics = SearchMetrics()
        request.app.state.metrics = metrics
    return metrics
