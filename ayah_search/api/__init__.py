"""API endpoints for ayah search."""

from .search import router as search_router
from .verses import router as verses_router
from .health import router as health_router
from .metrics import router as metrics_router

__all__ = [
    "search_router",
    "verses_router",
    "health_router",
    "metrics_router",
]
