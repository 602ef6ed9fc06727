"""Search API endpoints."""

from typing import List, Optional

import structlog
from fastapi import APIRouter, Depends, HTTPException, Path, Query

from ..config import get_settings
from ..core.engine import SearchEngine
from ..exceptions import RetrievalError
from ..models.request import BatchSearchRequest, SearchMode, SearchRequest
from ..models.response import SearchResponse
from .deps import get_engine, get_metrics
from .stats import SearchMetrics

router = APIRouter(prefix="/api/v1", tags=["search"])
settings = get_settings()
logger = structlog.get_logger(__name__)


def _parse_mode(mode: str) -> SearchMode:
    try:
        return SearchMode(mode)
    except ValueError:
        raise HTTPException(
            status_code=400,
            detail=f"Unknown search mode '{mode}'. Use 'lafaz' or 'makna'"
        )


def _check_query(query: str) -> None:
    if len(query) > settings.max_query_length:
        raise HTTPException(
            status_code=400,
            detail=f"Query too long. Maximum length is {settings.max_query_length} characters"
        )


def _run_search(
    engine: SearchEngine,
    metrics: SearchMetrics,
    query: str,
    mode: SearchMode,
    limit: Optional[int],
) -> SearchResponse:
    limit = min(limit or settings.default_limit, settings.max_limit)
    try:
        response = engine.search(query, mode, limit)
    except RetrievalError as e:
        metrics.record_error()
        logger.error("Search failed", query=query, mode=mode.value, error=str(e))
        raise

    metrics.record(response)
    return response


@router.get(
    "/search/{mode}/{query}",
    response_model=SearchResponse,
    summary="Search verses",
    description="Search verses by transliteration (lafaz) or Indonesian translation (makna)"
)
def search_verses(
    mode: str = Path(..., description="lafaz, makna or terjemahan"),
    query: str = Path(..., description="The text to search for", min_length=1),
    limit: Optional[int] = Query(
        None,
        ge=1,
        le=200,
        description="Maximum number of results to return"
    ),
    engine: SearchEngine = Depends(get_engine),
    metrics: SearchMetrics = Depends(get_metrics),
) -> SearchResponse:
    """
    Search verses in the given mode.

    Lafaz queries are matched against normalized transliterations with a
    consonant skeleton fallback for vowel-length typos. Makna queries use
    keyword matching, then a single-typo pass when keywords find nothing.
    """
    search_mode = _parse_mode(mode)
    _check_query(query)
    return _run_search(engine, metrics, query, search_mode, limit)


@router.post(
    "/search",
    response_model=SearchResponse,
    summary="Search with request body",
    description="Search verses using a structured request body"
)
def search_with_body(
    request: SearchRequest,
    engine: SearchEngine = Depends(get_engine),
    metrics: SearchMetrics = Depends(get_metrics),
) -> SearchResponse:
    """Search verses using a JSON request body."""
    _check_query(request.query)
    return _run_search(engine, metrics, request.query, request.mode, request.limit)


@router.post(
    "/search/batch",
    response_model=List[SearchResponse],
    summary="Batch search",
    description="Search multiple queries in one mode in a single request"
)
def batch_search(
    request: BatchSearchRequest,
    engine: SearchEngine = Depends(get_engine),
    metrics: SearchMetrics = Depends(get_metrics),
) -> List[SearchResponse]:
    """
    Perform batch search for multiple queries.

    All queries share the request's mode and limit. Results come back in
    query order.
    """
    for query in request.queries:
        _check_query(query)

    return [
        _run_search(engine, metrics, query, request.mode, request.limit)
        for query in request.queries
    ]
