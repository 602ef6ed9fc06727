"""Data models for ayah search."""

from .verse import VerseRecord, parse_verse_key
from .request import SearchMode, SearchRequest, BatchSearchRequest
from .response import (
    SearchResult,
    SearchResponse,
    VerseListResponse,
    ErrorResponse,
    HealthResponse,
    MetricsResponse,
)

__all__ = [
    "VerseRecord",
    "parse_verse_key",
    "SearchMode",
    "SearchRequest",
    "BatchSearchRequest",
    "SearchResult",
    "SearchResponse",
    "VerseListResponse",
    "ErrorResponse",
    "HealthResponse",
    "MetricsResponse",
]
