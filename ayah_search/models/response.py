"""Response models for search results and API endpoints."""

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from .request import SearchMode
from .verse import VerseRecord


class SearchResult(BaseModel):
    """Individual ranked verse."""

    verse: VerseRecord = Field(..., description="The matched verse")
    score: float = Field(..., description="Relevance score, higher is better")
    highlight_token: Optional[str] = Field(
        None, description="Translation word to emphasize (makna mode only)"
    )


class SearchResponse(BaseModel):
    """Response for search queries."""

    query: str = Field(..., description="Original search query")
    mode: SearchMode = Field(..., description="Search mode used")
    stage: str = Field(..., description="Retrieval stage that produced the results")
    execution_time_ms: float = Field(..., description="Query execution time in milliseconds")
    total_results: int = Field(..., description="Total number of results")
    results: List[SearchResult] = Field(..., description="Ranked results")
    timestamp: datetime = Field(default_factory=datetime.utcnow, description="Response timestamp")


class VerseListResponse(BaseModel):
    """Response for surah and juz listings."""

    total: int = Field(..., description="Number of verses returned")
    verses: List[VerseRecord] = Field(..., description="Verses in corpus order")


class ErrorResponse(BaseModel):
    """Error response model."""

    error: str = Field(..., description="Error type")
    message: str = Field(..., description="Error message")
    details: Optional[Dict[str, Any]] = Field(None, description="Additional error details")
    timestamp: datetime = Field(default_factory=datetime.utcnow, description="Error timestamp")


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(..., description="Service status")
    version: str = Field(..., description="Application version")
    uptime: float = Field(..., description="Service uptime in seconds")
    timestamp: datetime = Field(default_factory=datetime.utcnow, description="Check timestamp")
    dependencies: Dict[str, str] = Field(..., description="Dependency status")


class MetricsResponse(BaseModel):
    """Performance metrics response."""

    total_queries: int = Field(..., description="Total queries processed")
    lafaz_queries: int = Field(..., description="Transliteration queries processed")
    makna_queries: int = Field(..., description="Translation queries processed")
    empty_results: int = Field(..., description="Queries that returned nothing")
    fallback_searches: int = Field(..., description="Queries answered by a fuzzy fallback stage")
    retrieval_errors: int = Field(..., description="Corpus store failures")
    average_response_time_ms: float = Field(..., description="Average response time")
    memory_usage_mb: float = Field(..., description="Process memory usage in MB")
    timestamp: datetime = Field(default_factory=datetime.utcnow, description="Metrics timestamp")
