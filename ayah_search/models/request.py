"""Request models for API endpoints."""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator


class SearchMode(str, Enum):
    """Search mode selector."""

    LAFAZ = "lafaz"
    MAKNA = "makna"

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            lowered = value.strip().lower()
            if lowered == "terjemahan":
                return cls.MAKNA
            for member in cls:
                if member.value == lowered:
                    return member
        return None


class SearchRequest(BaseModel):
    """Request model for search queries."""

    query: str = Field(..., min_length=1, max_length=200, description="Search query")
    mode: SearchMode = Field(default=SearchMode.LAFAZ, description="lafaz or makna")
    limit: Optional[int] = Field(
        None, ge=1, le=200, description="Maximum number of results to return"
    )

    @field_validator("query")
    @classmethod
    def validate_query(cls, v: str) -> str:
        """Validate and normalize query input."""
        if not v or not v.strip():
            raise ValueError("Query cannot be empty")
        return v.strip()


class BatchSearchRequest(BaseModel):
    """Request model for batch search queries."""

    queries: List[str] = Field(..., min_length=1, max_length=50, description="List of search queries")
    mode: SearchMode = Field(default=SearchMode.LAFAZ, description="lafaz or makna")
    limit: Optional[int] = Field(
        None, ge=1, le=200, description="Maximum number of results per query"
    )

    @field_validator("queries")
    @classmethod
    def validate_queries(cls, v: List[str]) -> List[str]:
        """Validate and normalize query list."""
        normalized_queries = []
        for query in v:
            if not query or not query.strip():
                raise ValueError("Query cannot be empty")
            normalized_queries.append(query.strip())

        return normalized_queries
