"""Query counters collected by the API layer."""

import threading

from ..core.engine import STAGE_FUZZY
from ..models.request import SearchMode
from ..models.response import SearchResponse


class SearchMetrics:
    """Running query counters shared by the API routes."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self.total_queries = 0
        self.lafaz_queries = 0
        self.makna_queries = 0
        self.empty_results = 0
        self.fallback_searches = 0
        self.retrieval_errors = 0
        self.total_execution_time = 0.0

    def record(self, response: SearchResponse) -> None:
        """Count one finished search."""
        with self._lock:
            self.total_queries += 1
            if response.mode is SearchMode.LAFAZ:
                self.lafaz_queries += 1
            else:
                self.makna_queries += 1
            if response.total_results == 0:
                self.empty_results += 1
            if response.stage == STAGE_FUZZY:
                self.fallback_searches += 1
            self.total_execution_time += response.execution_time_ms

    def record_error(self) -> None:
        """Count one corpus store failure."""
        with self._lock:
            self.retrieval_errors += 1

    @property
    def average_response_time_ms(self) -> float:
        if self.total_queries == 0:
            return 0.0
        return self.total_execution_time / self.total_queries
