"""Main search engine implementation."""

import time
from typing import List, Optional, Tuple, Union

import structlog

from ..config.settings import Settings
from ..models.request import SearchMode
from ..models.response import SearchResponse, SearchResult
from ..models.verse import VerseRecord, parse_verse_key
from ..store.base import CorpusStore
from .lafaz_scorer import LafazScorer
from .makna_scorer import MaknaScorer
from .normalizer import TextNormalizer
from .ranker import rank
from .retriever import CandidateRetriever

logger = structlog.get_logger(__name__)

STAGE_REJECTED = "rejected"
STAGE_SUBSTRING = "substring"
STAGE_KEYWORD = "keyword"
STAGE_FUZZY = "fuzzy"


class SearchEngine:
    """
    Ranked verse search over a corpus store.

    The engine holds no mutable state: every call is a pure function of its
    arguments and the store snapshot, so one instance can serve any number of
    concurrent callers.
    """

    def __init__(self, store: CorpusStore, settings: Optional[Settings] = None) -> None:
        """
        Initialize the search engine.

        Args:
            store: Corpus store handle
            settings: Tuning settings (defaults when None)
        """
        self.settings = settings or Settings()
        self.store = store
        self.normalizer = TextNormalizer()
        self.retriever = CandidateRetriever(
            store,
            min_query_length=self.settings.min_query_length,
            lafaz_cap=self.settings.lafaz_candidate_cap,
            makna_cap=self.settings.makna_candidate_cap,
            lafaz_fuzzy_fallback=self.settings.lafaz_fuzzy_fallback,
            lafaz_fallback_threshold=self.settings.lafaz_fallback_threshold,
        )
        self.lafaz_scorer = LafazScorer(self.settings.lafaz_weights)
        self.makna_scorer = MaknaScorer(self.settings.makna_weights)

    def search_lafaz(self, query: str, limit: int = 50) -> List[SearchResult]:
        """
        Search verses by transliteration.

        Examples:
            "yaayyuhalkafirun" finds 109:1
            "kaafrun" finds verses containing "kafirun" via the skeleton

        Args:
            query: Raw user query
            limit: Maximum number of results

        Returns:
            Results sorted by score, best first
        """
        return self._lafaz(query, limit)[0]

    def search_makna(self, query: str, limit: int = 50) -> List[SearchResult]:
        """
        Search verses by Indonesian translation.

        Keyword matching first; only when it yields nothing, a single-typo
        fuzzy pass over the whole corpus ("syurga" finds "surga").

        Args:
            query: Raw user query
            limit: Maximum number of results

        Returns:
            Results sorted by score, best first
        """
        return self._makna(query, limit)[0]

    def search(
        self,
        query: str,
        mode: Union[SearchMode, str] = SearchMode.LAFAZ,
        limit: Optional[int] = None,
    ) -> SearchResponse:
        """
        Search in the given mode and wrap the results with metadata.

        Raises:
            ValueError: If ``mode`` is not a known search mode
            RetrievalError: If the corpus store fails
        """
        start_time = time.time()
        mode = SearchMode(mode)
        if limit is None:
            limit = self.settings.default_limit

        if mode is SearchMode.LAFAZ:
            results, stage = self._lafaz(query, limit)
        else:
            results, stage = self._makna(query, limit)

        execution_time = (time.time() - start_time) * 1000
        logger.debug(
            "Search completed",
            mode=mode.value,
            stage=stage,
            total_results=len(results),
            execution_time_ms=round(execution_time, 2),
        )

        return SearchResponse(
            query=query or "",
            mode=mode,
            stage=stage,
            execution_time_ms=execution_time,
            total_results=len(results),
            results=results,
        )

    def _lafaz(self, query: str, limit: int) -> Tuple[List[SearchResult], str]:
        q_norm = self.normalizer.normalize(query)
        if not self.retriever.accepts(q_norm):
            return [], STAGE_REJECTED

        q_skel = self.normalizer.skeleton(query)

        candidates = self.retriever.lafaz_candidates(q_norm, q_skel)
        stage = STAGE_SUBSTRING
        if not candidates and self.retriever.lafaz_fuzzy_fallback:
            candidates = self.retriever.lafaz_fallback_candidates(q_norm)
            stage = STAGE_FUZZY

        scored = self.lafaz_scorer.score_candidates(candidates, q_norm, q_skel)
        return rank(scored, limit), stage

    def _makna(self, query: str, limit: int) -> Tuple[List[SearchResult], str]:
        q = self.normalizer.normalize_query(query)
        if not self.retriever.accepts(q):
            return [], STAGE_REJECTED

        candidates = self.retriever.makna_candidates(q)
        results = rank(self.makna_scorer.score_keyword(candidates, q), limit)
        if results:
            return results, STAGE_KEYWORD

        universe = self.retriever.makna_universe(q)
        return rank(self.makna_scorer.score_fuzzy(universe, q), limit), STAGE_FUZZY

    def get_verse(self, verse_key: str) -> Optional[VerseRecord]:
        """
        Look up a verse by key such as ``"109:1"``.

        Raises:
            ValueError: If the key is malformed
        """
        surah_id, number = parse_verse_key(verse_key)
        return self.store.get_by_key(surah_id, number)

    def get_verse_by_id(self, verse_id: int) -> Optional[VerseRecord]:
        """Look up a verse by id."""
        return self.store.get_by_id(verse_id)

    def get_surah(self, surah_id: int) -> List[VerseRecord]:
        """All verses of a surah."""
        return self.store.get_by_surah(surah_id)

    def get_juz(self, juz_id: int) -> List[VerseRecord]:
        """All verses of a juz."""
        return self.store.get_by_juz(juz_id)

    def count(self) -> int:
        """Number of verses in the corpus."""
        return self.store.count()
