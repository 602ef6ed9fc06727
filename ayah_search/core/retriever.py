"""Coarse candidate retrieval from the corpus store."""

from typing import List

import structlog
from rapidfuzz import fuzz

from ..models.verse import VerseRecord
from ..store.base import CorpusStore

logger = structlog.get_logger(__name__)


class CandidateRetriever:
    """Narrows the corpus to a bounded candidate set for scoring."""

    def __init__(
        self,
        store: CorpusStore,
        min_query_length: int = 2,
        lafaz_cap: int = 200,
        makna_cap: int = 300,
        lafaz_fuzzy_fallback: bool = False,
        lafaz_fallback_threshold: float = 0.8,
    ) -> None:
        """
        Initialize the retriever.

        Args:
            store: Corpus store handle
            min_query_length: Shorter queries yield no candidates
            lafaz_cap: Maximum transliteration candidates
            makna_cap: Maximum stage-1 translation candidates
            lafaz_fuzzy_fallback: Scan the whole corpus when substring retrieval finds nothing
            lafaz_fallback_threshold: Minimum partial ratio (0-1) for fallback candidates
        """
        self.store = store
        self.min_query_length = min_query_length
        self.lafaz_cap = lafaz_cap
        self.makna_cap = makna_cap
        self.lafaz_fuzzy_fallback = lafaz_fuzzy_fallback
        self.lafaz_fallback_threshold = lafaz_fallback_threshold

    def accepts(self, query: str) -> bool:
        """Whether a normalized query is long enough to discriminate."""
        return len(query) >= self.min_query_length

    def lafaz_candidates(self, q_norm: str, q_skel: str) -> List[VerseRecord]:
        """
        Verses whose normalized transliteration or skeleton contains the query.

        Args:
            q_norm: Normalized query
            q_skel: Skeleton of the query

        Returns:
            At most ``lafaz_cap`` verses in store order
        """
        if not self.accepts(q_norm):
            return []

        candidates = self.store.find_by_transliteration(q_norm, q_skel, self.lafaz_cap)
        logger.debug("Lafaz candidates", q_norm=q_norm, q_skel=q_skel, total=len(candidates))
        return candidates

    def lafaz_fallback_candidates(self, q_norm: str) -> List[VerseRecord]:
        """
        Full-corpus scan for verses close to the query.

        Keeps verses whose normalized transliteration has a partial ratio with
        the query at or above ``lafaz_fallback_threshold``.
        """
        if not self.lafaz_fuzzy_fallback or not self.accepts(q_norm):
            return []

        cutoff = self.lafaz_fallback_threshold * 100
        candidates = []
        for verse in self.store.all_verses():
            ratio = fuzz.partial_ratio(q_norm, verse.transliteration_normalized, score_cutoff=cutoff)
            if ratio >= cutoff and ratio > 0:
                candidates.append(verse)
                if len(candidates) >= self.lafaz_cap:
                    break

        logger.debug("Lafaz fallback candidates", q_norm=q_norm, total=len(candidates))
        return candidates

    def makna_candidates(self, query: str) -> List[VerseRecord]:
        """Verses whose translation contains the lowercase query."""
        if not self.accepts(query):
            return []

        candidates = self.store.find_by_translation(query, self.makna_cap)
        logger.debug("Makna candidates", query=query, total=len(candidates))
        return candidates

    def makna_universe(self, query: str) -> List[VerseRecord]:
        """Every verse, for the fuzzy translation stage."""
        if not self.accepts(query):
            return []
        return self.store.all_verses()
