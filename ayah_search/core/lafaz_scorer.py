"""Multi-signal fuzzy scoring for transliteration (lafaz) search."""

from typing import List, Optional

from ..config.settings import LafazWeights
from ..models.response import SearchResult
from ..models.verse import VerseRecord
from .edit_distance import levenshtein_similarity


class LafazScorer:
    """Scores verse candidates against a normalized transliteration query."""

    def __init__(self, weights: Optional[LafazWeights] = None) -> None:
        """
        Initialize the scorer.

        Args:
            weights: Tuning constants (defaults when None)
        """
        self.weights = weights or LafazWeights()

    def score(self, verse_norm: str, verse_skel: str, q_norm: str, q_skel: str) -> float:
        """
        Compute the relevance of one verse for a query.

        Signals, summed:
            1. exact / substring / reverse-substring match on normalized text
            2. the same tiers on the consonant skeleton
            3. Levenshtein similarity, skipped for very different lengths
            4. bonus for similar lengths, penalty for very different ones

        Args:
            verse_norm: Normalized transliteration of the verse
            verse_skel: Skeleton of the verse
            q_norm: Normalized query
            q_skel: Skeleton of the query

        Returns:
            Score, higher is better; may be zero or negative
        """
        w = self.weights
        score = 0.0

        if verse_norm == q_norm:
            score += w.exact_match
        elif q_norm in verse_norm:
            score += w.substring
            if verse_norm.startswith(q_norm):
                score += w.substring_prefix
        elif verse_norm in q_norm:
            score += w.reverse_substring

        if verse_skel and q_skel:
            if verse_skel == q_skel:
                score += w.skeleton_exact
            elif q_skel in verse_skel:
                score += w.skeleton_substring
                if verse_skel.startswith(q_skel):
                    score += w.skeleton_prefix
            elif verse_skel in q_skel:
                score += w.skeleton_reverse

        q_len = len(q_norm)
        v_len = len(verse_norm)

        length_diff_ratio = abs(v_len - q_len) / max(q_len, 1)
        if length_diff_ratio < w.edit_distance_max_length_ratio:
            score += levenshtein_similarity(verse_norm, q_norm) * w.edit_distance

        if q_len > 0:
            diff = abs(1 - v_len / q_len)
            if diff < w.length_bonus_max_diff:
                score += (1 - diff) * w.length_bonus
            elif diff > w.length_penalty_min_diff:
                score -= w.length_penalty

        return score

    def score_candidates(
        self, candidates: List[VerseRecord], q_norm: str, q_skel: str
    ) -> List[SearchResult]:
        """Score every candidate, keeping retrieval order."""
        return [
            SearchResult(
                verse=verse,
                score=self.score(
                    verse.transliteration_normalized,
                    verse.transliteration_skeleton,
                    q_norm,
                    q_skel,
                ),
            )
            for verse in candidates
        ]
