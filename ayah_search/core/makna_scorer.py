"""Two-stage keyword-then-fuzzy scoring for translation (makna) search."""

from typing import List, Optional

from ..config.settings import MaknaWeights
from ..models.response import SearchResult
from ..models.verse import VerseRecord
from .edit_distance import min_word_distance
from .normalizer import TextNormalizer


class MaknaScorer:
    """Scores verse translations against a free-text Indonesian query."""

    def __init__(self, weights: Optional[MaknaWeights] = None) -> None:
        """
        Initialize the scorer.

        Args:
            weights: Tuning constants (defaults when None)
        """
        self.weights = weights or MaknaWeights()
        self.normalizer = TextNormalizer()

    def length_bonus(self, length: int) -> float:
        """Up to ``length_bonus`` points, favoring short translations."""
        w = self.weights
        penalty = min(length / max(w.length_bonus_span, 1), 1.0)
        return (1 - penalty) * w.length_bonus

    def tokens(self, query: str) -> List[str]:
        """Query words long enough to count as keywords."""
        return self.normalizer.tokenize(query, min_length=self.weights.min_token_length)

    def keyword_score(self, translation: str, query: str, tokens: List[str]) -> float:
        """
        Keyword score of a lowercase translation.

        Args:
            translation: Lowercase translation text
            query: Lowercase query
            tokens: Query keywords (see :meth:`tokens`)
        """
        w = self.weights
        score = 0.0

        for token in tokens:
            if token in translation:
                score += w.token_match

        if query in translation:
            score += w.phrase_match

        score += self.length_bonus(len(translation))
        return score

    def fuzzy_score(self, best_distance: int, translation_length: int) -> float:
        """Score for the closest word distance found in the fuzzy stage."""
        w = self.weights
        score = 0.0

        if best_distance == 0:
            score += w.fuzzy_exact
        elif best_distance <= w.max_typo_distance:
            score += w.fuzzy_typo

        score += self.length_bonus(translation_length)
        return score

    def highlight_token(self, translation: str, query: str) -> Optional[str]:
        """
        Original-case translation word that best represents the query match.

        A word qualifies when its normalized form and the normalized query (or
        one of the query's keywords) contain one another.
        """
        forms = []
        whole = self.normalizer.normalize_word(query)
        if whole:
            forms.append(whole)
        for token in self.tokens(query):
            form = self.normalizer.normalize_word(token)
            if form and form not in forms:
                forms.append(form)

        if not forms:
            return None

        for word in self.normalizer.words(translation):
            normalized = self.normalizer.normalize_word(word)
            if len(normalized) < 2:
                continue
            for form in forms:
                if form in normalized or normalized in form:
                    return word
        return None

    def score_keyword(self, candidates: List[VerseRecord], query: str) -> List[SearchResult]:
        """
        Stage 1: keyword scoring of substring candidates.

        Args:
            candidates: Verses retrieved by substring match
            query: Lowercase query
        """
        tokens = self.tokens(query)
        results = []

        for verse in candidates:
            translation = verse.translation.lower()
            score = self.keyword_score(translation, query, tokens)
            if score > 0:
                results.append(
                    SearchResult(
                        verse=verse,
                        score=score,
                        highlight_token=self.highlight_token(verse.translation, query),
                    )
                )
        return results

    def score_fuzzy(self, candidates: List[VerseRecord], query: str) -> List[SearchResult]:
        """
        Stage 2: single-typo tolerant word matching.

        Only verses with a translation word within ``max_typo_distance`` edits
        of the whole query are kept.
        """
        max_distance = self.weights.max_typo_distance
        results = []

        for verse in candidates:
            translation = verse.translation.lower()
            words = self.normalizer.words(translation)

            best = min_word_distance(words, query, cutoff=max_distance)
            if best is None or best > max_distance:
                continue

            results.append(
                SearchResult(
                    verse=verse,
                    score=self.fuzzy_score(best, len(translation)),
                    highlight_token=self.highlight_token(verse.translation, query),
                )
            )
        return results
