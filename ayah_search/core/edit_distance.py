"""Edit-distance primitives shared by both scorers."""

from typing import Iterable, Optional

from rapidfuzz.distance import Levenshtein


def levenshtein(a: str, b: str, score_cutoff: Optional[int] = None) -> int:
    """
    Unit-cost Levenshtein distance between two strings.

    Args:
        a: First string
        b: Second string
        score_cutoff: When given, any distance above it is reported as
            ``score_cutoff + 1``

    Returns:
        Number of insertions, deletions and substitutions turning ``a`` into ``b``
    """
    if a == b:
        return 0
    return Levenshtein.distance(a, b, score_cutoff=score_cutoff)


def levenshtein_similarity(a: str, b: str) -> float:
    """Similarity in [0, 1]: ``1 - distance / max(len(a), len(b), 1)``."""
    if a == b:
        return 1.0

    max_len = max(len(a), len(b), 1)
    return 1.0 - levenshtein(a, b) / max_len


def min_word_distance(
    words: Iterable[str],
    query: str,
    cutoff: Optional[int] = None,
) -> Optional[int]:
    """
    Smallest edit distance between ``query`` and any of ``words``.

    Stops at the first exact match. Returns None when ``words`` is empty.
    """
    best = None
    for word in words:
        distance = levenshtein(word, query, score_cutoff=cutoff)
        if best is None or distance < best:
            best = distance
        if best == 0:
            break
    return best
