"""Shared post-processing of scored candidates."""

from typing import List

from ..models.response import SearchResult


def rank(scored: List[SearchResult], limit: int) -> List[SearchResult]:
    """
    Drop non-positive scores, sort descending and truncate.

    The sort is stable, so candidates with equal scores keep retrieval order.

    Args:
        scored: Scored candidates in retrieval order
        limit: Maximum number of results to keep

    Returns:
        Ranked results, at most ``limit`` long
    """
    if limit <= 0:
        return []

    positive = [result for result in scored if result.score > 0]
    positive.sort(key=lambda result: result.score, reverse=True)
    return positive[:limit]
