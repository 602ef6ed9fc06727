"""Core search engine functionality."""

from .normalizer import TextNormalizer, normalize_latin, strip_vowels, normalize_id_word
from .edit_distance import levenshtein, levenshtein_similarity
from .ranker import rank
from .lafaz_scorer import LafazScorer
from .makna_scorer import MaknaScorer
from .retriever import CandidateRetriever
from .engine import SearchEngine

__all__ = [
    "SearchEngine",
    "CandidateRetriever",
    "LafazScorer",
    "MaknaScorer",
    "TextNormalizer",
    "normalize_latin",
    "strip_vowels",
    "normalize_id_word",
    "levenshtein",
    "levenshtein_similarity",
    "rank",
]
