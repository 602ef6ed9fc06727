"""
Ayah Search - approximate Quran verse search.

Finds verses from a loosely typed Latin transliteration (lafaz) or from
Indonesian translation keywords (makna), tolerating vowel-length and
single-character typos.
"""

__version__ = "1.0.0"

from .core.engine import SearchEngine
from .models.request import SearchMode
from .models.response import SearchResult, SearchResponse
from .models.verse import VerseRecord

__all__ = [
    "SearchEngine",
    "SearchMode",
    "SearchResult",
    "SearchResponse",
    "VerseRecord",
]
