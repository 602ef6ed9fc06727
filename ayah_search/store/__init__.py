"""Corpus store implementations."""

from .base import CorpusStore
from .memory import InMemoryCorpusStore
from .sqlite import SQLiteCorpusStore
from .cache import VerseCache

__all__ = [
    "CorpusStore",
    "InMemoryCorpusStore",
    "SQLiteCorpusStore",
    "VerseCache",
]
