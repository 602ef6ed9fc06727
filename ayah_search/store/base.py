"""
Abstract corpus store.

The search core only reads verses; how they are persisted and indexed is up
to the implementation.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from ..models.verse import VerseRecord


class CorpusStore(ABC):
    """
    Read-only access to the verse corpus.

    Implementations return rows in a stable order so that equal scores keep
    a deterministic ranking. I/O failures are raised as RetrievalError.
    """

    @abstractmethod
    def find_by_transliteration(
        self, q_norm: str, q_skel: str, limit: int
    ) -> List[VerseRecord]:
        """
        Verses whose normalized transliteration contains ``q_norm`` or whose
        skeleton contains ``q_skel``. An empty ``q_skel`` is ignored.
        """

    @abstractmethod
    def find_by_translation(self, query: str, limit: int) -> List[VerseRecord]:
        """Verses whose lowercase translation contains the lowercase ``query``."""

    @abstractmethod
    def all_verses(self) -> List[VerseRecord]:
        """Every verse in the corpus."""

    @abstractmethod
    def get_by_id(self, verse_id: int) -> Optional[VerseRecord]:
        """Verse with the given id, or None."""

    @abstractmethod
    def get_by_key(self, surah_id: int, number: int) -> Optional[VerseRecord]:
        """Verse at ``surah_id:number``, or None."""

    @abstractmethod
    def get_by_surah(self, surah_id: int) -> List[VerseRecord]:
        """All verses of a surah ordered by verse number."""

    @abstractmethod
    def get_by_juz(self, juz_id: int) -> List[VerseRecord]:
        """All verses of a juz ordered by id."""

    @abstractmethod
    def count(self) -> int:
        """Number of verses in the corpus."""
