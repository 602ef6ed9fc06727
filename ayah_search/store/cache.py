"""Caller-owned in-memory snapshot of a corpus store."""

from typing import List, Optional

import structlog

from ..models.verse import VerseRecord
from .base import CorpusStore
from .memory import InMemoryCorpusStore

logger = structlog.get_logger(__name__)


class VerseCache(CorpusStore):
    """
    Serves every read from an in-memory copy of another store.

    The snapshot is taken on :meth:`load` (or lazily on the first read) and
    kept until :meth:`invalidate` is called. Whoever constructs the cache owns
    its lifetime; nothing is shared at module level.
    """

    def __init__(self, source: CorpusStore) -> None:
        self.source = source
        self._snapshot: Optional[InMemoryCorpusStore] = None

    @property
    def loaded(self) -> bool:
        """Whether a snapshot is currently held."""
        return self._snapshot is not None

    def load(self) -> int:
        """
        (Re)build the snapshot from the source store.

        Returns:
            Number of verses cached

        Raises:
            RetrievalError: If the source store cannot be read
        """
        records = self.source.all_verses()
        self._snapshot = InMemoryCorpusStore(records)
        logger.info("Verse cache loaded", total_verses=len(records))
        return len(records)

    def invalidate(self) -> None:
        """Drop the snapshot; the next read reloads from the source."""
        self._snapshot = None
        logger.debug("Verse cache invalidated")

    def _store(self) -> InMemoryCorpusStore:
        if self._snapshot is None:
            self.load()
        return self._snapshot

    def find_by_transliteration(
        self, q_norm: str, q_skel: str, limit: int
    ) -> List[VerseRecord]:
        return self._store().find_by_transliteration(q_norm, q_skel, limit)

    def find_by_translation(self, query: str, limit: int) -> List[VerseRecord]:
        return self._store().find_by_translation(query, limit)

    def all_verses(self) -> List[VerseRecord]:
        return self._store().all_verses()

    def get_by_id(self, verse_id: int) -> Optional[VerseRecord]:
        return self._store().get_by_id(verse_id)

    def get_by_key(self, surah_id: int, number: int) -> Optional[VerseRecord]:
        return self._store().get_by_key(surah_id, number)

    def get_by_surah(self, surah_id: int) -> List[VerseRecord]:
        return self._store().get_by_surah(surah_id)

    def get_by_juz(self, juz_id: int) -> List[VerseRecord]:
        return self._store().get_by_juz(juz_id)

    def count(self) -> int:
        return self._store().count()
