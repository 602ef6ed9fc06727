"""In-memory corpus store backed by a list of verse records."""

from typing import Dict, Iterable, List, Optional, Tuple

from ..models.verse import VerseRecord
from .base import CorpusStore


class InMemoryCorpusStore(CorpusStore):
    """Corpus store over records held in memory, in insertion order."""

    def __init__(self, records: Iterable[VerseRecord] = ()) -> None:
        """
        Initialize the store.

        Args:
            records: Verse records; later duplicates of an id replace earlier ones
        """
        self._by_id: Dict[int, VerseRecord] = {}
        for record in records:
            self._by_id[record.id] = record

        self._records: List[VerseRecord] = list(self._by_id.values())
        self._by_key: Dict[Tuple[int, int], VerseRecord] = {
            (r.surah_id, r.number): r for r in self._records
        }
        self._lowered: List[str] = [r.translation.lower() for r in self._records]

    def find_by_transliteration(
        self, q_norm: str, q_skel: str, limit: int
    ) -> List[VerseRecord]:
        matches = []
        for record in self._records:
            if len(matches) >= limit:
                break
            if q_norm and q_norm in record.transliteration_normalized:
                matches.append(record)
            elif q_skel and q_skel in record.transliteration_skeleton:
                matches.append(record)
        return matches

    def find_by_translation(self, query: str, limit: int) -> List[VerseRecord]:
        query = query.lower()
        matches = []
        for record, translation in zip(self._records, self._lowered):
            if len(matches) >= limit:
                break
            if query in translation:
                matches.append(record)
        return matches

    def all_verses(self) -> List[VerseRecord]:
        return list(self._records)

    def get_by_id(self, verse_id: int) -> Optional[VerseRecord]:
        return self._by_id.get(verse_id)

    def get_by_key(self, surah_id: int, number: int) -> Optional[VerseRecord]:
        return self._by_key.get((surah_id, number))

    def get_by_surah(self, surah_id: int) -> List[VerseRecord]:
        verses = [r for r in self._records if r.surah_id == surah_id]
        return sorted(verses, key=lambda r: r.number)

    def get_by_juz(self, juz_id: int) -> List[VerseRecord]:
        verses = [r for r in self._records if r.juz_id == juz_id]
        return sorted(verses, key=lambda r: r.id)

    def count(self) -> int:
        return len(self._records)
