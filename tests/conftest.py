"""Shared fixtures for ayah search tests."""

from typing import List

import pytest

from ayah_search.core.engine import SearchEngine
from ayah_search.exceptions import RetrievalError
from ayah_search.logging_config import configure_logging
from ayah_search.models.verse import VerseRecord
from ayah_search.store.memory import InMemoryCorpusStore


CORPUS_ROWS = [
    dict(id=1, surah_id=1, number=1, juz_id=1,
         transliteration="Bismillahir rahmanir rahim",
         translation="Dengan nama Allah Yang Maha Pengasih, Maha Penyayang."),
    dict(id=2, surah_id=1, number=2, juz_id=1,
         transliteration="Alhamdu lillahi rabbil 'alamin",
         translation="Segala puji bagi Allah, Tuhan seluruh alam."),
    dict(id=89, surah_id=2, number=82, juz_id=1,
         transliteration="Wallazina amanu wa 'amilus salihati ula'ika ashabul jannah",
         translation="Dan orang-orang yang beriman serta beramal saleh, "
                     "mereka itu penghuni surga; mereka kekal di dalamnya."),
    dict(id=6208, surah_id=109, number=1, juz_id=30,
         transliteration="Qul yā ayyuhal-kāfirūn",
         translation="Katakanlah, wahai orang-orang kafir!"),
    dict(id=6209, surah_id=109, number=2, juz_id=30,
         transliteration="Lā a‘budu mā ta‘budūn",
         translation="aku tidak akan menyembah apa yang kamu sembah,"),
    dict(id=6222, surah_id=112, number=1, juz_id=30,
         transliteration="Qul huwallahu ahad",
         translation="Katakanlah, Dialah Allah, Yang Maha Esa."),
]


class CountingStore(InMemoryCorpusStore):
    """In-memory store that records how often the full corpus is scanned."""

    def __init__(self, records) -> None:
        super().__init__(records)
        self.all_verses_calls = 0

    def all_verses(self) -> List[VerseRecord]:
        self.all_verses_calls += 1
        return super().all_verses()


class FailingStore(InMemoryCorpusStore):
    """Store whose every read fails like an unreachable database."""

    def _fail(self, operation: str):
        raise RetrievalError("Corpus database unavailable", operation)

    def find_by_transliteration(self, q_norm, q_skel, limit):
        self._fail("find_by_transliteration")

    def find_by_translation(self, query, limit):
        self._fail("find_by_translation")

    def all_verses(self):
        self._fail("all_verses")

    def get_by_id(self, verse_id):
        self._fail("get_by_id")

    def get_by_key(self, surah_id, number):
        self._fail("get_by_key")

    def get_by_surah(self, surah_id):
        self._fail("get_by_surah")

    def get_by_juz(self, juz_id):
        self._fail("get_by_juz")

    def count(self):
        self._fail("count")


@pytest.fixture(autouse=True, scope="session")
def quiet_logging():
    configure_logging(level="WARNING", log_format="console")


@pytest.fixture
def corpus_records() -> List[VerseRecord]:
    """Small corpus covering both search modes."""
    return [VerseRecord.from_source(**row) for row in CORPUS_ROWS]


@pytest.fixture
def memory_store(corpus_records) -> InMemoryCorpusStore:
    return InMemoryCorpusStore(corpus_records)


@pytest.fixture
def engine(memory_store) -> SearchEngine:
    return SearchEngine(memory_store)


@pytest.fixture
def counting_store(corpus_records) -> CountingStore:
    return CountingStore(corpus_records)


@pytest.fixture
def failing_store(corpus_records) -> FailingStore:
    return FailingStore(corpus_records)
