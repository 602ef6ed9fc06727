"""Unit tests for candidate retrieval."""

import pytest

from ayah_search.core.retriever import CandidateRetriever
from ayah_search.store.memory import InMemoryCorpusStore


class TestCandidateRetriever:
    """Test cases for the CandidateRetriever class."""

    @pytest.fixture
    def retriever(self, memory_store):
        return CandidateRetriever(memory_store)

    def test_accepts(self, retriever):
        """Test the minimum query length gate."""
        assert retriever.accepts("ab") is True
        assert retriever.accepts("a") is False
        assert retriever.accepts("") is False

    def test_lafaz_by_normalized_substring(self, retriever):
        """Test candidates matched on the normalized transliteration."""
        candidates = retriever.lafaz_candidates("kafirun", "kfrn")
        assert [c.verse_key for c in candidates] == ["109:1"]

    def test_lafaz_by_skeleton(self, retriever):
        """Test candidates matched only on the consonant skeleton."""
        candidates = retriever.lafaz_candidates("kafrun", "kfrn")
        assert [c.verse_key for c in candidates] == ["109:1"]

    def test_lafaz_short_query(self, retriever):
        """Test that a one-character query yields no candidates."""
        assert retriever.lafaz_candidates("k", "k") == []

    def test_lafaz_cap(self, corpus_records):
        """Test that transliteration candidates stop at the cap."""
        retriever = CandidateRetriever(InMemoryCorpusStore(corpus_records), lafaz_cap=2)
        # "la" occurs in several transliterations
        candidates = retriever.lafaz_candidates("la", "l")
        assert len(candidates) == 2

    def test_lafaz_fallback_off_by_default(self, retriever):
        """Test that the full-corpus scan is opt-in."""
        assert retriever.lafaz_fuzzy_fallback is False
        assert retriever.lafaz_fallback_candidates("huwallahuahat") == []

    def test_lafaz_fallback_finds_consonant_typo(self, memory_store):
        """Test that the enabled scan finds a verse with a consonant typo."""
        retriever = CandidateRetriever(memory_store, lafaz_fuzzy_fallback=True)
        candidates = retriever.lafaz_fallback_candidates("huwallahuahat")
        assert "112:1" in [c.verse_key for c in candidates]

    def test_makna_candidates(self, retriever):
        """Test translation candidates in store order."""
        candidates = retriever.makna_candidates("allah")
        assert [c.id for c in candidates] == [1, 2, 6222]

    def test_makna_cap(self, memory_store):
        """Test that translation candidates stop at the cap."""
        retriever = CandidateRetriever(memory_store, makna_cap=1)
        assert [c.id for c in retriever.makna_candidates("allah")] == [1]

    def test_makna_universe(self, retriever, corpus_records):
        """Test that the fuzzy stage sees every verse."""
        assert len(retriever.makna_universe("syurga")) == len(corpus_records)
        assert retriever.makna_universe("s") == []
