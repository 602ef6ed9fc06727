"""Unit tests for data models and settings."""

import pytest
from pydantic import ValidationError

from ayah_search.config.settings import Settings
from ayah_search.exceptions import RetrievalError
from ayah_search.models.request import BatchSearchRequest, SearchMode, SearchRequest
from ayah_search.models.verse import VerseRecord, parse_verse_key


class TestVerseRecord:
    """Test cases for verse records."""

    def test_parse_verse_key(self):
        """Test parsing well-formed verse keys."""
        assert parse_verse_key("109:1") == (109, 1)
        assert parse_verse_key(" 2:255 ") == (2, 255)

    @pytest.mark.parametrize("key", ["", "109", "109:", ":1", "a:1", "109:1:2", "-1:2"])
    def test_parse_malformed_key(self, key):
        """Test that malformed keys raise ValueError."""
        with pytest.raises(ValueError):
            parse_verse_key(key)

    def test_frozen(self):
        """Test that verse records are immutable."""
        record = VerseRecord.from_source(id=1, surah_id=1, number=1)
        with pytest.raises(ValidationError):
            record.translation = "changed"

    def test_verse_key_serialized(self):
        """Test that verse_key is included when dumping."""
        record = VerseRecord.from_source(id=6222, surah_id=112, number=1)
        assert record.model_dump()["verse_key"] == "112:1"


class TestSearchMode:
    """Test cases for the search mode enum."""

    def test_values(self):
        """Test the canonical mode values."""
        assert SearchMode("lafaz") is SearchMode.LAFAZ
        assert SearchMode("makna") is SearchMode.MAKNA

    def test_aliases(self):
        """Test the terjemahan alias and case-insensitive values."""
        assert SearchMode("terjemahan") is SearchMode.MAKNA
        assert SearchMode("LAFAZ") is SearchMode.LAFAZ

    def test_unknown(self):
        """Test that unknown modes raise ValueError."""
        with pytest.raises(ValueError):
            SearchMode("tafsir")


class TestRequests:
    """Test cases for request validation."""

    def test_query_trimmed(self):
        """Test that the query is trimmed."""
        request = SearchRequest(query="  surga ", mode="makna")
        assert request.query == "surga"
        assert request.mode is SearchMode.MAKNA

    def test_blank_query(self):
        """Test that a blank query is rejected."""
        with pytest.raises(ValidationError):
            SearchRequest(query="   ")

    def test_limit_bounds(self):
        """Test limit validation."""
        with pytest.raises(ValidationError):
            SearchRequest(query="surga", limit=0)
        with pytest.raises(ValidationError):
            SearchRequest(query="surga", limit=201)

    def test_batch_requires_queries(self):
        """Test that a batch needs at least one query."""
        with pytest.raises(ValidationError):
            BatchSearchRequest(queries=[])

    def test_batch_trims(self):
        """Test that batch queries are trimmed."""
        request = BatchSearchRequest(queries=[" surga", "kafir "], mode="terjemahan")
        assert request.queries == ["surga", "kafir"]
        assert request.mode is SearchMode.MAKNA


class TestSettings:
    """Test cases for configuration."""

    def test_defaults(self):
        """Test default settings values."""
        settings = Settings()

        assert settings.default_limit == 50
        assert settings.lafaz_candidate_cap == 200
        assert settings.makna_candidate_cap == 300
        assert settings.lafaz_fuzzy_fallback is False
        assert settings.lafaz_weights.exact_match == 50.0
        assert settings.makna_weights.fuzzy_typo == 60.0

    def test_nested_env_override(self, monkeypatch):
        """Test overriding nested weights from the environment."""
        monkeypatch.setenv("LAFAZ_WEIGHTS__EXACT_MATCH", "75")
        monkeypatch.setenv("MAKNA_CANDIDATE_CAP", "10")

        settings = Settings()
        assert settings.lafaz_weights.exact_match == 75.0
        assert settings.makna_candidate_cap == 10


class TestExceptions:
    """Test cases for the exception hierarchy."""

    def test_retrieval_error_details(self):
        """Test the operation recorded on RetrievalError."""
        error = RetrievalError("Corpus query failed", "count")

        assert error.operation == "count"
        assert str(error) == "Corpus query failed (operation=count)"
