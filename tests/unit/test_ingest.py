"""Unit tests for corpus ingestion."""

import json

import pytest

from ayah_search.exceptions import CorpusLoadError
from ayah_search.ingest import build_database, build_record, load_verses_json, main
from ayah_search.main import SAMPLE_CORPUS_PATH


class TestBuildRecord:
    """Test cases for building records from exported rows."""

    def test_derives_search_columns(self):
        """Test that the normalized and skeleton columns are derived."""
        record = build_record({
            "id": 6208,
            "surah_id": 109,
            "number": 1,
            "juz_id": 30,
            "transliteration": "Qul yā ayyuhal-kāfirūn",
            "translation": "Katakanlah, wahai orang-orang kafir!",
        })

        assert record.verse_key == "109:1"
        assert record.transliteration_normalized == "kulyayuhalkafirun"
        assert record.transliteration_skeleton == "klyyhlkfrn"

    def test_translation_id_key(self):
        """Test the translation_id source key."""
        record = build_record({"id": 1, "surah_id": 1, "translation_id": "Dengan nama Allah"})
        assert record.translation == "Dengan nama Allah"

    def test_defaults(self):
        """Test defaults for missing optional fields."""
        record = build_record({"id": 1, "surah_id": 1})

        assert record.number == 0
        assert record.juz_id == 0
        assert record.translation == ""
        assert record.transliteration_normalized == ""

    def test_missing_id(self):
        """Test that a row without an id raises KeyError."""
        with pytest.raises(KeyError):
            build_record({"surah_id": 1})


class TestLoadVersesJson:
    """Test cases for loading JSON corpora."""

    def test_bundled_sample(self):
        """Test loading the bundled sample corpus."""
        records = load_verses_json(SAMPLE_CORPUS_PATH)

        assert len(records) == 18
        assert {r.surah_id for r in records} == {1, 2, 109, 112}
        assert all(r.transliteration_normalized for r in records)

    def test_missing_file(self, tmp_path):
        """Test that a missing file raises CorpusLoadError."""
        with pytest.raises(CorpusLoadError) as exc_info:
            load_verses_json(tmp_path / "nope.json")
        assert exc_info.value.path.endswith("nope.json")

    def test_invalid_json(self, tmp_path):
        """Test that malformed JSON raises CorpusLoadError."""
        path = tmp_path / "bad.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(CorpusLoadError):
            load_verses_json(path)

    def test_not_an_array(self, tmp_path):
        """Test that a top-level object is rejected."""
        path = tmp_path / "object.json"
        path.write_text(json.dumps({"id": 1}), encoding="utf-8")

        with pytest.raises(CorpusLoadError):
            load_verses_json(path)

    def test_bad_row(self, tmp_path):
        """Test that a bad row reports its index."""
        path = tmp_path / "rows.json"
        path.write_text(json.dumps([{"id": 1, "surah_id": 1}, {"id": 2}]), encoding="utf-8")

        with pytest.raises(CorpusLoadError, match="index 1"):
            load_verses_json(path)


class TestBuildDatabase:
    """Test cases for writing SQLite corpora."""

    def test_replaces_existing_file(self, tmp_path, corpus_records):
        """Test that rebuilding replaces the old database."""
        path = tmp_path / "quran.sqlite"
        build_database(corpus_records, path)
        store = build_database(corpus_records[:2], path)

        assert store.count() == 2

    def test_main(self, tmp_path):
        """Test the command-line entry point."""
        output = tmp_path / "out" / "quran.sqlite"

        assert main([str(SAMPLE_CORPUS_PATH), str(output)]) == 0
        assert output.exists()
