"""
Build verse records from a JSON export and write them to a SQLite corpus.

Usage:
    python -m ayah_search.ingest verses.json quran.sqlite
"""

import argparse
import json
from pathlib import Path
from typing import Any, Dict, List, Union

import structlog

from .config import get_settings
from .exceptions import CorpusLoadError
from .logging_config import configure_logging
from .models.verse import VerseRecord
from .store.sqlite import SQLiteCorpusStore

logger = structlog.get_logger(__name__)


def build_record(row: Dict[str, Any]) -> VerseRecord:
    """
    Build a verse record from one exported row.

    Accepts ``translation`` or ``translation_id`` for the Indonesian text;
    missing ``number`` and ``juz_id`` default to 0.

    Raises:
        KeyError: If ``id`` or ``surah_id`` is missing
    """
    translation = row.get("translation")
    if translation is None:
        translation = row.get("translation_id")

    return VerseRecord.from_source(
        id=int(row["id"]),
        surah_id=int(row["surah_id"]),
        number=int(row.get("number") or 0),
        juz_id=int(row.get("juz_id") or 0),
        text=row.get("text") or "",
        transliteration=row.get("transliteration") or "",
        translation=translation or "",
    )


def load_verses_json(path: Union[str, Path]) -> List[VerseRecord]:
    """
    Load verse records from a JSON array.

    Raises:
        CorpusLoadError: If the file is missing, not a JSON array, or has bad rows
    """
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise CorpusLoadError("Corpus file not found", str(path)) from e
    except json.JSONDecodeError as e:
        raise CorpusLoadError(f"Invalid JSON: {e}", str(path)) from e

    if not isinstance(data, list):
        raise CorpusLoadError("Corpus JSON must be an array of verse objects", str(path))

    records = []
    for index, row in enumerate(data):
        try:
            records.append(build_record(row))
        except (KeyError, TypeError, ValueError) as e:
            raise CorpusLoadError(f"Invalid verse at index {index}: {e}", str(path)) from e

    logger.info("Corpus loaded", path=str(path), total_verses=len(records))
    return records


def build_database(records: List[VerseRecord], path: Union[str, Path]) -> SQLiteCorpusStore:
    """
    Write records to a fresh SQLite corpus, replacing any existing file.

    Returns:
        A store reading the new database
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    if path.exists():
        path.unlink()

    store = SQLiteCorpusStore(path)
    store.create_schema()
    written = store.insert_many(records)
    logger.info("Corpus database written", path=str(path), total_verses=written)
    return store


def main(argv: List[str] = None) -> int:
    parser = argparse.ArgumentParser(description="Build a SQLite verse corpus from JSON")
    parser.add_argument("source", help="JSON array of verse objects")
    parser.add_argument("output", help="SQLite file to create")
    args = parser.parse_args(argv)

    settings = get_settings()
    configure_logging(settings.log_level, settings.log_format)

    records = load_verses_json(args.source)
    build_database(records, args.output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
