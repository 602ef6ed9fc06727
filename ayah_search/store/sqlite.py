"""SQLite-backed corpus store."""

import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Union

import structlog

from ..exceptions import RetrievalError
from ..models.verse import VerseRecord
from .base import CorpusStore

logger = structlog.get_logger(__name__)

SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS verses (
  id INTEGER PRIMARY KEY,
  number INTEGER NOT NULL,
  surah_id INTEGER NOT NULL,
  juz_id INTEGER NOT NULL,
  text TEXT NOT NULL,
  transliteration TEXT NOT NULL,
  transliteration_normalized TEXT NOT NULL,
  transliteration_skeleton TEXT NOT NULL,
  translation TEXT NOT NULL
);
CREATE INDEX IF NOT EXISTS idx_verses_surah_id ON verses(surah_id);
CREATE INDEX IF NOT EXISTS idx_verses_juz_id ON verses(juz_id);
CREATE INDEX IF NOT EXISTS idx_verses_key ON verses(surah_id, number);
"""

COLUMNS = (
    "id, number, surah_id, juz_id, text, transliteration, "
    "transliteration_normalized, transliteration_skeleton, translation"
)


def _row_to_record(row: sqlite3.Row) -> VerseRecord:
    return VerseRecord(**dict(row))


class SQLiteCorpusStore(CorpusStore):
    """
    Corpus store reading a ``verses`` table from a SQLite file.

    Each call opens its own connection, so one store can serve concurrent
    callers. Substring filters use ``instr`` rather than LIKE so that
    ``%`` and ``_`` in user queries are matched literally.
    """

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = str(path)

    @contextmanager
    def _connect(self, operation: str) -> Iterator[sqlite3.Connection]:
        try:
            con = sqlite3.connect(self.path)
        except sqlite3.Error as e:
            raise RetrievalError(f"Cannot open corpus database: {e}", operation) from e

        con.row_factory = sqlite3.Row
        # SQLite's lower() folds ASCII only
        con.create_function("py_lower", 1, str.lower, deterministic=True)
        try:
            yield con
            con.commit()
        except sqlite3.Error as e:
            logger.error("Corpus query failed", operation=operation, path=self.path, error=str(e))
            raise RetrievalError(f"Corpus query failed: {e}", operation) from e
        finally:
            con.close()

    def _fetch_all(self, operation: str, sql: str, params: tuple = ()) -> List[VerseRecord]:
        with self._connect(operation) as con:
            rows = con.execute(sql, params).fetchall()
        return [_row_to_record(row) for row in rows]

    def _fetch_one(self, operation: str, sql: str, params: tuple) -> Optional[VerseRecord]:
        with self._connect(operation) as con:
            row = con.execute(sql, params).fetchone()
        return _row_to_record(row) if row else None

    def create_schema(self) -> None:
        """Create the verses table and its indexes if missing."""
        with self._connect("create_schema") as con:
            con.executescript(SCHEMA_SQL)

    def insert_many(self, records: Iterable[VerseRecord]) -> int:
        """
        Insert or replace verse records.

        Returns:
            Number of rows written
        """
        rows = [
            (
                r.id, r.number, r.surah_id, r.juz_id, r.text, r.transliteration,
                r.transliteration_normalized, r.transliteration_skeleton, r.translation,
            )
            for r in records
        ]
        with self._connect("insert_many") as con:
            con.executemany(
                f"INSERT OR REPLACE INTO verses ({COLUMNS}) VALUES (?,?,?,?,?,?,?,?,?)",
                rows,
            )
        return len(rows)

    def find_by_transliteration(
        self, q_norm: str, q_skel: str, limit: int
    ) -> List[VerseRecord]:
        if q_skel:
            sql = (
                f"SELECT {COLUMNS} FROM verses "
                "WHERE instr(transliteration_normalized, ?) > 0 "
                "OR instr(transliteration_skeleton, ?) > 0 "
                "ORDER BY id LIMIT ?"
            )
            params = (q_norm, q_skel, limit)
        else:
            sql = (
                f"SELECT {COLUMNS} FROM verses "
                "WHERE instr(transliteration_normalized, ?) > 0 "
                "ORDER BY id LIMIT ?"
            )
            params = (q_norm, limit)
        return self._fetch_all("find_by_transliteration", sql, params)

    def find_by_translation(self, query: str, limit: int) -> List[VerseRecord]:
        sql = (
            f"SELECT {COLUMNS} FROM verses "
            "WHERE instr(py_lower(translation), ?) > 0 "
            "ORDER BY id LIMIT ?"
        )
        return self._fetch_all("find_by_translation", sql, (query.lower(), limit))

    def all_verses(self) -> List[VerseRecord]:
        return self._fetch_all("all_verses", f"SELECT {COLUMNS} FROM verses ORDER BY id")

    def get_by_id(self, verse_id: int) -> Optional[VerseRecord]:
        return self._fetch_one(
            "get_by_id", f"SELECT {COLUMNS} FROM verses WHERE id = ?", (verse_id,)
        )

    def get_by_key(self, surah_id: int, number: int) -> Optional[VerseRecord]:
        return self._fetch_one(
            "get_by_key",
            f"SELECT {COLUMNS} FROM verses WHERE surah_id = ? AND number = ?",
            (surah_id, number),
        )

    def get_by_surah(self, surah_id: int) -> List[VerseRecord]:
        return self._fetch_all(
            "get_by_surah",
            f"SELECT {COLUMNS} FROM verses WHERE surah_id = ? ORDER BY number",
            (surah_id,),
        )

    def get_by_juz(self, juz_id: int) -> List[VerseRecord]:
        return self._fetch_all(
            "get_by_juz",
            f"SELECT {COLUMNS} FROM verses WHERE juz_id = ? ORDER BY id",
            (juz_id,),
        )

    def count(self) -> int:
        with self._connect("count") as con:
            row = con.execute("SELECT COUNT(*) FROM verses").fetchone()
        return row[0] if row else 0
