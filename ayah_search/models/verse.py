"""
Verse record data model.
"""

from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, computed_field

from ..core.normalizer import normalize_latin, strip_vowels


def parse_verse_key(verse_key: str) -> Tuple[int, int]:
    """
    Split a verse key such as ``"109:1"`` into (surah_id, number).

    Raises:
        ValueError: If the key is not two positive integers joined by ':'
    """
    surah, sep, number = (verse_key or "").strip().partition(":")
    if not sep or not surah.isdigit() or not number.isdigit():
        raise ValueError(f"Invalid verse key: {verse_key!r}")
    return int(surah), int(number)


class VerseRecord(BaseModel):
    """
    A single verse row read from the corpus store.

    Records are immutable. ``transliteration_normalized`` and
    ``transliteration_skeleton`` are derived from ``transliteration`` at
    ingestion time; use :meth:`from_source` to build them consistently.
    """

    model_config = ConfigDict(frozen=True)

    id: int = Field(..., description="Unique verse identifier")
    number: int = Field(default=0, ge=0, description="Verse ordinal within its surah")
    surah_id: int = Field(..., ge=1, description="Surah (chapter) number")
    juz_id: int = Field(default=0, ge=0, description="Juz number")
    text: str = Field(default="", description="Original script text")
    transliteration: str = Field(default="", description="Raw Latin transliteration")
    transliteration_normalized: str = Field(default="")
    transliteration_skeleton: str = Field(default="")
    translation: str = Field(default="", description="Indonesian translation")

    @computed_field
    @property
    def verse_key(self) -> str:
        """Composite key ``"{surah_id}:{number}"``."""
        return f"{self.surah_id}:{self.number}"

    @classmethod
    def from_source(
        cls,
        id: int,
        surah_id: int,
        number: int = 0,
        juz_id: int = 0,
        text: str = "",
        transliteration: str = "",
        translation: Optional[str] = None,
    ) -> "VerseRecord":
        """Build a record, deriving the normalized and skeleton columns."""
        normalized = normalize_latin(transliteration)
        return cls(
            id=id,
            number=number,
            surah_id=surah_id,
            juz_id=juz_id,
            text=text,
            transliteration=transliteration,
            transliteration_normalized=normalized,
            transliteration_skeleton=strip_vowels(normalized),
            translation=translation or "",
        )
