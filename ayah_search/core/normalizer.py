"""Text normalization utilities for transliteration and translation matching."""

import re
import unicodedata
from typing import List, Optional

# Applied in order, each over the whole string before the next
PHONETIC_SUBSTITUTIONS = (
    ("sy", "sh"),  # syukur ~ shukr
    ("dz", "z"),   # dzikir ~ zikr
    ("ts", "s"),   # tsabit ~ sabit
    ("q", "k"),    # qul ~ kul
)

# Vowels plus the semivowels y/w (ayyuhal ~ ayuhal); one non-recursive pass each
DOUBLE_VOWELS = (("aa", "a"), ("ii", "i"), ("uu", "u"), ("yy", "y"), ("ww", "w"))

# Legacy Indonesian orthography (ejaan lama) and common variants
ID_WORD_SUBSTITUTIONS = (
    ("sy", "s"),   # syurga -> surga
    ("dj", "j"),   # djarak -> jarak
    ("oe", "u"),   # doea -> dua
    ("tj", "c"),   # tjari -> cari
    ("nj", "ny"),  # njanji -> nyanyi
    ("ch", "kh"),  # achir -> akhir
)

_NON_ALNUM = re.compile(r"[^a-z0-9]")
_VOWELS = re.compile(r"[aeiou]")
_EDGE_PUNCTUATION = re.compile(r"^[\W_]+|[\W_]+$")


def strip_diacritics(text: str) -> str:
    """Decompose and drop combining marks (á -> a)."""
    decomposed = unicodedata.normalize("NFD", text)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def normalize_latin(text: Optional[str]) -> str:
    """
    Normalize Latin transliteration for phonetic matching.

    Lowercases, strips diacritics, applies the Indonesian-first phonetic
    mappings (sy->sh, dz->z, ts->s, q->k), removes everything outside
    ``[a-z0-9]`` and collapses doubled vowels (and doubled y/w) in a
    single pass, so ``"aaa"`` becomes ``"aa"``.

    Args:
        text: Raw transliteration or user query

    Returns:
        Normalized string, empty for empty input
    """
    if not text:
        return ""

    normalized = strip_diacritics(text.lower())

    for old, new in PHONETIC_SUBSTITUTIONS:
        normalized = normalized.replace(old, new)

    normalized = _NON_ALNUM.sub("", normalized)

    for old, new in DOUBLE_VOWELS:
        normalized = normalized.replace(old, new)

    return normalized


def strip_vowels(normalized: str) -> str:
    """Reduce an already-normalized string to its consonant skeleton."""
    if not normalized:
        return ""
    return _VOWELS.sub("", normalized)


def strip_edge_punctuation(word: str) -> str:
    """Remove leading and trailing punctuation and quotes from a word."""
    return _EDGE_PUNCTUATION.sub("", word)


def normalize_id_word(word: Optional[str]) -> str:
    """
    Normalize an Indonesian word for comparison.

    Examples:
        "Syurga," -> "surga"
        "djarak"  -> "jarak"
        "doea"    -> "dua"
    """
    if not word:
        return ""

    normalized = word.lower().strip()
    for old, new in ID_WORD_SUBSTITUTIONS:
        normalized = normalized.replace(old, new)

    normalized = strip_diacritics(normalized)
    return strip_edge_punctuation(normalized)


class TextNormalizer:
    """Bundles the normalization steps used by retrieval and scoring."""

    def normalize(self, text: Optional[str]) -> str:
        """Phonetic normalization of a transliteration."""
        return normalize_latin(text)

    def skeleton(self, text: Optional[str]) -> str:
        """Consonant skeleton of a raw transliteration."""
        return strip_vowels(normalize_latin(text))

    def normalize_query(self, query: Optional[str]) -> str:
        """Lowercase, trimmed form used for translation search."""
        if not query:
            return ""
        return query.strip().lower()

    def normalize_word(self, word: Optional[str]) -> str:
        """Indonesian word normalization."""
        return normalize_id_word(word)

    def tokenize(self, text: Optional[str], min_length: int = 1) -> List[str]:
        """
        Split text on whitespace and keep tokens of at least ``min_length``.

        Args:
            text: Input text
            min_length: Minimum token length to keep

        Returns:
            List of tokens in original order
        """
        if not text:
            return []
        return [token for token in text.split() if len(token) >= min_length]

    def words(self, text: Optional[str]) -> List[str]:
        """Whitespace-delimited words with edge punctuation removed."""
        if not text:
            return []
        words = []
        for raw in text.split():
            word = strip_edge_punctuation(raw)
            if word:
                words.append(word)
        return words
