"""Verse lookup API endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Path

from ..core.engine import SearchEngine
from ..models.response import VerseListResponse
from ..models.verse import VerseRecord
from .deps import get_engine

router = APIRouter(prefix="/api/v1", tags=["verses"])


@router.get(
    "/verses/id/{verse_id}",
    response_model=VerseRecord,
    summary="Get verse by id",
    description="Look up a verse by its corpus-wide id"
)
def get_verse_by_id(
    verse_id: int = Path(..., ge=1, description="Verse id, 1 to 6236"),
    engine: SearchEngine = Depends(get_engine),
) -> VerseRecord:
    verse = engine.get_verse_by_id(verse_id)
    if verse is None:
        raise HTTPException(status_code=404, detail=f"Verse {verse_id} not found")
    return verse


@router.get(
    "/verses/{verse_key}",
    response_model=VerseRecord,
    summary="Get verse by key",
    description="Look up a verse by key such as 109:1"
)
def get_verse(
    verse_key: str = Path(..., description="Verse key as surah:number"),
    engine: SearchEngine = Depends(get_engine),
) -> VerseRecord:
    """
    Look up a verse by ``surah:number`` key.

    Malformed keys are a client error (400); well-formed keys that are not in
    the corpus are 404.
    """
    try:
        verse = engine.get_verse(verse_key)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    if verse is None:
        raise HTTPException(status_code=404, detail=f"Verse {verse_key} not found")
    return verse


@router.get(
    "/surahs/{surah_id}",
    response_model=VerseListResponse,
    summary="Get surah",
    description="All verses of a surah in order"
)
def get_surah(
    surah_id: int = Path(..., ge=1, le=114, description="Surah number"),
    engine: SearchEngine = Depends(get_engine),
) -> VerseListResponse:
    verses = engine.get_surah(surah_id)
    if not verses:
        raise HTTPException(status_code=404, detail=f"Surah {surah_id} not found")
    return VerseListResponse(total=len(verses), verses=verses)


@router.get(
    "/juz/{juz_id}",
    response_model=VerseListResponse,
    summary="Get juz",
    description="All verses of a juz in order"
)
def get_juz(
    juz_id: int = Path(..., ge=1, le=30, description="Juz number"),
    engine: SearchEngine = Depends(get_engine),
) -> VerseListResponse:
    verses = engine.get_juz(juz_id)
    if not verses:
        raise HTTPException(status_code=404, detail=f"Juz {juz_id} not found")
    return VerseListResponse(total=len(verses), verses=verses)
