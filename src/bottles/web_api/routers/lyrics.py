"""
Lyrics Router
=============
The rendered page, the bare lyrics fragment and per-verse data.
"""
from fastapi import APIRouter, HTTPException
from fastapi.responses import HTMLResponse

from bottles.lyrics.page import render_page
from bottles.lyrics.verses import build, generate_lyrics, verse_range
from bottles.model.verse import Verse
from bottles.web_api.config import settings
from bottles.web_api.schemas.verse import VerseList, VerseOut

router = APIRouter()

HTML_MEDIA_TYPE = "text/html; charset=UTF-8"


def _verse_out(n: int) -> VerseOut:
    verse = Verse(n)
    return VerseOut(**verse.to_dict(), html=build(n, asset_path=settings.ASSET_PATH))


@router.get("/", response_class=HTMLResponse)
async def lyrics_page():
    """Full page with lyrics and sing-along controls."""
    return HTMLResponse(render_page(asset_path=settings.ASSET_PATH), media_type=HTML_MEDIA_TYPE)


@router.get("/lyrics", response_class=HTMLResponse)
async def lyrics_fragment():
    """Only the ``<main>`` lyrics body, for embedding."""
    return HTMLResponse(generate_lyrics(settings.ASSET_PATH), media_type=HTML_MEDIA_TYPE)


@router.get("/verses", response_model=VerseList)
async def list_verses():
    """Every verse from 99 down to 0."""
    verses = [_verse_out(n) for n in verse_range()]
    return VerseList(count=len(verses), verses=verses)


@router.get("/verses/{n}", response_model=VerseOut)
async def get_verse(n: int):
    """
    A single verse.

    - **n**: bottle count, 0..99
    """
    try:
        return _verse_out(n)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))
