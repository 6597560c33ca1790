"""Lyrics generation: verse fragments and the page around them."""

from bottles.lyrics.page import render_page
from bottles.lyrics.verses import build, generate_lyrics, verse_range

__all__ = ["build", "generate_lyrics", "render_page", "verse_range"]
