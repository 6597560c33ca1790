"""Verse builder: bottle count in, escaped HTML fragment out.

``build(n)`` is pure and total over 0..99.  ``generate_lyrics()`` glues
all hundred fragments together in descending order and is computed once
per process.
"""

from __future__ import annotations

import html as html_mod
import logging
from functools import lru_cache
from typing import Iterator

from bottles.constants import FIRST_VERSE, LAST_VERSE
from bottles.model.verse import Verse

logger = logging.getLogger(__name__)

DEFAULT_ASSET_PATH = "assets/"
SONG_TITLE = "99 Bottles of Beer on the Wall"


def _e(text: object) -> str:
    return html_mod.escape(str(text), quote=True)


def verse_range() -> Iterator[int]:
    """Verse numbers in singing order: 99, 98, ..., 0."""
    return iter(range(FIRST_VERSE, LAST_VERSE - 1, -1))


def build(n: int, *, asset_path: str = DEFAULT_ASSET_PATH) -> str:
    """Return the HTML fragment for verse *n*.

    Raises ``ValueError`` when *n* is not an int in 0..99.
    """
    verse = Verse(n)

    parts = [
        f'<div id="{verse.element_id}" class="verse" '
        f'aria-label="Verse for {_e(verse.n)} bottles" '
        f'aria-describedby="{verse.text_id}">',
        f'<div class="beer-info"><img src="{_e(asset_path)}beer-bottle.svg" '
        f'alt="" class="bottle-icon" aria-hidden="true">',
        f'<span class="beer-counter">{_e(verse.count)}</span></div>',
        f'<div class="beer-verse-text" id="{verse.text_id}">',
    ]
    parts.extend(f"<p>{_e(line)}</p>" for line in verse.lines)
    parts.append("</div></div>")
    return "".join(parts)


@lru_cache(maxsize=None)
def generate_lyrics(asset_path: str = DEFAULT_ASSET_PATH) -> str:
    """Return the full lyrics body: ``<main>`` holding verses 99 down to 0."""
    output = [
        '<main role="main" aria-label="Song Lyrics">',
        f"<h1>{_e(SONG_TITLE)}</h1>",
    ]
    output.extend(build(n, asset_path=asset_path) for n in verse_range())
    output.append("</main>")
    logger.debug(f"Generated lyrics for {len(output) - 3} verses")
    return "".join(output)
