"""Full HTML page around the generated lyrics.

The page carries the two controls the sing-along controller looks up by
id (``sing-along`` and ``restart``).  When no lyrics are available an
alert takes the place of the verses.
"""

from __future__ import annotations

import html as html_mod

from bottles.constants import RESTART_ID, TOGGLE_ID
from bottles.lyrics.verses import DEFAULT_ASSET_PATH, SONG_TITLE, generate_lyrics
from bottles.ui.button_copy import toggle_copy
from bottles.model import SessionState

LYRICS_ERROR_MAIN = (
    '<main role="main" aria-label="Song Lyrics">'
    '<p role="alert">Error: Lyrics could not be loaded. Please try again later.</p>'
    "</main>"
)

_PAGE_TEMPLATE = """\
<!DOCTYPE html>
<html lang="en-US">
<head>
<meta charset="UTF-8">
<meta name="viewport" content="width=device-width, initial-scale=1.0">
<meta name="description" content="{title} song lyrics.">
<meta name="robots" content="index, follow">
<meta property="og:title" content="{title}">
<meta property="og:description" content="Sing along with the classic 99 Bottles song.">
<meta property="og:type" content="website">
<link rel="icon" type="image/svg+xml" href="{asset_path}beer-bottle.svg">
<title>{title}</title>
<link rel="stylesheet" href="css/styles.css">
</head>
<body>
{body}
<footer role="navigation">
<button id="{toggle_id}" aria-label="{toggle_aria}" class="sing-along-btn">{toggle_text}</button>
<a id="{restart_id}" aria-label="Scroll to top of song" class="restart-link">I Went to the Store</a>
</footer>
<script defer src="js/main.js"></script>
</body>
</html>
"""


def render_page(lyrics: str | None = None, *, asset_path: str = DEFAULT_ASSET_PATH) -> str:
    """Render the whole document.

    ``lyrics=None`` renders the generated song; an empty string renders the
    error alert instead.  Any other value is inserted as-is (it is markup).
    """
    if lyrics is None:
        lyrics = generate_lyrics(asset_path)
    body = lyrics if lyrics.strip() else LYRICS_ERROR_MAIN

    copy = toggle_copy(SessionState.IDLE)
    return _PAGE_TEMPLATE.format(
        title=html_mod.escape(SONG_TITLE),
        asset_path=html_mod.escape(asset_path),
        body=body,
        toggle_id=TOGGLE_ID,
        toggle_text=html_mod.escape(copy.text),
        toggle_aria=html_mod.escape(copy.aria_label),
        restart_id=RESTART_ID,
    )
