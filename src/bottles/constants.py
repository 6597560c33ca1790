"""Fixed song and sing-along constants.

These are not read from the environment; the markup contract and the
sing-along pacing both depend on them staying in lockstep.
"""

from __future__ import annotations

FIRST_VERSE = 99
LAST_VERSE = 0
VERSE_COUNT = FIRST_VERSE - LAST_VERSE + 1  # 100

ADVANCE_DELAY_MS = 5000
REVEAL_THRESHOLD = 0.3
TOP_ANCHOR = 0

# ── markup contract ─────────────────────────────────────────────────
VERSE_ID_PREFIX = "verse-"
VERSE_TEXT_ID_PREFIX = "verse-text-"
VERSE_CLASS = "verse"
HIGHLIGHT_CLASS = "highlight"
VISIBLE_CLASS = "visible"
TOGGLE_ID = "sing-along"
RESTART_ID = "restart"


def verse_id(n: int) -> str:
    return f"{VERSE_ID_PREFIX}{n}"


def verse_text_id(n: int) -> str:
    return f"{VERSE_TEXT_ID_PREFIX}{n}"
