"""Verse — one immutable stanza of the song, identified by its bottle count."""

from __future__ import annotations

from dataclasses import dataclass

from bottles.constants import FIRST_VERSE, LAST_VERSE, verse_id, verse_text_id

from . import VerseKind

ZERO_SENTINEL = "No more"
TAKE_ONE_DOWN = "Take one down and pass it around,"
GO_TO_THE_STORE = "Go to the store and buy some more,"


def noun_for(count: int) -> str:
    """Singular only for exactly one bottle; zero is plural."""
    return "bottle" if count == 1 else "bottles"


def check_verse_number(n: object) -> int:
    """Return *n* if it names a verse, else raise ``ValueError``."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise ValueError(f"verse number must be an int, got {type(n).__name__}")
    if not LAST_VERSE <= n <= FIRST_VERSE:
        raise ValueError(
            f"verse number out of range: {n} (expected {LAST_VERSE}..{FIRST_VERSE})"
        )
    return n


@dataclass(frozen=True, slots=True)
class Verse:
    """A single verse of the song.

    ``n`` is the number of bottles on the wall when the verse starts.
    Everything else is derived from it.
    """

    n: int

    def __post_init__(self) -> None:
        check_verse_number(self.n)

    # ── derived text ────────────────────────────────────────────────

    @property
    def kind(self) -> VerseKind:
        return VerseKind.DECREMENT if self.n > 0 else VerseKind.RESTOCK

    @property
    def count(self) -> str:
        return str(self.n) if self.n > 0 else ZERO_SENTINEL

    @property
    def noun(self) -> str:
        return noun_for(self.n)

    @property
    def next_n(self) -> int:
        """Bottles left on the wall after this verse (restock wraps to 99)."""
        return self.n - 1 if self.n > 0 else FIRST_VERSE

    @property
    def next_count(self) -> str:
        return str(self.next_n) if self.next_n > 0 else ZERO_SENTINEL.lower()

    @property
    def next_noun(self) -> str:
        return noun_for(self.next_n)

    @property
    def element_id(self) -> str:
        return verse_id(self.n)

    @property
    def text_id(self) -> str:
        return verse_text_id(self.n)

    @property
    def lines(self) -> tuple[str, str, str, str]:
        action = TAKE_ONE_DOWN if self.kind is VerseKind.DECREMENT else GO_TO_THE_STORE
        return (
            f"{self.count} {self.noun} of beer on the wall,",
            f"{self.count} {self.noun} of beer.",
            action,
            f"{self.next_count} {self.next_noun} of beer on the wall.",
        )

    # ── serialisation ───────────────────────────────────────────────

    def to_dict(self) -> dict:
        return {
            "n": self.n,
            "id": self.element_id,
            "text_id": self.text_id,
            "kind": self.kind.value,
            "count": self.count,
            "noun": self.noun,
            "lines": list(self.lines),
        }
