"""Enums shared across the lyrics and sing-along layers."""

from __future__ import annotations

from enum import Enum


class SessionState(str, Enum):
    """Sing-along state. A stopped session is represented as IDLE."""

    IDLE = "idle"
    PLAYING = "playing"
    PAUSED = "paused"


class VerseKind(str, Enum):
    """Which body template a verse uses."""

    DECREMENT = "decrement"
    RESTOCK = "restock"
