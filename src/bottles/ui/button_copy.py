from __future__ import annotations

from dataclasses import dataclass
from typing import Dict

from bottles.model import SessionState


@dataclass(frozen=True)
class ToggleCopy:
    """Visible label and screen-reader label for the sing-along toggle."""

    text: str
    aria_label: str


_TOGGLE_COPY: Dict[SessionState, ToggleCopy] = {
    SessionState.IDLE: ToggleCopy("Sing Along!", "Start sing-along mode"),
    SessionState.PLAYING: ToggleCopy("Pause Singing", "Pause sing-along mode"),
    SessionState.PAUSED: ToggleCopy("Resume Singing", "Resume sing-along mode"),
}

DISABLED_COPY = ToggleCopy(
    "No Verses Available",
    "Sing-along disabled due to missing verses",
)


def toggle_copy(state: SessionState) -> ToggleCopy:
    """Copy for the toggle while the controller is in *state*."""
    return _TOGGLE_COPY[state]
