"""
Sing-Along Controller

Walks the verses from 99 down to 0, highlighting one at a time and
advancing on a fixed delay.  A single toggle moves the session between
IDLE, PLAYING and PAUSED; reaching the end (or losing the current verse
element) stops the run, which is the same representation as IDLE.

Invariants kept here rather than by the host:
1. At most one verse carries the highlight marker.
2. At most one advance timer is pending; scheduling cancels the old one.
3. ``current_index`` only moves down while PLAYING.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, List, Optional

from bottles.constants import (
    ADVANCE_DELAY_MS,
    FIRST_VERSE,
    HIGHLIGHT_CLASS,
    LAST_VERSE,
    TOGGLE_ID,
    TOP_ANCHOR,
    VERSE_COUNT,
    verse_id,
)
from bottles.model import SessionState
from bottles.singalong.document import Document, Element
from bottles.singalong.scheduler import Scheduler, TimerHandle
from bottles.ui.button_copy import DISABLED_COPY, ToggleCopy, toggle_copy

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Session record
# -----------------------------------------------------------------------------

@dataclass
class SingAlongSession:
    """Transient state of one page view's sing-along."""

    active: bool = False
    paused: bool = False
    current_index: int = FIRST_VERSE
    pending: Optional[TimerHandle] = None

    @property
    def state(self) -> SessionState:
        if not self.active:
            return SessionState.IDLE
        return SessionState.PAUSED if self.paused else SessionState.PLAYING

    def cancel_pending(self) -> None:
        if self.pending is not None:
            self.pending.cancel()
            self.pending = None

    def reset(self) -> None:
        """Return to the initial (IDLE) representation."""
        self.cancel_pending()
        self.active = False
        self.paused = False
        self.current_index = FIRST_VERSE


# -----------------------------------------------------------------------------
# Controller
# -----------------------------------------------------------------------------

class SingAlongController:
    """
    State machine driving the sing-along over a ``Document``.

    The constructor validates the verse set.  With no verses at all the
    controller is disabled for good: ``toggle()`` does nothing and the
    toggle element (if present) is marked disabled.
    """

    def __init__(
        self,
        document: Document,
        scheduler: Scheduler,
        *,
        delay_ms: int = ADVANCE_DELAY_MS,
        on_highlight: Optional[Callable[[Element], None]] = None,
        on_state_change: Optional[Callable[[SessionState], None]] = None,
    ):
        self.document = document
        self.scheduler = scheduler
        self.delay_ms = delay_ms
        self.on_highlight = on_highlight
        self.on_state_change = on_state_change
        self.session = SingAlongSession()
        self.last_error: Optional[str] = None
        self.enabled = self.validate()

    # ── read-only views ─────────────────────────────────────────────

    @property
    def state(self) -> SessionState:
        return self.session.state

    @property
    def current_index(self) -> int:
        return self.session.current_index

    @property
    def pending_timer(self) -> Optional[TimerHandle]:
        return self.session.pending

    @property
    def toggle_element(self) -> Optional[Element]:
        return self.document.get_element_by_id(TOGGLE_ID)

    def highlighted(self) -> List[Element]:
        return self.document.query_class(HIGHLIGHT_CLASS)

    # ── startup ─────────────────────────────────────────────────────

    def validate(self) -> bool:
        """Check the verse set; disable the controller if it is empty."""
        verse_count = self.document.verse_count()

        if verse_count == 0:
            logger.error("No verses found. Sing-along mode disabled.")
            self._disable_toggle()
            return False

        if verse_count < VERSE_COUNT:
            logger.warning(
                f"Expected {VERSE_COUNT} verses, but found {verse_count}. "
                "Some verses may be missing."
            )

        if verse_id(FIRST_VERSE) not in self.document:
            logger.warning(
                f"First verse ({verse_id(FIRST_VERSE)}) is missing. "
                "Sing-along may start incorrectly."
            )
        if verse_id(LAST_VERSE) not in self.document:
            logger.warning(
                f"Last verse ({verse_id(LAST_VERSE)}) is missing. "
                "Sing-along may end prematurely."
            )

        self._render_toggle(toggle_copy(SessionState.IDLE))
        return True

    # ── user controls ───────────────────────────────────────────────

    def toggle(self) -> SessionState:
        """Idle -> Playing -> Paused -> Playing ...; returns the new state."""
        if not self.enabled:
            logger.debug("Toggle ignored: sing-along is disabled")
            return self.state

        session = self.session
        if not session.active:
            session.active = True
            session.paused = False
            session.current_index = FIRST_VERSE
            self.last_error = None
            self._changed()
            self._highlight(session.current_index)
        elif session.paused:
            session.paused = False
            self._changed()
            self._highlight(session.current_index)
        else:
            session.paused = True
            session.cancel_pending()
            self._changed()
        return self.state

    def stop(self) -> None:
        """Clear highlights and return the session to IDLE."""
        was_active = self.session.active
        self.session.reset()
        self._clear_highlights()
        if was_active:
            self._changed()

    def scroll_to_top(self) -> None:
        """Scroll the view back to the top anchor.  Does not touch the session."""
        self.document.viewport.scroll_to(TOP_ANCHOR)

    # ── loop ────────────────────────────────────────────────────────

    def _highlight(self, index: int) -> None:
        self._clear_highlights()

        verse = self.document.get_element_by_id(verse_id(index))
        if verse is None:
            self.last_error = f"Verse with ID {verse_id(index)} not found."
            logger.warning(self.last_error)
            self.stop()
            return

        verse.add_class(HIGHLIGHT_CLASS)
        verse.set_attribute("role", "alert")
        self.document.viewport.scroll_into_view(verse, block="center")
        if self.on_highlight is not None:
            self.on_highlight(verse)

        # on_highlight may have paused or stopped the session
        if self.session.state is SessionState.PLAYING:
            self._schedule_advance()

    def _schedule_advance(self) -> None:
        self.session.cancel_pending()
        self.session.pending = self.scheduler.call_later(self.delay_ms, self._advance)

    def _advance(self) -> None:
        session = self.session
        session.pending = None
        if session.state is not SessionState.PLAYING:
            return

        session.current_index -= 1
        if session.current_index >= LAST_VERSE:
            self._highlight(session.current_index)
        else:
            logger.info("Sing-along finished")
            self.stop()

    def _clear_highlights(self) -> None:
        for verse in self.document.verses():
            verse.remove_class(HIGHLIGHT_CLASS)
            verse.remove_attribute("role")

    # ── toggle presentation ─────────────────────────────────────────

    def _changed(self) -> None:
        state = self.state
        self._render_toggle(toggle_copy(state))
        logger.debug(f"Sing-along state -> {state.value} (verse {self.session.current_index})")
        if self.on_state_change is not None:
            self.on_state_change(state)

    def _render_toggle(self, copy: ToggleCopy) -> None:
        button = self.toggle_element
        if button is None:
            return
        button.text = copy.text
        button.set_attribute("aria-label", copy.aria_label)

    def _disable_toggle(self) -> None:
        button = self.toggle_element
        self._render_toggle(DISABLED_COPY)
        if button is not None:
            button.set_attribute("disabled", "")
            button.set_attribute("aria-disabled", "true")
