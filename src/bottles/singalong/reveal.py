"""Reveal-on-scroll: mark verses visible once enough of them is on screen."""

from __future__ import annotations

import logging
from typing import Set

from bottles.constants import REVEAL_THRESHOLD, VISIBLE_CLASS
from bottles.singalong.document import Document

logger = logging.getLogger(__name__)


class RevealObserver:
    """Watches every verse until it has been revealed once.

    ``report(element_id, ratio)`` is fed by whatever measures visibility
    (a browser bridge, a terminal pager, a test).  The first report at or
    above the threshold adds the ``visible`` class and drops the element
    from observation; later reports for it are ignored.
    """

    def __init__(self, document: Document, *, threshold: float = REVEAL_THRESHOLD):
        if not 0.0 <= threshold <= 1.0:
            raise ValueError(f"threshold must be within 0..1, got {threshold}")
        self.document = document
        self.threshold = threshold
        self._observed: Set[str] = {v.id for v in document.verses()}

    @property
    def observed(self) -> Set[str]:
        return set(self._observed)

    def report(self, element_id: str, visible_ratio: float) -> bool:
        """Return True when this report revealed the element."""
        if element_id not in self._observed or visible_ratio < self.threshold:
            return False

        element = self.document.get_element_by_id(element_id)
        self._observed.discard(element_id)
        if element is None:
            logger.debug(f"Observed element {element_id} is gone; unobserving")
            return False

        element.add_class(VISIBLE_CLASS)
        return True
