"""Sing-along: document model, timers, controller and reveal observer."""

from bottles.singalong.controller import SingAlongController, SingAlongSession
from bottles.singalong.document import Document, Element, Viewport
from bottles.singalong.reveal import RevealObserver
from bottles.singalong.scheduler import LoopScheduler, VirtualClock

__all__ = [
    "Document",
    "Element",
    "LoopScheduler",
    "RevealObserver",
    "SingAlongController",
    "SingAlongSession",
    "Viewport",
    "VirtualClock",
]
