"""bottles — 99 Bottles of Beer lyrics with a timed sing-along."""

__all__ = [
    "__version__",
    "build",
    "generate_lyrics",
    "render_page",
    "Document",
    "SingAlongController",
    "VirtualClock",
]
__version__ = "0.1.0"

from bottles.lyrics import build, generate_lyrics, render_page  # noqa: E402, F401
from bottles.singalong import (  # noqa: E402, F401
    Document,
    SingAlongController,
    VirtualClock,
)
