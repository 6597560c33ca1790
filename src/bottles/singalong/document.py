"""Document model for the rendered lyrics page.

The sing-along controller never touches raw markup.  It works on this
small element model, built once from the generated HTML, and on a
``Viewport`` that records where the page is scrolled.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from bs4 import BeautifulSoup

from bottles.constants import TOP_ANCHOR, VERSE_CLASS


@dataclass
class Element:
    """An addressable element: one that carries an ``id``."""

    id: str
    tag: str
    classes: List[str] = field(default_factory=list)
    attrs: Dict[str, str] = field(default_factory=dict)
    text: str = ""

    def has_class(self, name: str) -> bool:
        return name in self.classes

    def add_class(self, name: str) -> None:
        if name not in self.classes:
            self.classes.append(name)

    def remove_class(self, name: str) -> None:
        if name in self.classes:
            self.classes.remove(name)

    def set_attribute(self, name: str, value: str) -> None:
        self.attrs[name] = value

    def remove_attribute(self, name: str) -> None:
        self.attrs.pop(name, None)

    def get_attribute(self, name: str) -> Optional[str]:
        return self.attrs.get(name)


@dataclass
class Viewport:
    """Scroll position of the page.

    ``focus_id`` is the element last brought into view, or None after a
    plain scroll to an absolute position.
    """

    scroll_top: int = TOP_ANCHOR
    focus_id: Optional[str] = None
    behavior: str = "smooth"

    def scroll_into_view(self, element: Element, *, block: str = "center") -> None:
        self.focus_id = element.id
        self.behavior = "smooth"

    def scroll_to(self, top: int, *, behavior: str = "smooth") -> None:
        self.scroll_top = top
        self.focus_id = None
        self.behavior = behavior


class Document:
    """Addressable elements of one page view, in document order.

    ``unnamed_verses`` counts ``.verse`` elements that carry no id.  They
    cannot be highlighted but still count towards the verse total.
    """

    def __init__(self, elements: List[Element] | None = None, *, unnamed_verses: int = 0) -> None:
        self._elements: Dict[str, Element] = {}
        for element in elements or []:
            # first id wins, as with getElementById
            self._elements.setdefault(element.id, element)
        self.unnamed_verses = unnamed_verses
        self.viewport = Viewport()

    @classmethod
    def from_html(cls, markup: str) -> "Document":
        soup = BeautifulSoup(markup, "html.parser")

        elements = []
        for tag in soup.find_all(id=True):
            attrs = {
                k: " ".join(v) if isinstance(v, list) else v
                for k, v in tag.attrs.items()
                if k not in ("id", "class")
            }
            elements.append(
                Element(
                    id=tag["id"],
                    tag=tag.name,
                    classes=list(tag.get("class", [])),
                    attrs=attrs,
                    text=tag.get_text(" ", strip=True),
                )
            )

        unnamed = [v for v in soup.find_all(class_=VERSE_CLASS) if not v.get("id")]
        return cls(elements, unnamed_verses=len(unnamed))

    def __len__(self) -> int:
        return len(self._elements)

    def __contains__(self, element_id: object) -> bool:
        return element_id in self._elements

    def get_element_by_id(self, element_id: str) -> Optional[Element]:
        return self._elements.get(element_id)

    def query_class(self, name: str) -> List[Element]:
        return [e for e in self._elements.values() if e.has_class(name)]

    def verses(self) -> List[Element]:
        """Verse elements that can be addressed by id."""
        return self.query_class(VERSE_CLASS)

    def verse_count(self) -> int:
        """Every ``.verse`` element, with or without an id."""
        return len(self.verses()) + self.unnamed_verses

    def remove(self, element_id: str) -> Optional[Element]:
        """Detach an element, e.g. when content changes under a running session."""
        return self._elements.pop(element_id, None)
