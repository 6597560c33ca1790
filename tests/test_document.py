"""Tests for the document model built from rendered markup."""

from bottles.lyrics.page import render_page
from bottles.lyrics.verses import build, generate_lyrics
from bottles.singalong.document import Document, Element


class TestFromHtml:
    """Parsing generated markup into addressable elements."""

    def test_all_verses_in_document_order(self):
        doc = Document.from_html(generate_lyrics())
        ids = [v.id for v in doc.verses()]
        assert ids == [f"verse-{n}" for n in range(99, -1, -1)]

    def test_verse_text_element(self):
        doc = Document.from_html(build(3))
        body = doc.get_element_by_id("verse-text-3")
        assert body is not None
        assert body.text == (
            "3 bottles of beer on the wall, 3 bottles of beer. "
            "Take one down and pass it around, 2 bottles of beer on the wall."
        )

    def test_attributes_and_classes(self):
        doc = Document.from_html(build(10))
        verse = doc.get_element_by_id("verse-10")
        assert verse.tag == "div"
        assert verse.classes == ["verse"]
        assert verse.get_attribute("aria-describedby") == "verse-text-10"

    def test_page_controls_present(self):
        doc = Document.from_html(render_page())
        toggle = doc.get_element_by_id("sing-along")
        assert toggle is not None
        assert toggle.tag == "button"
        assert toggle.text == "Sing Along!"
        assert "restart" in doc

    def test_error_page_has_no_verses(self):
        doc = Document.from_html(render_page(""))
        assert doc.verses() == []
        assert "sing-along" in doc

    def test_first_duplicate_id_wins(self):
        doc = Document([Element("a", "div", ["x"]), Element("a", "span")])
        assert doc.get_element_by_id("a").tag == "div"
        assert len(doc) == 1

    def test_first_duplicate_id_keeps_its_own_text(self):
        doc = Document.from_html('<p id="a">first</p><p id="a">second</p>')
        assert doc.get_element_by_id("a").text == "first"

    def test_unclosed_paragraph_does_not_leak_text(self):
        markup = (
            '<div id="verse-text-5"><p>five a<p>five b</div>'
            '<div id="verse-text-4"><p>four</p></div>'
        )
        doc = Document.from_html(markup)
        assert doc.get_element_by_id("verse-text-5").text == "five a five b"
        assert doc.get_element_by_id("verse-text-4").text == "four"

    def test_verse_count_includes_verses_without_id(self):
        markup = build(3) + '<div class="verse"><p>stray</p></div>'
        doc = Document.from_html(markup)
        assert [v.id for v in doc.verses()] == ["verse-3"]
        assert doc.verse_count() == 2


class TestElement:
    """Class and attribute helpers."""

    def test_add_class_is_idempotent(self):
        el = Element("x", "div")
        el.add_class("highlight")
        el.add_class("highlight")
        assert el.classes == ["highlight"]

    def test_remove_missing_class_and_attribute(self):
        el = Element("x", "div")
        el.remove_class("nope")
        el.remove_attribute("nope")
        assert el.classes == []
        assert el.attrs == {}


class TestViewport:
    """Scrolling bookkeeping."""

    def test_scroll_into_view_then_top(self):
        doc = Document.from_html(build(5))
        doc.viewport.scroll_top = 900
        doc.viewport.scroll_into_view(doc.get_element_by_id("verse-5"))
        assert doc.viewport.focus_id == "verse-5"
        doc.viewport.scroll_to(0)
        assert doc.viewport.scroll_top == 0
        assert doc.viewport.focus_id is None

    def test_remove_detaches(self):
        doc = Document.from_html(generate_lyrics())
        assert doc.remove("verse-50") is not None
        assert doc.get_element_by_id("verse-50") is None
        assert len(doc.verses()) == 99
