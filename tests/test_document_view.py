"""Tests for rink.tui.document.view -- scrolling, focus resolution and cropping."""

from __future__ import annotations

from helpers import StubDocument, selector_rows

from rink.tui.buffer import Buffer, Rect
from rink.tui.document import DocumentBuilder, DocumentView, Text
from rink.tui.navigation import ActionTarget
from rink.tui.table import Alignment, ColumnDef, PlayerLinkCell, TableWidget, TextCell


def _links_document(count: int = 10) -> StubDocument:
    def build(focus):
        builder = DocumentBuilder()
        for i in range(count):
            builder.link_with_focus(f"link_{i}", f"Link {i}", ActionTarget(f"open:{i}"), focus)
        return builder.build()

    return StubDocument(build)


def _mixed_document() -> StubDocument:
    """A link, a three-row table and another link (seven lines)."""
    columns = [
        ColumnDef("Player", 8, Alignment.LEFT, lambda i: PlayerLinkCell(f"P{i}", 100 + i)),
        ColumnDef("G", 2, Alignment.RIGHT, lambda i: TextCell(str(i))),
    ]
    table = TableWidget.from_data(columns, [0, 1, 2], name="players")

    def build(focus):
        return (
            DocumentBuilder()
            .link_with_focus("first", "First", ActionTarget("open:first"), focus)
            .table(table, focus)
            .link_with_focus("last", "Last", ActionTarget("open:last"), focus)
            .build()
        )

    return StubDocument(build)


def _render(view: DocumentView, ctx, width: int = 20, height: int = 4) -> list[str]:
    buf = Buffer.empty(width, height)
    view.render(buf.area, buf, ctx)
    return buf.to_lines()


# ---------------------------------------------------------------------------
# Accessors
# ---------------------------------------------------------------------------


class TestDocumentViewAccessors:
    def test_content_height_and_max_scroll(self):
        view = DocumentView(_links_document(10))
        assert view.content_height(20) == 10
        assert view.max_scroll(20, 4) == 6
        assert view.max_scroll(20, 40) == 0

    def test_focusable_count(self):
        assert DocumentView(_mixed_document()).focusable_count(20) == 5

    def test_focused_span(self):
        view = DocumentView(_mixed_document(), focus_index=2)
        assert view.focused_span(20) == (4, 5)

    def test_focused_span_clamps(self):
        view = DocumentView(_mixed_document(), focus_index=40)
        assert view.focused_span(20) == (6, 7)

    def test_focused_span_without_focus(self):
        assert DocumentView(_mixed_document()).focused_span(20) is None

    def test_setters_store_values_verbatim(self):
        view = DocumentView(_links_document())
        view.focus_by_index(99)
        view.set_scroll_offset(-3)
        assert view.focus_index == 99
        assert view.scroll_offset == -3


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------


class TestDocumentViewScrolling:
    def test_offset_selects_visible_lines(self, ctx):
        lines = _render(DocumentView(_links_document(), scroll_offset=3), ctx)
        assert [line.strip() for line in lines] == ["Link 3", "Link 4", "Link 5", "Link 6"]

    def test_offset_past_end_is_clamped(self, ctx):
        document = _links_document()
        assert _render(DocumentView(document, scroll_offset=100), ctx) == _render(
            DocumentView(document, scroll_offset=6), ctx
        )

    def test_negative_offset_is_clamped(self, ctx):
        document = _links_document()
        assert _render(DocumentView(document, scroll_offset=-5), ctx) == _render(
            DocumentView(document, scroll_offset=0), ctx
        )

    def test_clamp_equivalence_for_every_offset(self, ctx):
        document = _links_document(7)
        limit = DocumentView(document).max_scroll(20, 4)
        for offset in range(-3, 12):
            clamped = min(max(offset, 0), limit)
            assert _render(DocumentView(document, scroll_offset=offset), ctx) == _render(
                DocumentView(document, scroll_offset=clamped), ctx
            )

    def test_short_document_is_not_scrolled(self, ctx):
        lines = _render(DocumentView(_links_document(2), scroll_offset=5), ctx)
        assert lines[0].strip() == "Link 0"

    def test_rendering_never_scrolls_to_focus(self, ctx):
        view = DocumentView(_links_document(), focus_index=9, scroll_offset=0)
        assert selector_rows(_render(view, ctx)) == []
        assert view.scroll_offset == 0


class TestDocumentViewFocus:
    def test_exactly_one_highlight_in_document_order(self, ctx):
        document = _mixed_document()
        rows = []
        for index in range(DocumentView(document).focusable_count(20)):
            lines = _render(DocumentView(document, focus_index=index), ctx, height=7)
            highlighted = selector_rows(lines)
            assert len(highlighted) == 1
            rows.append(highlighted[0])
        assert rows == [0, 3, 4, 5, 6]

    def test_no_highlight_without_focus(self, ctx):
        assert selector_rows(_render(DocumentView(_mixed_document()), ctx, height=7)) == []

    def test_focus_index_is_clamped_at_render(self, ctx):
        lines = _render(DocumentView(_mixed_document(), focus_index=50), ctx, height=7)
        assert selector_rows(lines) == [6]
        assert "Last" in lines[6]


class TestDocumentViewCropping:
    def _document(self) -> StubDocument:
        return StubDocument(lambda focus: [Text("one\ntwo\nthree"), Text("four\nfive")])

    def test_element_cropped_at_top(self, ctx):
        lines = _render(DocumentView(self._document(), scroll_offset=1), ctx, height=3)
        assert [line.strip() for line in lines] == ["two", "three", "four"]

    def test_element_cropped_at_bottom(self, ctx):
        lines = _render(DocumentView(self._document()), ctx, height=4)
        assert [line.strip() for line in lines] == ["one", "two", "three", "four"]

    def test_element_taller_than_viewport(self, ctx):
        document = StubDocument(lambda focus: [Text("a\nb\nc\nd\ne")])
        lines = _render(DocumentView(document, scroll_offset=1), ctx, height=2)
        assert [line.strip() for line in lines] == ["b", "c"]

    def test_render_stays_inside_area(self, ctx):
        buf = Buffer.empty(20, 6)
        DocumentView(_links_document(), scroll_offset=2).render(Rect(0, 1, 20, 3), buf, ctx)
        lines = buf.to_lines(strip=True)
        assert lines[0] == ""
        assert lines[1:4] == ["  Link 2", "  Link 3", "  Link 4"]
        assert lines[4:] == ["", ""]

    def test_zero_area_draws_nothing(self, ctx):
        buf = Buffer.empty(20, 4)
        DocumentView(_links_document(), focus_index=0).render(Rect(0, 0, 20, 0), buf, ctx)
        DocumentView(_links_document(), focus_index=0).render(Rect(0, 0, 0, 4), buf, ctx)
        assert buf.is_blank()
