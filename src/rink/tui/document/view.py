"""Scrollable, focus-aware window onto a document.

The view stores a focus index and a scroll offset verbatim and resolves both
against the document at render time: focus is clamped to the focusable
units, scroll to ``[0, max(0, content_height - viewport_height)]``.  Moving
focus never scrolls; keeping the focused unit visible is the caller's job
(see :func:`rink.tui.update.scroll_to_focus`).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rink.tui.buffer import Buffer, Rect
from rink.tui.document.base import Document
from rink.tui.document.elements import DocumentElement, content_height
from rink.tui.document.focus import FocusablePosition, FocusContext
from rink.tui.document.render import render_document_element

if TYPE_CHECKING:
    from rink.tui.config import RenderContext


class DocumentView:
    def __init__(self, document: Document, focus_index: int | None = None, scroll_offset: int = 0) -> None:
        self.document = document
        self.focus_index = focus_index
        self.scroll_offset = scroll_offset

    def focus_by_index(self, index: int | None) -> None:
        self.focus_index = index

    def set_scroll_offset(self, offset: int) -> None:
        self.scroll_offset = offset

    # --- Read accessors ---

    def _context(self, width: int, ctx: RenderContext | None = None) -> FocusContext:
        if ctx is None:
            return FocusContext(available_width=width)
        return FocusContext.for_render(ctx, width)

    def positions(self, width: int, ctx: RenderContext | None = None) -> list[FocusablePosition]:
        return self.document.focusable_positions(self._context(width, ctx))

    def content_height(self, width: int, ctx: RenderContext | None = None) -> int:
        return content_height(self.document.build(self._context(width, ctx)))

    def max_scroll(self, width: int, height: int, ctx: RenderContext | None = None) -> int:
        return max(0, self.content_height(width, ctx) - height)

    def focusable_count(self, width: int, ctx: RenderContext | None = None) -> int:
        return len(self.positions(width, ctx))

    def focused_span(self, width: int, ctx: RenderContext | None = None) -> tuple[int, int] | None:
        """Content line range ``[start, end)`` of the focused unit."""
        if self.focus_index is None:
            return None
        positions = self.positions(width, ctx)
        if not positions:
            return None
        pos = positions[min(max(self.focus_index, 0), len(positions) - 1)]
        return pos.y, pos.bottom

    # --- Rendering ---

    def build(self, width: int, ctx: RenderContext | None = None) -> list[DocumentElement]:
        """Build the document with the stored focus resolved at *width*."""
        context = self._context(width, ctx)
        if self.focus_index is not None:
            context = context.with_focus(self.focus_index, self.document.focusable_positions(context))
        return self.document.build(context)

    def render(self, area: Rect, buf: Buffer, ctx: RenderContext) -> None:
        if area.is_empty():
            return

        elements = self.build(area.width, ctx)
        total = content_height(elements)
        offset = min(max(self.scroll_offset, 0), max(0, total - area.height))

        top = 0
        for element in elements:
            height = element.height()
            start, top = top, top + height
            if top <= offset or height == 0:
                continue
            screen_y = start - offset
            if screen_y >= area.height:
                break

            if screen_y >= 0 and screen_y + height <= area.height:
                render_document_element(element, Rect(area.x, area.y + screen_y, area.width, height), buf, ctx)
                continue

            # Cropped at the top or bottom edge: draw in full off-screen and
            # copy the visible rows.
            scratch = Buffer(Rect(0, 0, area.width, height))
            scratch.set_style(scratch.area, ctx.base_style())
            render_document_element(element, scratch.area, scratch, ctx)
            skip = max(0, -screen_y)
            dest_y = area.y + max(0, screen_y)
            buf.blit(scratch, area.x, dest_y, src_row=skip, max_rows=area.bottom - dest_y)
