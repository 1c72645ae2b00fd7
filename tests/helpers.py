"""Test helpers shared across modules."""

from __future__ import annotations

from typing import Callable

from rink.tui.buffer import Buffer
from rink.tui.config import RenderContext
from rink.tui.document import Document, DocumentElement, FocusContext
from rink.tui.document.render import render_document_element


class StubDocument(Document):
    """Document whose elements come from a build function."""

    def __init__(self, build_fn: Callable[[FocusContext], list[DocumentElement]], doc_id: str = "stub") -> None:
        self._build_fn = build_fn
        self._id = doc_id

    def build(self, focus: FocusContext) -> list[DocumentElement]:
        return self._build_fn(focus)

    def title(self) -> str:
        return "Stub"

    def id(self) -> str:
        return self._id


def render_element_lines(element: DocumentElement, width: int, height: int, ctx: RenderContext | None = None) -> list[str]:
    buf = Buffer.empty(width, height)
    render_document_element(element, buf.area, buf, ctx or RenderContext())
    return buf.to_lines()


def selector_rows(lines: list[str], selector: str = "▶") -> list[int]:
    """Indices of the lines showing the focus marker."""
    return [i for i, line in enumerate(lines) if selector in line]
