"""Content area showing one document, or a loading placeholder."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from rink.tui.buffer import Buffer, Rect
from rink.tui.document import Document, DocumentView
from rink.tui.widgets.loading import LoadingAnimation

if TYPE_CHECKING:
    from rink.tui.config import RenderContext


@dataclass(frozen=True)
class DocumentPanel:
    """Renders *document* through a fresh ``DocumentView``.

    A panel without a document (data not fetched yet) or one whose data is
    still loading shows the loading animation instead.
    """

    document: Document | None
    focus_index: int | None = None
    scroll_offset: int = 0
    focused: bool = True
    loading: bool = False
    animation_frame: int = 0

    def render(self, area: Rect, buf: Buffer, ctx: RenderContext) -> None:
        if area.is_empty():
            return
        ctx = ctx.with_focus(self.focused)
        if self.document is None or self.loading:
            LoadingAnimation(self.animation_frame).render(area, buf, ctx)
            return
        view = DocumentView(self.document, self.focus_index, self.scroll_offset)
        view.render(area, buf, ctx)
