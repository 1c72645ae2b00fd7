"""Breadcrumb line shown above a stacked document.

Renders the navigation path (``" Scores ▶ TOR:3-BOS:2 ▶ #87 Crosby"``) with a
one-column left margin, followed by a full-width divider rule.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from rink.tui.buffer import Buffer, Rect
from rink.tui.navigation import DocumentStackEntry, Tab
from rink.tui.style import Modifier

if TYPE_CHECKING:
    from rink.tui.config import RenderContext

LEFT_MARGIN = 1


@dataclass(frozen=True)
class BreadcrumbWidget:
    current_tab: Tab
    entries: tuple[DocumentStackEntry, ...] = ()

    def labels(self) -> list[str]:
        return [self.current_tab.label] + [entry.document.label() for entry in self.entries]

    def text(self, separator: str) -> str:
        return f" {separator} ".join(self.labels())

    def preferred_height(self) -> int:
        return 0 if not self.entries else 2

    def render(self, area: Rect, buf: Buffer, ctx: RenderContext) -> None:
        if area.is_empty():
            return

        label_style = ctx.base_style().patch(ctx.text_style()).add(Modifier.BOLD)
        separator_style = ctx.base_style().patch(ctx.boxchar_style())
        separator = f" {ctx.box_chars.breadcrumb_separator} "

        x = area.x + LEFT_MARGIN
        for i, label in enumerate(self.labels()):
            if i:
                x = buf.set_string(x, area.y, separator, separator_style, max_width=area.right - x)
            x = buf.set_string(x, area.y, label, label_style, max_width=area.right - x)

        if area.height >= 2:
            buf.set_string(area.x, area.y + 1, ctx.box_chars.horizontal * area.width, separator_style)
