"""Two-line status bar: a rule, then the status message or key hints."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from rink.tui.buffer import Buffer, Rect
from rink.tui.state import SystemState
from rink.tui.utils import visible_width

if TYPE_CHECKING:
    from rink.tui.config import RenderContext

STATUS_BAR_HEIGHT = 2

KEY_HINTS = "←/→ tabs  ↑/↓ select  Enter open  Esc back  q quit"
ASCII_KEY_HINTS = "left/right tabs  up/down select  Enter open  Esc back  q quit"


@dataclass(frozen=True)
class StatusBar:
    system: SystemState

    def preferred_height(self) -> int:
        return STATUS_BAR_HEIGHT

    def refresh_text(self) -> str:
        if self.system.last_refresh is None:
            return ""
        return f"Last refresh: {self.system.last_refresh.strftime(self.system.config.time_format)}"

    def render(self, area: Rect, buf: Buffer, ctx: RenderContext) -> None:
        if area.is_empty():
            return
        base = ctx.base_style()
        buf.set_string(area.x, area.y, ctx.box_chars.horizontal * area.width, base.patch(ctx.boxchar_style()))
        if area.height < 2:
            return

        y = area.y + 1
        right = self.refresh_text()
        right_width = visible_width(right)
        if right and right_width + 2 <= area.width:
            buf.set_string(area.right - right_width - 1, y, right, base.patch(ctx.muted_style()))
            left_limit = area.width - right_width - 2
        else:
            left_limit = area.width - 1

        if self.system.status_message:
            style = ctx.error_style() if self.system.status_is_error else ctx.text_style()
            message = self.system.status_message
        else:
            style = ctx.muted_style()
            message = KEY_HINTS if ctx.use_unicode else ASCII_KEY_HINTS
        buf.set_string(area.x + 1, y, message, base.patch(style), max_width=max(0, left_limit))
