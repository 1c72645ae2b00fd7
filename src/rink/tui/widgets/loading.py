"""Pulsing-dots placeholder shown while data is loading."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from rink.tui.buffer import Buffer, Rect
from rink.tui.style import Modifier

if TYPE_CHECKING:
    from rink.tui.config import RenderContext

DOT_COUNT = 3

_UNICODE_FRAMES = ("●○○", "○●○", "○○●", "○●○")
_ASCII_FRAMES = ("*..", ".*.", "..*", ".*.")


def loading_animation_text(frame: int, use_unicode: bool = True) -> str:
    frames = _UNICODE_FRAMES if use_unicode else _ASCII_FRAMES
    return frames[frame % len(frames)]


@dataclass(frozen=True)
class LoadingAnimation:
    """Dots centred in the area, one frame per tick."""

    frame: int = 0

    def preferred_height(self) -> int:
        return 1

    def preferred_width(self) -> int:
        return DOT_COUNT

    def render(self, area: Rect, buf: Buffer, ctx: RenderContext) -> None:
        if area.is_empty():
            return
        x = area.x + max(0, area.width - DOT_COUNT) // 2
        y = area.y + area.height // 2
        style = ctx.text_style().patch(ctx.base_style()).add(Modifier.BOLD)
        buf.set_string(x, y, loading_animation_text(self.frame, ctx.use_unicode), style, max_width=area.right - x)
