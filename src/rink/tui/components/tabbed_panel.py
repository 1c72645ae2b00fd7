"""Tab bar plus the active tab's content."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from rink.tui.buffer import Buffer, Rect
from rink.tui.element import EMPTY, Element, Length, Min, WidgetElement, vertical

if TYPE_CHECKING:
    from rink.tui.config import RenderContext

TAB_BAR_HEIGHT = 2


@dataclass(frozen=True)
class TabBar:
    """``Scores │ Standings │ Settings`` over a rule; the active label is emphasised.

    When the bar itself has keyboard focus the active label uses the
    selection style instead.  When the content below has focus the bar is
    drawn dimmed.
    """

    labels: tuple[str, ...]
    active_index: int
    focused: bool = False
    dimmed: bool = False

    def preferred_height(self) -> int:
        return TAB_BAR_HEIGHT

    def render(self, area: Rect, buf: Buffer, ctx: RenderContext) -> None:
        if area.is_empty():
            return
        ctx = ctx.with_focus(not self.dimmed)
        base = ctx.base_style()
        separator = f" {ctx.box_chars.tab_separator} "

        x = area.x + 1
        for i, label in enumerate(self.labels):
            if i:
                x = buf.set_string(x, area.y, separator, base.patch(ctx.boxchar_style()), max_width=area.right - x)
            if i == self.active_index:
                style = ctx.selection_style() if self.focused else ctx.emphasis_style()
            else:
                style = ctx.text_style()
            x = buf.set_string(x, area.y, label, base.patch(style), max_width=area.right - x)

        if area.height >= 2:
            buf.set_string(area.x, area.y + 1, ctx.box_chars.horizontal * area.width, base.patch(ctx.boxchar_style()))


@dataclass
class TabItem:
    key: str
    label: str
    content: Element = field(default=EMPTY)


@dataclass
class TabbedPanelProps:
    active_key: str
    tabs: list[TabItem]
    focused: bool = False
    content_has_focus: bool = False


class TabbedPanel:
    def init_state(self, props: TabbedPanelProps) -> None:
        return None

    def view(self, props: TabbedPanelProps, state: None = None) -> Element:
        keys = [tab.key for tab in props.tabs]
        active = keys.index(props.active_key) if props.active_key in keys else 0
        bar = TabBar(
            tuple(tab.label for tab in props.tabs),
            active,
            focused=props.focused,
            dimmed=props.content_has_focus,
        )
        content = props.tabs[active].content if props.tabs else EMPTY
        return vertical([Length(TAB_BAR_HEIGHT), Min(0)], [WidgetElement(bar), content])
