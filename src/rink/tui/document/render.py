"""Drawing document elements into a buffer.

:func:`render_document_element` is a pure function of the element and the
target area: it never mutates the element, clips to the area, and draws
nothing into an empty area.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rink.tui.buffer import Buffer, Rect
from rink.tui.document.elements import (
    TEAM_BOXSCORE_WIDTH,
    BigScoreElement,
    DocumentElement,
    Group,
    Heading,
    Link,
    Row,
    RowAlignment,
    ScoreBoxElement,
    SectionTitle,
    Separator,
    Spacer,
    Table,
    TeamBoxscore,
    Text,
)
from rink.tui.style import Modifier
from rink.tui.table import TableWidget
from rink.tui.utils import visible_width

if TYPE_CHECKING:
    from rink.tui.config import RenderContext
    from rink.tui.style import Style


def render_document_element(element: DocumentElement, area: Rect, buf: Buffer, ctx: RenderContext) -> None:
    area = area.intersection(buf.area)
    if area.is_empty():
        return

    if isinstance(element, Text):
        render_text(element.lines(), element.style, area, buf, ctx)
    elif isinstance(element, Heading):
        render_heading(element.level, element.content, area, buf, ctx)
    elif isinstance(element, SectionTitle):
        render_section_title(element.content, element.underline, area, buf, ctx)
    elif isinstance(element, Link):
        render_link(element.display, element.focused, area, buf, ctx)
    elif isinstance(element, Separator):
        render_separator(area, buf, ctx)
    elif isinstance(element, Spacer):
        return
    elif isinstance(element, Group):
        render_group(element.children, element.style, area, buf, ctx)
    elif isinstance(element, Row):
        render_row(element.children, element.gap, element.alignment, area, buf, ctx)
    elif isinstance(element, Table):
        element.widget.render(area, buf, ctx)
    elif isinstance(element, ScoreBoxElement):
        element.score_box.render(area, buf, ctx, focused=element.focused)
    elif isinstance(element, TeamBoxscore):
        render_team_boxscore(element, area, buf, ctx)
    elif isinstance(element, BigScoreElement):
        element.big_score.render(area, buf, ctx)
    else:
        raise TypeError(f"not a document element: {element!r}")


# ---------------------------------------------------------------------------
# Containers
# ---------------------------------------------------------------------------


def row_layout(
    children: tuple[DocumentElement, ...],
    gap: int,
    alignment: RowAlignment,
    width: int,
) -> list[tuple[int, int]]:
    """Return ``(x offset, width)`` for each child of a row of *width* columns.

    Children that all report a preferred width keep it; otherwise the width
    is shared equally after subtracting the gaps.
    """
    n = len(children)
    if n == 0 or width <= 0:
        return []

    preferred = [c.preferred_width() for c in children]
    if any(w is None for w in preferred):
        child_width = max(0, width - gap * (n - 1)) // n
        return [(i * (child_width + gap), child_width) for i in range(n)]

    widths: list[int] = [w for w in preferred if w is not None]
    total = sum(widths)
    x = 0
    if alignment is RowAlignment.SPREAD and n > 1:
        gap = max(gap, (width - total) // (n - 1))
    elif alignment is RowAlignment.CENTER:
        x = max(0, (width - total - gap * (n - 1)) // 2)

    layout = []
    for w in widths:
        layout.append((x, w))
        x += w + gap
    return layout


def render_row(
    children: tuple[DocumentElement, ...],
    gap: int,
    alignment: RowAlignment,
    area: Rect,
    buf: Buffer,
    ctx: RenderContext,
) -> None:
    for child, (dx, w) in zip(children, row_layout(children, gap, alignment, area.width)):
        child_area = Rect(area.x + dx, area.y, w, area.height).intersection(area)
        render_document_element(child, child_area, buf, ctx)


def render_group(
    children: tuple[DocumentElement, ...],
    style: Style | None,
    area: Rect,
    buf: Buffer,
    ctx: RenderContext,
) -> None:
    offset = 0
    for child in children:
        if offset >= area.height:
            break
        h = child.height()
        render_document_element(child, Rect(area.x, area.y + offset, area.width, min(h, area.height - offset)), buf, ctx)
        offset += h

    if style is not None:
        buf.set_style(Rect(area.x, area.y, area.width, min(area.height, offset)), style)


# ---------------------------------------------------------------------------
# Leaves
# ---------------------------------------------------------------------------


def render_text(lines: list[str], style: Style | None, area: Rect, buf: Buffer, ctx: RenderContext) -> None:
    text_style = style if style is not None else ctx.text_style()
    for i, line in enumerate(lines[: area.height]):
        buf.set_string(area.x, area.y + i, line, text_style, max_width=area.width)


def render_heading(level: int, content: str, area: Rect, buf: Buffer, ctx: RenderContext) -> None:
    buf.set_string(area.x, area.y, content, ctx.heading_style(level), max_width=area.width)
    if level == 1 and area.height > 1:
        rule = ctx.box_chars.double_horizontal * min(area.width, len(content))
        buf.set_string(area.x, area.y + 1, rule, ctx.muted_style(), max_width=area.width)


def render_section_title(content: str, underline: bool, area: Rect, buf: Buffer, ctx: RenderContext) -> None:
    buf.set_string(area.x, area.y, content, ctx.emphasis_style(), max_width=area.width)
    if underline and area.height > 1:
        rule = ctx.box_chars.double_horizontal * len(content)
        buf.set_string(area.x, area.y + 1, rule, ctx.muted_style(), max_width=area.width)


def render_link(display: str, focused: bool, area: Rect, buf: Buffer, ctx: RenderContext) -> None:
    base = ctx.text_style()
    if focused:
        prefix = f"{ctx.box_chars.selector} "
        link_style = base.add(Modifier.BOLD)
    else:
        prefix = "  "
        link_style = base
    x = buf.set_string(area.x, area.y, prefix, base, max_width=area.width)
    buf.set_string(x, area.y, display, link_style, max_width=area.right - x)


def render_separator(area: Rect, buf: Buffer, ctx: RenderContext) -> None:
    buf.set_string(area.x, area.y, ctx.box_chars.horizontal * area.width, ctx.muted_style(), max_width=area.width)


# ---------------------------------------------------------------------------
# Team boxscore
# ---------------------------------------------------------------------------


def render_team_boxscore(element: TeamBoxscore, area: Rect, buf: Buffer, ctx: RenderContext) -> None:
    """Bordered per-role tables::

        ╒══╡ Team - Forwards ╞══════════╕
        │                               │
        │  (table)                      │
        │                               │
        ╞══╡ Team - Defense ╞═══════════╡
        ...
        ╘═══════════════════════════════╛
    """
    bc = ctx.box_chars
    border = ctx.muted_style()
    width = min(TEAM_BOXSCORE_WIDTH, area.width)
    inner = max(0, width - 2)

    def side_borders(y: int) -> None:
        if y >= area.bottom:
            return
        buf.set_string(area.x, y, bc.vertical, border)
        if width > 1:
            buf.set_string(area.x + width - 1, y, bc.vertical, border)

    y = area.y
    for i, (section, table) in enumerate(element.sections()):
        if y >= area.bottom:
            return
        _section_header(area.x, y, width, f"{element.team_name} - {section}", i == 0, buf, ctx)
        y += 1
        side_borders(y)
        y += 1
        height = table.preferred_height()
        for row in range(height):
            side_borders(y + row)
        _render_table_clipped(table, Rect(area.x + 1, y, inner, height), area, buf, ctx)
        y += height
        side_borders(y)
        y += 1

    if y < area.bottom:
        buf.set_string(area.x, y, bc.mixed_dh_bottom_left, border, max_width=width)
        buf.set_string(area.x + 1, y, bc.double_horizontal * inner, border, max_width=inner)
        if width > 1:
            buf.set_string(area.x + width - 1, y, bc.mixed_dh_bottom_right, border)


def _render_table_clipped(table: TableWidget, table_area: Rect, area: Rect, buf: Buffer, ctx: RenderContext) -> None:
    clipped = table_area.intersection(area)
    if clipped.is_empty():
        return
    table.render(clipped, buf, ctx)


def _section_header(
    x: int,
    y: int,
    width: int,
    title: str,
    is_first: bool,
    buf: Buffer,
    ctx: RenderContext,
) -> None:
    bc = ctx.box_chars
    border = ctx.muted_style()
    if is_first:
        left, right = bc.mixed_dh_top_left, bc.mixed_dh_top_right
    else:
        left, right = bc.mixed_dh_left_t, bc.mixed_dh_right_t

    prefix = left + bc.double_horizontal * 2 + bc.mixed_dh_right_t
    limit = x + width
    col = buf.set_string(x, y, prefix, border, max_width=width)
    col = buf.set_string(col, y, f" {title} ", ctx.text_style(), max_width=max(0, limit - col))
    col = buf.set_string(col, y, bc.mixed_dh_left_t, border, max_width=max(0, limit - col))
    trailing = max(0, limit - 1 - col)
    buf.set_string(col, y, bc.double_horizontal * trailing, border, max_width=trailing)
    if width > visible_width(prefix):
        buf.set_string(limit - 1, y, right, border)
