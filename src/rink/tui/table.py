"""Column-aligned statistics table with a focusable row.

Layout (``SELECTOR_WIDTH`` columns for the focus marker, then every column
followed by a two-column gap)::

      #   Player                Pos    G
      ──────────────────────────────────
    ▶ 34  A. Matthews           C      2
      16  M. Marner             R      0
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import TYPE_CHECKING, Any, Callable, Sequence, Union

from rink.tui.buffer import Buffer, Rect
from rink.tui.navigation import DocumentTarget, LinkTarget, PlayerDetailRef, TeamDetailRef
from rink.tui.utils import align_text

if TYPE_CHECKING:
    from rink.tui.config import RenderContext
    from rink.tui.style import Style

SELECTOR_WIDTH = 2
COLUMN_GAP = 2


class Alignment(Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


# ---------------------------------------------------------------------------
# Cell values
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class TextCell:
    """Plain cell; never highlighted."""

    text: str

    def display_text(self) -> str:
        return self.text

    def receives_selection_style(self) -> bool:
        return False

    def link_target(self) -> LinkTarget | None:
        return None


@dataclass(frozen=True)
class StyledTextCell:
    """Non-link cell that still takes the selection style in a focused row."""

    text: str

    def display_text(self) -> str:
        return self.text

    def receives_selection_style(self) -> bool:
        return True

    def link_target(self) -> LinkTarget | None:
        return None


@dataclass(frozen=True)
class PlayerLinkCell:
    display: str
    player_id: int
    sweater_number: int | None = None
    last_name: str = ""

    def display_text(self) -> str:
        return self.display

    def receives_selection_style(self) -> bool:
        return True

    def link_target(self) -> LinkTarget | None:
        return DocumentTarget(
            PlayerDetailRef(
                player_id=self.player_id,
                sweater_number=self.sweater_number,
                last_name=self.last_name or self.display,
            )
        )


@dataclass(frozen=True)
class TeamLinkCell:
    display: str
    abbrev: str

    def display_text(self) -> str:
        return self.display

    def receives_selection_style(self) -> bool:
        return True

    def link_target(self) -> LinkTarget | None:
        return DocumentTarget(TeamDetailRef(self.abbrev))


CellValue = Union[TextCell, StyledTextCell, PlayerLinkCell, TeamLinkCell]


@dataclass(frozen=True)
class ColumnDef:
    """One table column: header, fixed width, alignment and a cell extractor."""

    header: str
    width: int
    align: Alignment
    cell_fn: Callable[[Any], CellValue]


def format_cell(text: str, width: int, align: Alignment) -> str:
    """Truncate or pad *text* to exactly *width* columns."""
    return align_text(text, width, align.value)


# ---------------------------------------------------------------------------
# TableWidget
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class TableWidget:
    name: str
    column_headers: tuple[str, ...]
    column_widths: tuple[int, ...]
    column_aligns: tuple[Alignment, ...]
    cell_data: tuple[tuple[CellValue, ...], ...]
    focused_row: int | None = None

    @classmethod
    def from_data(
        cls,
        columns: Sequence[ColumnDef],
        rows: Sequence[Any],
        name: str = "",
    ) -> TableWidget:
        """Extract every cell up front so rendering never touches row data."""
        return cls(
            name=name,
            column_headers=tuple(c.header for c in columns),
            column_widths=tuple(c.width for c in columns),
            column_aligns=tuple(c.align for c in columns),
            cell_data=tuple(tuple(c.cell_fn(row) for c in columns) for row in rows),
        )

    def with_focused_row(self, row: int | None) -> TableWidget:
        if row is not None and not 0 <= row < self.row_count():
            row = None
        return replace(self, focused_row=row)

    def row_count(self) -> int:
        return len(self.cell_data)

    def content_width(self) -> int:
        n = len(self.column_widths)
        return sum(self.column_widths) + max(0, n - 1) * COLUMN_GAP

    def preferred_height(self) -> int:
        return 2 + self.row_count()

    def preferred_width(self) -> int:
        return SELECTOR_WIDTH + self.content_width()

    def row_target(self, row: int) -> LinkTarget | None:
        """Link target of the first link-bearing cell in *row*."""
        if not 0 <= row < self.row_count():
            return None
        for cell in self.cell_data[row]:
            target = cell.link_target()
            if target is not None:
                return target
        return None

    # --- Rendering ---

    def _cell_style(self, row_focused: bool, cell: CellValue, ctx: RenderContext) -> Style:
        if row_focused and cell.receives_selection_style():
            return ctx.base_style().patch(ctx.selection_style())
        return ctx.text_style()

    def render(self, area: Rect, buf: Buffer, ctx: RenderContext) -> None:
        if area.is_empty():
            return

        buf.set_style(area, ctx.base_style())
        bc = ctx.box_chars
        y = area.y

        if y < area.bottom:
            header_style = ctx.heading_style(1)
            x = area.x + SELECTOR_WIDTH
            for header, width, align in zip(self.column_headers, self.column_widths, self.column_aligns):
                buf.set_string(x, y, format_cell(header, width, align), header_style, max_width=area.right - x)
                x += width + COLUMN_GAP
            y += 1

        if y < area.bottom:
            rule = " " * SELECTOR_WIDTH + bc.horizontal * self.content_width()
            buf.set_string(area.x, y, rule, ctx.boxchar_style(), max_width=area.width)
            y += 1

        for row_idx, cells in enumerate(self.cell_data):
            if y >= area.bottom:
                break
            focused = self.focused_row == row_idx
            selector = f"{bc.selector} " if focused else " " * SELECTOR_WIDTH
            buf.set_string(area.x, y, selector, ctx.boxchar_style(), max_width=area.width)

            x = area.x + SELECTOR_WIDTH
            for col_idx, cell in enumerate(cells):
                width = self.column_widths[col_idx]
                align = self.column_aligns[col_idx]
                style = self._cell_style(focused, cell, ctx)
                buf.set_string(
                    x, y, format_cell(cell.display_text(), width, align), style, max_width=area.right - x
                )

                # Join consecutive highlighted cells into one bar
                if col_idx + 1 < len(cells):
                    styled = focused and cell.receives_selection_style()
                    next_styled = focused and cells[col_idx + 1].receives_selection_style()
                    if styled and next_styled:
                        gap_x = x + width
                        buf.set_string(gap_x, y, " " * COLUMN_GAP, style, max_width=area.right - gap_x)

                x += width + COLUMN_GAP
            y += 1
