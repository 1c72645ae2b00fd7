"""Fixed-size character grid that every frame is drawn into.

A ``Buffer`` covers a ``Rect`` and holds one ``Cell`` per column/row.  Wide
glyphs occupy two cells: the first carries the grapheme, the second is left
with an empty symbol so that ``to_lines`` reproduces the text exactly.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from rink.tui.style import Style
from rink.tui.utils import iter_graphemes


@dataclass(frozen=True)
class Rect:
    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    @property
    def area(self) -> int:
        return self.width * self.height

    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0

    def intersection(self, other: Rect) -> Rect:
        x = max(self.x, other.x)
        y = max(self.y, other.y)
        right = min(self.right, other.right)
        bottom = min(self.bottom, other.bottom)
        return Rect(x, y, max(0, right - x), max(0, bottom - y))

    def inner(self, margin_x: int = 1, margin_y: int = 1) -> Rect:
        """Shrink the rect by a margin on every side."""
        return Rect(
            self.x + margin_x,
            self.y + margin_y,
            max(0, self.width - 2 * margin_x),
            max(0, self.height - 2 * margin_y),
        )

    def contains(self, x: int, y: int) -> bool:
        return self.x <= x < self.right and self.y <= y < self.bottom


@dataclass
class Cell:
    symbol: str = " "
    style: Style = field(default_factory=Style)

    def reset(self) -> None:
        self.symbol = " "
        self.style = Style()


class Buffer:
    """A grid of cells covering ``area``."""

    def __init__(self, area: Rect) -> None:
        self.area = area
        self._cells: list[Cell] = [Cell() for _ in range(max(0, area.area))]

    @classmethod
    def empty(cls, width: int, height: int) -> Buffer:
        return cls(Rect(0, 0, width, height))

    # ------------------------------------------------------------------
    # Cell access
    # ------------------------------------------------------------------

    def _index(self, x: int, y: int) -> int | None:
        if not self.area.contains(x, y):
            return None
        return (y - self.area.y) * self.area.width + (x - self.area.x)

    def cell(self, x: int, y: int) -> Cell | None:
        """Return the cell at absolute coordinates, or ``None`` if outside."""
        idx = self._index(x, y)
        if idx is None:
            return None
        return self._cells[idx]

    # ------------------------------------------------------------------
    # Drawing
    # ------------------------------------------------------------------

    def set_string(
        self,
        x: int,
        y: int,
        text: str,
        style: Style | None = None,
        max_width: int | None = None,
    ) -> int:
        """Write *text* starting at ``(x, y)`` and return the next free column.

        Drawing stops at the right edge of the buffer or after *max_width*
        columns, whichever comes first.  A wide glyph that does not fit
        entirely is not drawn.  The style is patched over each cell's
        existing style.
        """
        if y < self.area.y or y >= self.area.bottom:
            return x
        limit = self.area.right
        if max_width is not None:
            limit = min(limit, x + max(0, max_width))

        col = x
        for g, w in iter_graphemes(text):
            if w == 0:
                continue
            if col + w > limit:
                break
            if col >= self.area.x:
                cell = self.cell(col, y)
                if cell is not None:
                    cell.symbol = g
                    if style is not None:
                        cell.style = cell.style.patch(style)
                for extra in range(1, w):
                    trailing = self.cell(col + extra, y)
                    if trailing is not None:
                        trailing.symbol = ""
                        if style is not None:
                            trailing.style = trailing.style.patch(style)
            col += w
        return col

    def set_style(self, area: Rect, style: Style) -> None:
        """Patch *style* onto every cell of *area* (clipped to the buffer)."""
        clipped = self.area.intersection(area)
        for y in range(clipped.y, clipped.bottom):
            for x in range(clipped.x, clipped.right):
                cell = self.cell(x, y)
                if cell is not None:
                    cell.style = cell.style.patch(style)

    def blit(
        self,
        source: Buffer,
        x: int,
        y: int,
        src_row: int = 0,
        max_rows: int | None = None,
    ) -> None:
        """Copy rows of *source* (starting at *src_row*) to ``(x, y)``.

        At most *max_rows* rows are copied.  Rows and columns falling outside
        this buffer are dropped.
        """
        end = source.area.height
        if max_rows is not None:
            end = min(end, src_row + max(0, max_rows))
        for row in range(max(0, src_row), end):
            dest_y = y + row - src_row
            if dest_y >= self.area.bottom:
                break
            if dest_y < self.area.y:
                continue
            for col in range(source.area.width):
                src = source.cell(source.area.x + col, source.area.y + row)
                dest = self.cell(x + col, dest_y)
                if src is None or dest is None:
                    continue
                dest.symbol = src.symbol
                dest.style = src.style

    def reset(self) -> None:
        for cell in self._cells:
            cell.reset()

    # ------------------------------------------------------------------
    # Inspection
    # ------------------------------------------------------------------

    def to_lines(self, strip: bool = False) -> list[str]:
        """Return the buffer content as one string per row."""
        lines: list[str] = []
        width = self.area.width
        for row in range(self.area.height):
            start = row * width
            line = "".join(c.symbol for c in self._cells[start:start + width])
            lines.append(line.rstrip() if strip else line)
        return lines

    def is_blank(self) -> bool:
        return all(c.symbol == " " and c.style == Style() for c in self._cells)

    def __repr__(self) -> str:
        return f"Buffer({self.area!r})"
