"""Focus identities and the per-build focus context."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Sequence, Union

from rink.tui.box_chars import BoxChars

if TYPE_CHECKING:
    from rink.tui.config import RenderContext
    from rink.tui.navigation import LinkTarget


@dataclass(frozen=True)
class LinkId:
    key: str


@dataclass(frozen=True)
class TableRowId:
    table: str
    row: int


FocusableId = Union[LinkId, TableRowId]


@dataclass(frozen=True)
class FocusablePosition:
    """One focusable unit: its identity, first line and line count."""

    id: FocusableId
    y: int
    height: int = 1
    target: LinkTarget | None = field(default=None, compare=False)

    @property
    def bottom(self) -> int:
        return self.y + self.height


@dataclass(frozen=True)
class FocusContext:
    """Environment a document is built against.

    ``available_width`` is ``None`` before the first layout pass.
    ``focused_id`` is the unit selected by ``focus_index``; it is resolved
    from a flat index by :meth:`with_focus`.
    """

    available_width: int | None = None
    use_unicode: bool = True
    box_chars: BoxChars = field(default_factory=BoxChars.unicode)
    focus_index: int | None = None
    focused_id: FocusableId | None = None

    @classmethod
    def for_render(cls, ctx: RenderContext, width: int | None) -> FocusContext:
        return cls(available_width=width, use_unicode=ctx.use_unicode, box_chars=ctx.box_chars)

    def unfocused(self) -> FocusContext:
        return replace(self, focus_index=None, focused_id=None)

    def with_focus(self, index: int | None, positions: Sequence[FocusablePosition]) -> FocusContext:
        """Focus the unit at flat *index*, clamped into ``positions``."""
        if index is None or not positions:
            return self.unfocused()
        index = min(max(index, 0), len(positions) - 1)
        return replace(self, focus_index=index, focused_id=positions[index].id)

    def is_link_focused(self, key: str) -> bool:
        return self.focused_id == LinkId(key)

    def focused_table_row(self, table: str) -> int | None:
        fid = self.focused_id
        if isinstance(fid, TableRowId) and fid.table == table:
            return fid.row
        return None
