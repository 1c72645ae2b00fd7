"""Tests for rink.tui.table -- column layout, focus and row targets."""

from __future__ import annotations

from dataclasses import dataclass

from rink.tui.buffer import Buffer, Rect
from rink.tui.navigation import DocumentTarget, PlayerDetailRef, TeamDetailRef
from rink.tui.style import Modifier
from rink.tui.table import (
    Alignment,
    ColumnDef,
    PlayerLinkCell,
    StyledTextCell,
    TableWidget,
    TeamLinkCell,
    TextCell,
    format_cell,
)


@dataclass
class _Skater:
    number: int
    name: str
    player_id: int
    goals: int


def _columns() -> list[ColumnDef]:
    return [
        ColumnDef("#", 2, Alignment.RIGHT, lambda s: StyledTextCell(str(s.number))),
        ColumnDef("Name", 6, Alignment.LEFT, lambda s: PlayerLinkCell(s.name, s.player_id, s.number, s.name)),
        ColumnDef("G", 2, Alignment.RIGHT, lambda s: TextCell(str(s.goals))),
    ]


def _table(focused_row: int | None = None) -> TableWidget:
    rows = [_Skater(34, "Auston", 8479318, 2), _Skater(16, "Mitch", 8478483, 0)]
    return TableWidget.from_data(_columns(), rows, name="skaters").with_focused_row(focused_row)


def _render(table: TableWidget, ctx, width: int = 16, height: int = 4) -> Buffer:
    buf = Buffer.empty(width, height)
    table.render(buf.area, buf, ctx)
    return buf


# ---------------------------------------------------------------------------
# Cells
# ---------------------------------------------------------------------------


class TestCells:
    def test_text_cell_is_never_highlighted(self):
        assert not TextCell("x").receives_selection_style()
        assert TextCell("x").link_target() is None

    def test_styled_text_cell_takes_selection_without_link(self):
        cell = StyledTextCell("34")
        assert cell.receives_selection_style()
        assert cell.link_target() is None

    def test_player_link_cell_target(self):
        cell = PlayerLinkCell("A. Matthews", 8479318, 34, "Matthews")
        assert cell.link_target() == DocumentTarget(PlayerDetailRef(8479318, 34, "Matthews"))

    def test_player_link_cell_falls_back_to_display_name(self):
        cell = PlayerLinkCell("Matthews", 8479318)
        assert cell.link_target() == DocumentTarget(PlayerDetailRef(8479318, None, "Matthews"))

    def test_team_link_cell_target(self):
        assert TeamLinkCell("Toronto", "TOR").link_target() == DocumentTarget(TeamDetailRef("TOR"))


class TestFormatCell:
    def test_pads_by_alignment(self):
        assert format_cell("ab", 4, Alignment.LEFT) == "ab  "
        assert format_cell("ab", 4, Alignment.RIGHT) == "  ab"
        assert format_cell("ab", 4, Alignment.CENTER) == " ab "

    def test_truncates(self):
        assert format_cell("abcdef", 3, Alignment.RIGHT) == "abc"


# ---------------------------------------------------------------------------
# TableWidget
# ---------------------------------------------------------------------------


class TestTableWidget:
    def test_from_data_extracts_cells(self):
        table = _table()
        assert table.column_headers == ("#", "Name", "G")
        assert table.row_count() == 2
        assert table.cell_data[1][1].display_text() == "Mitch"

    def test_sizes(self):
        table = _table()
        assert table.content_width() == 2 + 6 + 2 + 2 * 2
        assert table.preferred_width() == 2 + table.content_width()
        assert table.preferred_height() == 4

    def test_with_focused_row_out_of_range_clears_focus(self):
        assert _table(5).focused_row is None
        assert _table(-1).focused_row is None
        assert _table(1).focused_row == 1

    def test_row_target_uses_first_link_cell(self):
        target = _table().row_target(0)
        assert target == DocumentTarget(PlayerDetailRef(8479318, 34, "Auston"))

    def test_row_target_out_of_range(self):
        assert _table().row_target(2) is None

    def test_row_without_links_has_no_target(self):
        columns = [ColumnDef("X", 3, Alignment.LEFT, lambda r: TextCell(r))]
        table = TableWidget.from_data(columns, ["a"])
        assert table.row_target(0) is None


class TestTableRender:
    def test_layout(self, ctx):
        lines = _render(_table(1), ctx).to_lines()
        assert lines[0] == "  " + " #" + "  " + "Name  " + "  " + " G"
        assert lines[1] == "  " + "─" * 14
        assert lines[2] == "  " + "34" + "  " + "Auston" + "  " + " 2"
        assert lines[3] == "▶ " + "16" + "  " + "Mitch " + "  " + " 0"

    def test_unfocused_has_no_selector(self, ctx):
        lines = _render(_table(), ctx).to_lines()
        assert not any("▶" in line for line in lines)

    def test_ascii_glyphs(self, ascii_ctx):
        lines = _render(_table(0), ascii_ctx).to_lines()
        assert lines[1] == "  " + "-" * 14
        assert lines[2].startswith("> ")

    def test_selection_style_on_focused_row(self, ctx):
        buf = _render(_table(1), ctx)
        # number and player cells, and the gap joining them, are highlighted
        for x in range(2, 12):
            assert buf.cell(x, 3).style.has(Modifier.REVERSED), x
        # plain stat cell is not
        assert not buf.cell(14, 3).style.has(Modifier.REVERSED)
        # unfocused row is not
        assert not buf.cell(2, 2).style.has(Modifier.REVERSED)

    def test_header_is_bold(self, ctx):
        buf = _render(_table(), ctx)
        assert buf.cell(6, 0).style.has(Modifier.BOLD)

    def test_short_area_drops_trailing_rows(self, ctx):
        lines = _render(_table(), ctx, height=3).to_lines()
        assert len(lines) == 3
        assert "Auston" in lines[2]

    def test_zero_area_draws_nothing(self, ctx):
        buf = Buffer.empty(16, 4)
        _table(0).render(Rect(0, 0, 0, 4), buf, ctx)
        assert buf.is_blank()
