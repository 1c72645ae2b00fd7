"""Compact bordered box showing one game's status and score."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Union

from rink.tui.buffer import Buffer, Rect
from rink.tui.utils import align_text, truncate_to_width

if TYPE_CHECKING:
    from rink.tui.config import RenderContext

SCORE_BOX_WIDTH = 25
SCORE_BOX_HEIGHT = 5


# ---------------------------------------------------------------------------
# Status
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Scheduled:
    start_time: str

    def display(self) -> str:
        return self.start_time

    def shows_score(self) -> bool:
        return False


@dataclass(frozen=True)
class Live:
    period: str
    clock: str = ""
    intermission: bool = False

    def display(self) -> str:
        if self.intermission:
            return f"{self.period} INT"
        if not self.clock:
            return self.period
        return f"{self.period} {self.clock}"

    def shows_score(self) -> bool:
        return True


@dataclass(frozen=True)
class Final:
    overtime: bool = False
    shootout: bool = False

    def display(self) -> str:
        if self.shootout:
            return "Final/SO"
        if self.overtime:
            return "Final/OT"
        return "Final"

    def shows_score(self) -> bool:
        return True


ScoreBoxStatus = Union[Scheduled, Live, Final]


# ---------------------------------------------------------------------------
# ScoreBox
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ScoreBox:
    """A five-line score box::

        ╭───────────────────────╮
        │ 3rd 12:04             │
        │ TOR Maple Leafs     3 │
        │ BOS Bruins          2 │
        ╰───────────────────────╯
    """

    away_abbrev: str
    home_abbrev: str
    away_name: str
    home_name: str
    away_score: int | None
    home_score: int | None
    status: ScoreBoxStatus
    width: int = SCORE_BOX_WIDTH

    def preferred_height(self) -> int:
        return SCORE_BOX_HEIGHT

    def preferred_width(self) -> int:
        return self.width

    def _team_line(self, abbrev: str, name: str, score: int | None, inner: int) -> str:
        score_text = str(score) if score is not None and self.status.shows_score() else ""
        score_width = max(3, len(score_text) + 1)
        label = align_text(f" {abbrev} {name}", max(0, inner - score_width))
        return label + align_text(score_text, score_width - 1, "right") + " "

    def render(self, area: Rect, buf: Buffer, ctx: RenderContext, focused: bool = False) -> None:
        if area.is_empty():
            return
        width = min(self.width, area.width)
        inner = max(0, width - 2)
        bc = ctx.box_chars
        border = ctx.selection_style() if focused else ctx.boxchar_style()
        text = ctx.text_style()

        lines = [
            " " + truncate_to_width(self.status.display(), max(0, inner - 1)),
            self._team_line(self.away_abbrev, self.away_name, self.away_score, inner),
            self._team_line(self.home_abbrev, self.home_name, self.home_score, inner),
        ]

        rows: list[tuple[str, str, str]] = [(bc.top_left, bc.horizontal * inner, bc.top_right)]
        rows.extend((bc.vertical, align_text(line, inner), bc.vertical) for line in lines)
        rows.append((bc.bottom_left, bc.horizontal * inner, bc.bottom_right))

        for i, (left, middle, right) in enumerate(rows):
            y = area.y + i
            if y >= area.bottom:
                break
            is_border = i == 0 or i == len(rows) - 1
            buf.set_string(area.x, y, left, border, max_width=width)
            buf.set_string(area.x + 1, y, middle, border if is_border else text, max_width=inner)
            if width > 1:
                buf.set_string(area.x + width - 1, y, right, border)
