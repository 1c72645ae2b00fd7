"""Large-digit score display.

Renders a game score like::

                 Final

             ▟▀▀▙      ▟▀▀▙
     Devils   ▄▄▛  ▄▄    ▗▛  Sabres
                █       ▗▛
             ▜▄▄▛      ▄█▄▄

               TD Garden

Rows: status, blank, four digit rows (team names on the second), blank,
venue.  The name boxes are widened on the side with fewer digits so the
separator stays centred.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from rink.tui.buffer import Buffer, Rect
from rink.tui.utils import visible_width
from rink.tui.widgets.big_digits import BIG_DIGIT_HEIGHT, BIG_DIGIT_WIDTH, get_digit
from rink.tui.widgets.score_box import ScoreBoxStatus

if TYPE_CHECKING:
    from rink.tui.config import RenderContext

SEPARATOR = ("      ", "  ▄▄  ", "      ", "      ")
SEPARATOR_WIDTH = 6
NAME_BOX_WIDTH = 20
NAME_DIGIT_GAP = 2
DIGIT_GAP = 1
HEADER_HEIGHT = 2
FOOTER_HEIGHT = 2


def score_digits(score: int) -> list[int]:
    """Digits to draw for *score*; negatives show 0 and anything past 99 shows 99."""
    if score < 0:
        return [0]
    if score < 10:
        return [score]
    if score < 100:
        return [score // 10, score % 10]
    return [9, 9]


def score_width(score: int) -> int:
    n = len(score_digits(score))
    return n * BIG_DIGIT_WIDTH + max(0, n - 1) * DIGIT_GAP


@dataclass(frozen=True)
class BigScore:
    away_name: str
    home_name: str
    away_score: int
    home_score: int
    status: ScoreBoxStatus
    venue: str = ""

    def balanced_name_boxes(self) -> tuple[int, int]:
        away = score_width(self.away_score)
        home = score_width(self.home_score)
        if away > home:
            return NAME_BOX_WIDTH, NAME_BOX_WIDTH + away - home
        if home > away:
            return NAME_BOX_WIDTH + home - away, NAME_BOX_WIDTH
        return NAME_BOX_WIDTH, NAME_BOX_WIDTH

    def total_width(self) -> int:
        away_box, home_box = self.balanced_name_boxes()
        return (
            away_box
            + NAME_DIGIT_GAP
            + score_width(self.away_score)
            + SEPARATOR_WIDTH
            + score_width(self.home_score)
            + NAME_DIGIT_GAP
            + home_box
        )

    def preferred_height(self) -> int:
        return HEADER_HEIGHT + BIG_DIGIT_HEIGHT + FOOTER_HEIGHT

    def preferred_width(self) -> int:
        return self.total_width()

    def _draw_digits(self, buf: Buffer, x: int, y: int, score: int, row: int, style) -> int:
        for i, digit in enumerate(score_digits(score)):
            if i > 0:
                x += DIGIT_GAP
            buf.set_string(x, y, get_digit(digit)[row], style)
            x += BIG_DIGIT_WIDTH
        return x

    def render(self, area: Rect, buf: Buffer, ctx: RenderContext) -> None:
        # Too small to draw legibly: draw nothing rather than a broken score.
        if area.height < self.preferred_height() or area.width < self.total_width():
            return

        style = ctx.text_style()
        status = self.status.display()
        buf.set_string(area.x + (area.width - visible_width(status)) // 2, area.y, status, style)

        digits_y = area.y + HEADER_HEIGHT
        away_box, _ = self.balanced_name_boxes()
        start_x = area.x + (area.width - self.total_width()) // 2
        name_row = digits_y + 1

        away_name_x = start_x + away_box - visible_width(self.away_name)
        buf.set_string(max(start_x, away_name_x), name_row, self.away_name, style, max_width=away_box)

        away_x = start_x + away_box + NAME_DIGIT_GAP
        home_x = away_x + score_width(self.away_score) + SEPARATOR_WIDTH
        home_name_x = home_x + score_width(self.home_score) + NAME_DIGIT_GAP
        buf.set_string(home_name_x, name_row, self.home_name, style)

        for row in range(BIG_DIGIT_HEIGHT):
            x = self._draw_digits(buf, away_x, digits_y + row, self.away_score, row, style)
            buf.set_string(x, digits_y + row, SEPARATOR[row], style)
            self._draw_digits(buf, home_x, digits_y + row, self.home_score, row, style)

        venue_y = digits_y + BIG_DIGIT_HEIGHT + 1
        buf.set_string(area.x + (area.width - visible_width(self.venue)) // 2, venue_y, self.venue, style)
