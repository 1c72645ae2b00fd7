"""Scores: a grid of score boxes for one day's games."""

from __future__ import annotations

from datetime import date

from rink.tui.document import Document, DocumentBuilder, DocumentElement, FocusContext, ScoreBoxElement
from rink.tui.documents.status import game_status
from rink.tui.models import GameSummary
from rink.tui.navigation import BoxscoreRef, DocumentTarget
from rink.tui.widgets.score_box import SCORE_BOX_WIDTH, ScoreBox

SCORE_BOX_GAP = 2


def boxes_per_row(width: int | None) -> int:
    """Number of score boxes that fit side by side in *width* columns."""
    if width is None:
        return 1
    return max(1, (width + SCORE_BOX_GAP) // (SCORE_BOX_WIDTH + SCORE_BOX_GAP))


def _short_date(game_date: str) -> str:
    try:
        return date.fromisoformat(game_date).strftime("%m/%d")
    except ValueError:
        return game_date


def game_key(game: GameSummary) -> str:
    return f"game_{game.id}"


class ScoresDocument(Document):
    def __init__(self, game_date: str, games: list[GameSummary], time_format: str | None = None) -> None:
        self.game_date = game_date
        self.games = games
        self.time_format = time_format

    def _score_box(self, game: GameSummary, focus: FocusContext) -> ScoreBoxElement:
        away, home = game.away_team, game.home_team
        box = ScoreBox(
            away_abbrev=away.abbrev,
            home_abbrev=home.abbrev,
            away_name=away.common_name,
            home_name=home.common_name,
            away_score=away.score,
            home_score=home.score,
            status=game_status(game, self.time_format),
        )
        target = DocumentTarget(
            BoxscoreRef(
                game_id=game.id,
                away_abbrev=away.abbrev,
                home_abbrev=home.abbrev,
                away_score=away.score or 0,
                home_score=home.score or 0,
                game_date=_short_date(game.game_date),
            )
        )
        key = game_key(game)
        return ScoreBoxElement(key, box, target, focus.is_link_focused(key))

    def build(self, focus: FocusContext) -> list[DocumentElement]:
        builder = DocumentBuilder().heading(1, f"Games for {self.game_date}")
        if not self.games:
            return builder.text("No games scheduled.").build()

        per_row = boxes_per_row(focus.available_width)
        boxes = [self._score_box(game, focus) for game in self.games]
        for start in range(0, len(boxes), per_row):
            if start:
                builder.spacer(1)
            builder.row(boxes[start : start + per_row], SCORE_BOX_GAP)
        return builder.build()

    def title(self) -> str:
        return f"Scores - {self.game_date}"

    def id(self) -> str:
        return f"scores_{self.game_date}"
