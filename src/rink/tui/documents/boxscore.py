"""Box score: big score display plus each team's skater and goalie tables."""

from __future__ import annotations

from rink.tui.box_chars import BoxChars
from rink.tui.document import (
    TEAM_BOXSCORE_SIDE_BY_SIDE_WIDTH,
    Document,
    DocumentBuilder,
    DocumentElement,
    FocusContext,
    Row,
    RowAlignment,
)
from rink.tui.document.builder import team_boxscore
from rink.tui.documents.status import game_status
from rink.tui.models import Boxscore, GoalieStats, SkaterStats, TeamPlayerStats
from rink.tui.table import (
    Alignment,
    ColumnDef,
    PlayerLinkCell,
    StyledTextCell,
    TableWidget,
    TextCell,
)
from rink.tui.widgets.big_score import BigScore

SIDE_BY_SIDE_GAP = 4


def _number(n: int | None) -> str:
    return "" if n is None else str(n)


def game_skater_columns() -> list[ColumnDef]:
    return [
        ColumnDef("#", 2, Alignment.RIGHT, lambda s: StyledTextCell(_number(s.sweater_number))),
        ColumnDef(
            "Player",
            20,
            Alignment.LEFT,
            lambda s: PlayerLinkCell(s.name, s.player_id, s.sweater_number, s.last_name),
        ),
        ColumnDef("Pos", 3, Alignment.CENTER, lambda s: TextCell(s.position)),
        ColumnDef("G", 2, Alignment.RIGHT, lambda s: TextCell(str(s.goals))),
        ColumnDef("A", 2, Alignment.RIGHT, lambda s: TextCell(str(s.assists))),
        ColumnDef("PTS", 3, Alignment.RIGHT, lambda s: TextCell(str(s.points))),
        ColumnDef("PPG", 3, Alignment.RIGHT, lambda s: TextCell(str(s.power_play_goals))),
        ColumnDef("+/-", 3, Alignment.RIGHT, lambda s: TextCell(f"{s.plus_minus:+d}")),
        ColumnDef("SOG", 3, Alignment.RIGHT, lambda s: TextCell(str(s.sog))),
        ColumnDef("Hits", 4, Alignment.RIGHT, lambda s: TextCell(str(s.hits))),
        ColumnDef("Blk", 3, Alignment.RIGHT, lambda s: TextCell(str(s.blocked_shots))),
        ColumnDef("GA", 2, Alignment.RIGHT, lambda s: TextCell(str(s.giveaways))),
        ColumnDef("TA", 2, Alignment.RIGHT, lambda s: TextCell(str(s.takeaways))),
        ColumnDef("PIM", 3, Alignment.RIGHT, lambda s: TextCell(str(s.pim))),
        ColumnDef("FO%", 5, Alignment.RIGHT, _faceoff_cell),
        ColumnDef("SH", 3, Alignment.RIGHT, lambda s: TextCell(str(s.shifts))),
        ColumnDef("TOI", 6, Alignment.RIGHT, lambda s: TextCell(s.toi)),
    ]


def _faceoff_cell(s: SkaterStats) -> TextCell:
    if s.faceoff_winning_pctg > 0:
        return TextCell(f"{s.faceoff_winning_pctg * 100:.1f}")
    return TextCell("-")


def game_goalie_columns(box_chars: BoxChars) -> list[ColumnDef]:
    checkmark = box_chars.checkmark

    def save_pct(g: GoalieStats) -> TextCell:
        return TextCell("-" if g.save_pctg is None else f"{g.save_pctg:.3f}")

    return [
        ColumnDef("#", 2, Alignment.RIGHT, lambda g: StyledTextCell(_number(g.sweater_number))),
        ColumnDef(
            "Player",
            20,
            Alignment.LEFT,
            lambda g: PlayerLinkCell(g.name, g.player_id, g.sweater_number, g.last_name),
        ),
        ColumnDef("DEC", 3, Alignment.CENTER, lambda g: TextCell(g.decision or "-")),
        ColumnDef("S", 1, Alignment.CENTER, lambda g: TextCell(checkmark if g.starter else " ")),
        ColumnDef("SA", 3, Alignment.RIGHT, lambda g: TextCell(str(g.shots_against))),
        ColumnDef("GA", 2, Alignment.RIGHT, lambda g: TextCell(str(g.goals_against))),
        ColumnDef("SV", 3, Alignment.RIGHT, lambda g: TextCell(str(g.saves))),
        ColumnDef("SV%", 5, Alignment.RIGHT, save_pct),
        ColumnDef("ES", 6, Alignment.RIGHT, lambda g: TextCell(g.even_strength_shots_against)),
        ColumnDef("PP", 4, Alignment.RIGHT, lambda g: TextCell(g.power_play_shots_against)),
        ColumnDef("SH", 4, Alignment.RIGHT, lambda g: TextCell(g.shorthanded_shots_against)),
        ColumnDef("TOI", 7, Alignment.RIGHT, lambda g: TextCell(g.toi)),
        ColumnDef("PIM", 3, Alignment.RIGHT, lambda g: TextCell("-" if g.pim is None else str(g.pim))),
    ]


class BoxscoreDocument(Document):
    def __init__(self, game_id: int, boxscore: Boxscore) -> None:
        self.game_id = game_id
        self.boxscore = boxscore

    def _build_score(self, focus: FocusContext) -> list[DocumentElement]:
        b = self.boxscore
        builder = DocumentBuilder()
        if focus.use_unicode:
            builder.big_score(
                BigScore(
                    away_name=b.away_team.common_name or b.away_team.abbrev,
                    home_name=b.home_team.common_name or b.home_team.abbrev,
                    away_score=b.away_team.score or 0,
                    home_score=b.home_team.score or 0,
                    status=game_status(b),
                    venue=b.venue,
                )
            )
        else:
            builder.heading(2, "SCORE").text(
                f"{b.away_team.abbrev}: {b.away_team.score or 0}  |  "
                f"{b.home_team.abbrev}: {b.home_team.score or 0}"
            )
        return builder.build()

    def _build_team(self, focus: FocusContext, prefix: str) -> DocumentElement:
        b = self.boxscore
        if prefix == "away":
            stats: TeamPlayerStats = b.player_by_game_stats.away_team
            name = b.away_team.common_name or b.away_team.abbrev
        else:
            stats = b.player_by_game_stats.home_team
            name = b.home_team.common_name or b.home_team.abbrev

        skater_columns = game_skater_columns()
        return team_boxscore(
            name,
            TableWidget.from_data(skater_columns, stats.forwards, name=f"{prefix}_forwards"),
            TableWidget.from_data(skater_columns, stats.defense, name=f"{prefix}_defense"),
            TableWidget.from_data(game_goalie_columns(focus.box_chars), stats.goalies, name=f"{prefix}_goalies"),
            focus,
        )

    def build(self, focus: FocusContext) -> list[DocumentElement]:
        builder = DocumentBuilder().extend(self._build_score(focus)).spacer(1)

        away = self._build_team(focus, "away")
        home = self._build_team(focus, "home")
        width = focus.available_width
        if width is not None and width >= TEAM_BOXSCORE_SIDE_BY_SIDE_WIDTH:
            builder.element(Row((away, home), SIDE_BY_SIDE_GAP, RowAlignment.CENTER))
        else:
            builder.element(away).spacer(1).element(home)
        return builder.build()

    def title(self) -> str:
        b = self.boxscore
        return f"{b.away_team.abbrev} @ {b.home_team.abbrev} - Game {self.game_id}"

    def id(self) -> str:
        return f"boxscore_{self.game_id}"
