"""Team detail: record summary and season roster tables."""

from __future__ import annotations

from rink.tui.document import Document, DocumentBuilder, DocumentElement, FocusContext
from rink.tui.models import ClubGoalieStats, ClubSkaterStats, ClubStats, Standing
from rink.tui.table import Alignment, ColumnDef, PlayerLinkCell, StyledTextCell, TableWidget, TextCell
from rink.tui.team_abbrev import abbrev_to_common_name


def _number(n: int | None) -> str:
    return "" if n is None else str(n)


def roster_skater_columns() -> list[ColumnDef]:
    def player(s: ClubSkaterStats) -> PlayerLinkCell:
        return PlayerLinkCell(s.full_name, s.player_id, s.sweater_number, s.last_name)

    return [
        ColumnDef("#", 2, Alignment.RIGHT, lambda s: StyledTextCell(_number(s.sweater_number))),
        ColumnDef("Player", 24, Alignment.LEFT, player),
        ColumnDef("Pos", 3, Alignment.CENTER, lambda s: TextCell(s.position_code)),
        ColumnDef("GP", 3, Alignment.RIGHT, lambda s: TextCell(str(s.games_played))),
        ColumnDef("G", 3, Alignment.RIGHT, lambda s: TextCell(str(s.goals))),
        ColumnDef("A", 3, Alignment.RIGHT, lambda s: TextCell(str(s.assists))),
        ColumnDef("PTS", 4, Alignment.RIGHT, lambda s: TextCell(str(s.points))),
        ColumnDef("+/-", 4, Alignment.RIGHT, lambda s: TextCell(f"{s.plus_minus:+d}")),
        ColumnDef("PIM", 4, Alignment.RIGHT, lambda s: TextCell(str(s.penalty_minutes))),
    ]


def roster_goalie_columns() -> list[ColumnDef]:
    def player(g: ClubGoalieStats) -> PlayerLinkCell:
        return PlayerLinkCell(g.full_name, g.player_id, g.sweater_number, g.last_name)

    return [
        ColumnDef("#", 2, Alignment.RIGHT, lambda g: StyledTextCell(_number(g.sweater_number))),
        ColumnDef("Player", 24, Alignment.LEFT, player),
        ColumnDef("GP", 3, Alignment.RIGHT, lambda g: TextCell(str(g.games_played))),
        ColumnDef("W", 3, Alignment.RIGHT, lambda g: TextCell(str(g.wins))),
        ColumnDef("L", 3, Alignment.RIGHT, lambda g: TextCell(str(g.losses))),
        ColumnDef("OT", 3, Alignment.RIGHT, lambda g: TextCell(str(g.ot_losses))),
        ColumnDef("GAA", 5, Alignment.RIGHT, lambda g: TextCell(f"{g.goals_against_average:.2f}")),
        ColumnDef("SV%", 5, Alignment.RIGHT, lambda g: TextCell(f"{g.save_percentage:.3f}")),
        ColumnDef("SO", 3, Alignment.RIGHT, lambda g: TextCell(str(g.shutouts))),
    ]


class TeamDetailDocument(Document):
    def __init__(self, abbrev: str, club_stats: ClubStats, standing: Standing | None = None) -> None:
        self.abbrev = abbrev
        self.club_stats = club_stats
        self.standing = standing

    def team_name(self) -> str:
        if self.standing is not None and self.standing.team_name:
            return self.standing.team_name
        return abbrev_to_common_name(self.abbrev) or self.abbrev

    def build(self, focus: FocusContext) -> list[DocumentElement]:
        builder = DocumentBuilder().heading(1, f"{self.team_name()} ({self.abbrev})")

        s = self.standing
        if s is not None:
            builder.text(
                f"Record: {s.wins}-{s.losses}-{s.ot_losses}   Points: {s.points}   GP: {s.games_played}"
            )
            if s.division_name:
                builder.text(f"Division: {s.division_name}")

        skaters = sorted(self.club_stats.skaters, key=lambda p: (-p.points, -p.goals, p.last_name))
        goalies = sorted(self.club_stats.goalies, key=lambda g: (-g.games_played, g.last_name))

        builder.spacer(1).section_title("Skaters", underline=True)
        if skaters:
            builder.table(TableWidget.from_data(roster_skater_columns(), skaters, name="team_skaters"), focus)
        else:
            builder.text("No skater stats available.")

        builder.spacer(1).section_title("Goalies", underline=True)
        if goalies:
            builder.table(TableWidget.from_data(roster_goalie_columns(), goalies, name="team_goalies"), focus)
        else:
            builder.text("No goalie stats available.")
        return builder.build()

    def title(self) -> str:
        return self.team_name()

    def id(self) -> str:
        return f"team_{self.abbrev}"
