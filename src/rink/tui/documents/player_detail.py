"""Player detail: bio lines and NHL regular-season career table."""

from __future__ import annotations

from rink.tui.document import Document, DocumentBuilder, DocumentElement, FocusContext
from rink.tui.models import PlayerLanding, SeasonTotal
from rink.tui.navigation import DocumentTarget, TeamDetailRef
from rink.tui.table import Alignment, ColumnDef, StyledTextCell, TableWidget, TextCell
from rink.tui.team_abbrev import abbrev_to_common_name

REGULAR_SEASON = 2


def _opt(value: int | None) -> str:
    return "-" if value is None else str(value)


def skater_season_columns() -> list[ColumnDef]:
    return [
        ColumnDef("Season", 7, Alignment.LEFT, lambda s: StyledTextCell(s.season_label)),
        ColumnDef("Team", 22, Alignment.LEFT, lambda s: TextCell(s.team_name)),
        ColumnDef("GP", 3, Alignment.RIGHT, lambda s: TextCell(str(s.games_played))),
        ColumnDef("G", 3, Alignment.RIGHT, lambda s: TextCell(_opt(s.goals))),
        ColumnDef("A", 3, Alignment.RIGHT, lambda s: TextCell(_opt(s.assists))),
        ColumnDef("PTS", 4, Alignment.RIGHT, lambda s: TextCell(_opt(s.points))),
        ColumnDef(
            "+/-",
            4,
            Alignment.RIGHT,
            lambda s: TextCell("-" if s.plus_minus is None else f"{s.plus_minus:+d}"),
        ),
    ]


def goalie_season_columns() -> list[ColumnDef]:
    return [
        ColumnDef("Season", 7, Alignment.LEFT, lambda s: StyledTextCell(s.season_label)),
        ColumnDef("Team", 22, Alignment.LEFT, lambda s: TextCell(s.team_name)),
        ColumnDef("GP", 3, Alignment.RIGHT, lambda s: TextCell(str(s.games_played))),
        ColumnDef("W", 3, Alignment.RIGHT, lambda s: TextCell(_opt(s.wins))),
        ColumnDef("L", 3, Alignment.RIGHT, lambda s: TextCell(_opt(s.losses))),
        ColumnDef(
            "GAA",
            5,
            Alignment.RIGHT,
            lambda s: TextCell("-" if s.goals_against_avg is None else f"{s.goals_against_avg:.2f}"),
        ),
        ColumnDef(
            "SV%",
            5,
            Alignment.RIGHT,
            lambda s: TextCell("-" if s.save_pctg is None else f"{s.save_pctg:.3f}"),
        ),
    ]


class PlayerDetailDocument(Document):
    def __init__(self, player_id: int, landing: PlayerLanding) -> None:
        self.player_id = player_id
        self.landing = landing

    def _heading(self) -> str:
        p = self.landing
        if p.sweater_number is not None:
            return f"#{p.sweater_number} {p.full_name}"
        return p.full_name

    def _bio_lines(self) -> list[str]:
        p = self.landing
        lines = [f"Position: {p.position or '-'}"]
        if p.birth_date:
            born = f"Born: {p.birth_date}"
            if p.birth_city:
                born += f" ({p.birth_city})"
            lines.append(born)
        physical = []
        if p.height_in_inches:
            physical.append(f"Height: {p.height_in_inches // 12}'{p.height_in_inches % 12}\"")
        if p.weight_in_pounds:
            physical.append(f"Weight: {p.weight_in_pounds} lb")
        if p.shoots_catches:
            physical.append(f"{'Catches' if p.is_goalie else 'Shoots'}: {p.shoots_catches}")
        if physical:
            lines.append("   ".join(physical))
        return lines

    def seasons(self) -> list[SeasonTotal]:
        return [
            s
            for s in self.landing.season_totals
            if s.league_abbrev == "NHL" and s.game_type_id == REGULAR_SEASON
        ]

    def build(self, focus: FocusContext) -> list[DocumentElement]:
        p = self.landing
        builder = DocumentBuilder().heading(1, self._heading())
        builder.text("\n".join(self._bio_lines()))

        if p.current_team_abbrev:
            team = abbrev_to_common_name(p.current_team_abbrev) or p.current_team_abbrev
            builder.spacer(1).link_with_focus(
                "current_team",
                f"Team: {team} ({p.current_team_abbrev})",
                DocumentTarget(TeamDetailRef(p.current_team_abbrev)),
                focus,
            )

        builder.spacer(1).section_title("NHL Career", underline=True)
        seasons = self.seasons()
        if not seasons:
            builder.text("No NHL regular season games.")
            return builder.build()

        columns = goalie_season_columns() if p.is_goalie else skater_season_columns()
        builder.table(TableWidget.from_data(columns, seasons, name="player_seasons"), focus)
        return builder.build()

    def title(self) -> str:
        return self.landing.full_name

    def id(self) -> str:
        return f"player_{self.player_id}"
