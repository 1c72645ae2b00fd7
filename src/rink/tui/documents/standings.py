"""Standings: one table per conference, linking to team detail."""

from __future__ import annotations

from collections import defaultdict

from rink.tui.document import Document, DocumentBuilder, DocumentElement, FocusContext
from rink.tui.models import Standing
from rink.tui.table import Alignment, ColumnDef, TableWidget, TeamLinkCell, TextCell

EASTERN = "Eastern"
WESTERN = "Western"


def standings_columns() -> list[ColumnDef]:
    return [
        ColumnDef("Team", 24, Alignment.LEFT, lambda s: TeamLinkCell(s.team_name or s.team_abbrev, s.team_abbrev)),
        ColumnDef("GP", 3, Alignment.RIGHT, lambda s: TextCell(str(s.games_played))),
        ColumnDef("W", 3, Alignment.RIGHT, lambda s: TextCell(str(s.wins))),
        ColumnDef("L", 3, Alignment.RIGHT, lambda s: TextCell(str(s.losses))),
        ColumnDef("OT", 3, Alignment.RIGHT, lambda s: TextCell(str(s.ot_losses))),
        ColumnDef("PTS", 4, Alignment.RIGHT, lambda s: TextCell(str(s.points))),
        ColumnDef("DIFF", 5, Alignment.RIGHT, lambda s: TextCell(f"{s.goal_differential:+d}")),
    ]


def group_by_conference(standings: list[Standing], western_first: bool = False) -> list[tuple[str, list[Standing]]]:
    """Group and sort standings.

    Teams within a conference are ordered by points, then fewer games
    played.  Eastern comes before Western unless *western_first*; any
    other conference names follow alphabetically.
    """
    groups: dict[str, list[Standing]] = defaultdict(list)
    for standing in standings:
        groups[standing.conference_name or "League"].append(standing)

    first, second = (WESTERN, EASTERN) if western_first else (EASTERN, WESTERN)
    rank = {first: 0, second: 1}
    ordered = sorted(groups, key=lambda name: (rank.get(name, 2), name))
    return [
        (name, sorted(groups[name], key=lambda s: (-s.points, s.games_played, s.team_abbrev)))
        for name in ordered
    ]


def conference_title(name: str) -> str:
    if name in (EASTERN, WESTERN):
        return f"{name} Conference"
    return name


class StandingsDocument(Document):
    def __init__(self, standings: list[Standing], western_first: bool = False) -> None:
        self.standings = standings
        self.western_first = western_first

    def build(self, focus: FocusContext) -> list[DocumentElement]:
        builder = DocumentBuilder()
        groups = group_by_conference(self.standings, self.western_first)
        if not groups:
            return builder.text("No standings available.").build()

        for i, (name, teams) in enumerate(groups):
            if i:
                builder.spacer(1)
            builder.section_title(conference_title(name), underline=True)
            widget = TableWidget.from_data(standings_columns(), teams, name=f"standings_{name.lower()}")
            builder.table(widget, focus)
        return builder.build()

    def title(self) -> str:
        return "Standings"

    def id(self) -> str:
        return "standings"
