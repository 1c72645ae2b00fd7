"""Concrete documents shown in the content area."""

from rink.tui.documents.boxscore import BoxscoreDocument, game_goalie_columns, game_skater_columns
from rink.tui.documents.message import MessageDocument
from rink.tui.documents.player_detail import PlayerDetailDocument
from rink.tui.documents.scores import ScoresDocument, boxes_per_row, game_key
from rink.tui.documents.settings import SettingsDocument
from rink.tui.documents.standings import StandingsDocument, group_by_conference, standings_columns
from rink.tui.documents.status import format_start_time, game_status, period_label
from rink.tui.documents.team_detail import TeamDetailDocument

__all__ = [
    # Documents
    "BoxscoreDocument",
    "MessageDocument",
    "PlayerDetailDocument",
    "ScoresDocument",
    "SettingsDocument",
    "StandingsDocument",
    "TeamDetailDocument",
    # Helpers
    "boxes_per_row",
    "format_start_time",
    "game_goalie_columns",
    "game_key",
    "game_skater_columns",
    "game_status",
    "group_by_conference",
    "period_label",
    "standings_columns",
]
