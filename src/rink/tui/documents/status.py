"""Game status derived from a schedule entry or box score."""

from __future__ import annotations

from datetime import datetime
from typing import Union

from rink.tui.models import Boxscore, GameSummary
from rink.tui.widgets.score_box import Final, Live, Scheduled, ScoreBoxStatus

_ORDINALS = {1: "1st", 2: "2nd", 3: "3rd"}


def period_label(period: int | None, period_type: str) -> str:
    if period_type == "OT":
        return "OT"
    if period_type == "SO":
        return "SO"
    if period is None:
        return ""
    return _ORDINALS.get(period, f"{period}th")


def format_start_time(start_time_utc: str, time_format: str | None) -> str:
    """Format an ISO-8601 start time with *time_format* (times stay in UTC)."""
    if not time_format or not start_time_utc:
        return start_time_utc
    try:
        started = datetime.fromisoformat(start_time_utc.replace("Z", "+00:00"))
    except ValueError:
        return start_time_utc
    return started.strftime(time_format)


def game_status(game: Union[GameSummary, Boxscore], time_format: str | None = None) -> ScoreBoxStatus:
    state = game.game_state
    if state in ("LIVE", "CRIT"):
        return Live(
            period=period_label(game.period, game.period_type),
            clock=game.clock,
            intermission=game.in_intermission,
        )
    if state in ("FINAL", "OFF"):
        return Final(overtime=game.period_type == "OT", shootout=game.period_type == "SO")
    if state in ("PPD", "SUSP"):
        return Scheduled("TBD")
    return Scheduled(format_start_time(game.start_time_utc, time_format))
