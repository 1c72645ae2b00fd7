"""Standalone widgets drawn inside documents and panels."""

from rink.tui.widgets.big_score import BigScore
from rink.tui.widgets.loading import LoadingAnimation, loading_animation_text
from rink.tui.widgets.score_box import Final, Live, Scheduled, ScoreBox, ScoreBoxStatus

__all__ = [
    "BigScore",
    "Final",
    "Live",
    "LoadingAnimation",
    "Scheduled",
    "ScoreBox",
    "ScoreBoxStatus",
    "loading_animation_text",
]
