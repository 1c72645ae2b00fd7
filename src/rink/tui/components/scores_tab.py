"""Scores tab: today's games as score boxes."""

from __future__ import annotations

from dataclasses import dataclass

from rink.tui.components.document_panel import DocumentPanel
from rink.tui.document import Document
from rink.tui.documents.scores import ScoresDocument
from rink.tui.element import Element, WidgetElement
from rink.tui.models import GameSummary


@dataclass
class ScoresTabProps:
    game_date: str
    games: list[GameSummary] | None
    loading: bool = False
    focused: bool = False
    animation_frame: int = 0
    time_format: str | None = None


@dataclass
class ScoresTabState:
    focus_index: int | None = None
    scroll_offset: int = 0


class ScoresTab:
    def init_state(self, props: ScoresTabProps) -> ScoresTabState:
        return ScoresTabState()

    def document(self, props: ScoresTabProps) -> Document | None:
        if props.games is None:
            return None
        return ScoresDocument(props.game_date, props.games, props.time_format)

    def view(self, props: ScoresTabProps, state: ScoresTabState) -> Element:
        return WidgetElement(
            DocumentPanel(
                self.document(props),
                focus_index=state.focus_index if props.focused else None,
                scroll_offset=state.scroll_offset,
                focused=props.focused,
                loading=props.loading,
                animation_frame=props.animation_frame,
            )
        )
