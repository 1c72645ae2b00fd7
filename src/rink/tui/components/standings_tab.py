"""Standings tab: conference tables linking to team detail."""

from __future__ import annotations

from dataclasses import dataclass

from rink.tui.components.document_panel import DocumentPanel
from rink.tui.document import Document
from rink.tui.documents.standings import StandingsDocument
from rink.tui.element import Element, WidgetElement
from rink.tui.models import Standing


@dataclass
class StandingsTabProps:
    standings: list[Standing] | None
    western_first: bool = False
    loading: bool = False
    focused: bool = False
    animation_frame: int = 0


@dataclass
class StandingsTabState:
    focus_index: int | None = None
    scroll_offset: int = 0


class StandingsTab:
    def init_state(self, props: StandingsTabProps) -> StandingsTabState:
        return StandingsTabState()

    def document(self, props: StandingsTabProps) -> Document | None:
        if props.standings is None:
            return None
        return StandingsDocument(props.standings, props.western_first)

    def view(self, props: StandingsTabProps, state: StandingsTabState) -> Element:
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
