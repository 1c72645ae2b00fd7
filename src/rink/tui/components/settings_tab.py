"""Settings tab: a category bar over the selected category's settings."""

from __future__ import annotations

from dataclasses import dataclass

from rink.tui.components.document_panel import DocumentPanel
from rink.tui.components.tabbed_panel import TAB_BAR_HEIGHT, TabBar
from rink.tui.config import Config
from rink.tui.document import Document
from rink.tui.documents.settings import SettingsDocument
from rink.tui.element import Element, Length, Min, WidgetElement, vertical
from rink.tui.navigation import SettingsCategory


@dataclass
class SettingsTabProps:
    config: Config
    initial_category: SettingsCategory = SettingsCategory.LOGGING
    focused: bool = False


@dataclass
class SettingsTabState:
    category: SettingsCategory = SettingsCategory.LOGGING
    focus_index: int | None = None
    scroll_offset: int = 0

    def select_category(self, category: SettingsCategory) -> None:
        self.category = category
        self.focus_index = None
        self.scroll_offset = 0


class SettingsTab:
    def init_state(self, props: SettingsTabProps) -> SettingsTabState:
        return SettingsTabState(category=props.initial_category)

    def document(self, props: SettingsTabProps, state: SettingsTabState) -> Document:
        return SettingsDocument(state.category, props.config)

    def view(self, props: SettingsTabProps, state: SettingsTabState) -> Element:
        categories = list(SettingsCategory)
        bar = TabBar(
            tuple(c.label for c in categories),
            categories.index(state.category),
            dimmed=not props.focused,
        )
        panel = DocumentPanel(
            self.document(props, state),
            focus_index=state.focus_index if props.focused else None,
            scroll_offset=state.scroll_offset,
            focused=props.focused,
        )
        return vertical([Length(TAB_BAR_HEIGHT), Min(0)], [WidgetElement(bar), WidgetElement(panel)])
