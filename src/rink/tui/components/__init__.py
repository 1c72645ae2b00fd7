"""Application components composed by ``App`` every frame."""

from rink.tui.components.app import (
    SCORES_TAB_PATH,
    SETTINGS_TAB_PATH,
    STANDINGS_TAB_PATH,
    App,
    active_content,
    content_viewport,
    render_frame,
    stacked_document,
)
from rink.tui.components.breadcrumb import BreadcrumbWidget
from rink.tui.components.document_panel import DocumentPanel
from rink.tui.components.scores_tab import ScoresTab, ScoresTabProps, ScoresTabState
from rink.tui.components.settings_tab import SettingsTab, SettingsTabProps, SettingsTabState
from rink.tui.components.standings_tab import StandingsTab, StandingsTabProps, StandingsTabState
from rink.tui.components.status_bar import StatusBar
from rink.tui.components.tabbed_panel import TabBar, TabbedPanel, TabbedPanelProps, TabItem

__all__ = [
    "App",
    "BreadcrumbWidget",
    "DocumentPanel",
    "SCORES_TAB_PATH",
    "SETTINGS_TAB_PATH",
    "STANDINGS_TAB_PATH",
    "ScoresTab",
    "ScoresTabProps",
    "ScoresTabState",
    "SettingsTab",
    "SettingsTabProps",
    "SettingsTabState",
    "StandingsTab",
    "StandingsTabProps",
    "StandingsTabState",
    "StatusBar",
    "TabBar",
    "TabItem",
    "TabbedPanel",
    "TabbedPanelProps",
    "active_content",
    "content_viewport",
    "render_frame",
    "stacked_document",
]
