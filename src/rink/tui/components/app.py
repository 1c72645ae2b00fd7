"""Root application composition.

``App.build`` turns the application state into an element tree every
frame; tab components keep their focus and scroll in the component state
store.  ``render_frame`` runs one full pass into a fresh buffer.
"""

from __future__ import annotations

from typing import Union

from rink.tui.buffer import Buffer, Rect
from rink.tui.component_store import ComponentStateStore
from rink.tui.components.breadcrumb import BreadcrumbWidget
from rink.tui.components.document_panel import DocumentPanel
from rink.tui.components.scores_tab import ScoresTab, ScoresTabProps, ScoresTabState
from rink.tui.components.settings_tab import SettingsTab, SettingsTabProps, SettingsTabState
from rink.tui.components.standings_tab import StandingsTab, StandingsTabProps, StandingsTabState
from rink.tui.components.status_bar import STATUS_BAR_HEIGHT, StatusBar
from rink.tui.components.tabbed_panel import TAB_BAR_HEIGHT, TabbedPanel, TabbedPanelProps, TabItem
from rink.tui.config import RenderContext
from rink.tui.document import Document
from rink.tui.documents.boxscore import BoxscoreDocument
from rink.tui.documents.player_detail import PlayerDetailDocument
from rink.tui.documents.team_detail import TeamDetailDocument
from rink.tui.element import Element, Length, Min, WidgetElement, render_element, vertical
from rink.tui.navigation import (
    BoxscoreRef,
    DocumentNav,
    DocumentStackEntry,
    PlayerDetailRef,
    StackedDocument,
    Tab,
    TeamDetailRef,
)
from rink.tui.state import AppState, LoadingKey

SCORES_TAB_PATH = "app/scores"
STANDINGS_TAB_PATH = "app/standings"
SETTINGS_TAB_PATH = "app/settings"

BREADCRUMB_HEIGHT = 2

# Anything with ``focus_index`` and ``scroll_offset`` attributes.
NavState = Union[DocumentNav, ScoresTabState, StandingsTabState, SettingsTabState]


# ---------------------------------------------------------------------------
# Stacked documents
# ---------------------------------------------------------------------------


def stacked_document(state: AppState, document: StackedDocument) -> tuple[Document | None, bool]:
    """Resolve a stack entry against the loaded data: ``(document, loading)``.

    The document is ``None`` when its data has not been fetched yet.
    """
    data = state.data
    if isinstance(document, BoxscoreRef):
        boxscore = data.boxscores.get(document.game_id)
        loading = data.is_loading(LoadingKey.boxscore(document.game_id))
        return (BoxscoreDocument(document.game_id, boxscore) if boxscore is not None else None), loading
    if isinstance(document, TeamDetailRef):
        stats = data.team_roster_stats.get(document.abbrev)
        loading = data.is_loading(LoadingKey.team_roster(document.abbrev))
        if stats is None:
            return None, loading
        return TeamDetailDocument(document.abbrev, stats, data.standing_for(document.abbrev)), loading
    if isinstance(document, PlayerDetailRef):
        landing = data.player_data.get(document.player_id)
        loading = data.is_loading(LoadingKey.player(document.player_id))
        return (PlayerDetailDocument(document.player_id, landing) if landing is not None else None), loading
    raise TypeError(f"not a stacked document: {document!r}")


# ---------------------------------------------------------------------------
# App
# ---------------------------------------------------------------------------


class App:
    def scores_props(self, state: AppState) -> ScoresTabProps:
        return ScoresTabProps(
            game_date=state.data.game_date,
            games=state.data.games,
            loading=state.data.is_loading(LoadingKey.schedule()),
            focused=state.navigation.focus_in_content,
            animation_frame=state.system.animation_frame,
            time_format=state.system.config.time_format,
        )

    def standings_props(self, state: AppState) -> StandingsTabProps:
        return StandingsTabProps(
            standings=state.data.standings,
            western_first=state.system.config.display_standings_western_first,
            loading=state.data.is_loading(LoadingKey.standings()),
            focused=state.navigation.focus_in_content,
            animation_frame=state.system.animation_frame,
        )

    def settings_props(self, state: AppState) -> SettingsTabProps:
        return SettingsTabProps(
            config=state.system.config,
            initial_category=state.ui.settings_category,
            focused=state.navigation.focus_in_content,
        )

    def tab_states(
        self, state: AppState, store: ComponentStateStore
    ) -> tuple[ScoresTabState, StandingsTabState, SettingsTabState]:
        """Fetch (or create) every tab's persisted state.

        All tabs are requested every frame so their state survives while a
        document is stacked on top or another tab is active.
        """
        return (
            store.get_or_init(ScoresTab(), SCORES_TAB_PATH, self.scores_props(state)),
            store.get_or_init(StandingsTab(), STANDINGS_TAB_PATH, self.standings_props(state)),
            store.get_or_init(SettingsTab(), SETTINGS_TAB_PATH, self.settings_props(state)),
        )

    def build(self, state: AppState, store: ComponentStateStore) -> Element:
        return vertical(
            [Min(0), Length(STATUS_BAR_HEIGHT)],
            [self.main_tabs(state, store), WidgetElement(StatusBar(state.system))],
        )

    def main_tabs(self, state: AppState, store: ComponentStateStore) -> Element:
        nav = state.navigation
        scores_state, standings_state, settings_state = self.tab_states(state, store)

        content: Element
        top = nav.document_stack.top
        if top is not None:
            content = vertical(
                [Length(BREADCRUMB_HEIGHT), Min(0)],
                [self.breadcrumb(state), self.stacked(state, top)],
            )
        elif nav.current_tab is Tab.SCORES:
            content = ScoresTab().view(self.scores_props(state), scores_state)
        elif nav.current_tab is Tab.STANDINGS:
            content = StandingsTab().view(self.standings_props(state), standings_state)
        else:
            content = SettingsTab().view(self.settings_props(state), settings_state)

        tabs = [TabItem(tab.value, tab.label) for tab in Tab]
        for item in tabs:
            if item.key == nav.current_tab.value:
                item.content = content

        return TabbedPanel().view(
            TabbedPanelProps(
                active_key=nav.current_tab.value,
                tabs=tabs,
                focused=not nav.focus_in_content and nav.document_stack.is_empty,
                content_has_focus=nav.focus_in_content,
            )
        )

    def breadcrumb(self, state: AppState) -> Element:
        return WidgetElement(BreadcrumbWidget(state.navigation.current_tab, state.navigation.document_stack.entries))

    def stacked(self, state: AppState, entry: DocumentStackEntry) -> Element:
        document, loading = stacked_document(state, entry.document)
        return WidgetElement(
            DocumentPanel(
                document,
                focus_index=entry.nav.focus_index,
                scroll_offset=entry.nav.scroll_offset,
                focused=True,
                loading=loading,
                animation_frame=state.system.animation_frame,
            )
        )


# ---------------------------------------------------------------------------
# Active content (used by the input reducer)
# ---------------------------------------------------------------------------


def active_content(state: AppState, store: ComponentStateStore) -> tuple[Document | None, NavState]:
    """The document under keyboard focus and the nav state that scrolls it."""
    app = App()
    scores_state, standings_state, settings_state = app.tab_states(state, store)
    top = state.navigation.document_stack.top
    if top is not None:
        document, loading = stacked_document(state, top.document)
        return (None if loading else document), top.nav

    tab = state.navigation.current_tab
    if tab is Tab.SCORES:
        props = app.scores_props(state)
        return (None if props.loading else ScoresTab().document(props)), scores_state
    if tab is Tab.STANDINGS:
        props = app.standings_props(state)
        return (None if props.loading else StandingsTab().document(props)), standings_state
    return SettingsTab().document(app.settings_props(state), settings_state), settings_state


def content_viewport(state: AppState, width: int, height: int) -> Rect:
    """Area of a ``width`` x ``height`` frame in which the active document is drawn."""
    top = TAB_BAR_HEIGHT
    if not state.navigation.document_stack.is_empty:
        top += BREADCRUMB_HEIGHT
    elif state.navigation.current_tab is Tab.SETTINGS:
        top += TAB_BAR_HEIGHT
    available = max(0, height - STATUS_BAR_HEIGHT)
    top = min(top, available)
    return Rect(0, top, max(0, width), available - top)


def render_frame(state: AppState, store: ComponentStateStore, width: int, height: int) -> Buffer:
    """Build the element tree for *state* and draw it into a new buffer."""
    store.begin_frame()
    element = App().build(state, store)
    store.prune_unused()

    buf = Buffer.empty(max(0, width), max(0, height))
    ctx = RenderContext(state.system.config.display)
    buf.set_style(buf.area, ctx.base_style())
    render_element(element, buf.area, buf, ctx)
    return buf
