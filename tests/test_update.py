"""Tests for rink.tui.update -- settings actions, focus scrolling and the key reducer."""

from __future__ import annotations

import pytest
from helpers import StubDocument

from rink.tui.buffer import Rect
from rink.tui.component_store import ComponentStateStore
from rink.tui.components import SCORES_TAB_PATH, SETTINGS_TAB_PATH, content_viewport
from rink.tui.config import Config
from rink.tui.document import DocumentBuilder, ScoreBoxElement
from rink.tui.navigation import ActionTarget, BoxscoreRef, DocumentNav, SettingsCategory, Tab
from rink.tui.state import LoadingKey
from rink.tui.update import (
    LOG_LEVELS,
    REFRESH_INTERVALS,
    apply_settings_action,
    handle_key,
    move_focus,
    scroll_page,
    scroll_to_focus,
)
from rink.tui.widgets.score_box import Final, ScoreBox

UP = "\x1b[A"
DOWN = "\x1b[B"
RIGHT = "\x1b[C"
LEFT = "\x1b[D"
ENTER = "\r"
ESCAPE = "\x1b"
TAB = "\t"
PAGE_UP = "\x1b[5~"
PAGE_DOWN = "\x1b[6~"


def _links(count: int) -> StubDocument:
    def build(focus):
        builder = DocumentBuilder()
        for i in range(count):
            builder.link_with_focus(f"link_{i}", f"Link {i}", ActionTarget(f"edit:{i}"), focus)
        return builder.build()

    return StubDocument(build)


# ---------------------------------------------------------------------------
# Settings actions
# ---------------------------------------------------------------------------


class TestApplySettingsAction:
    def test_toggle_unicode(self):
        config = apply_settings_action(Config(), "toggle:use_unicode")
        assert config.display.use_unicode is False

    def test_toggle_western_first(self):
        assert apply_settings_action(Config(), "toggle:western_teams_first").display_standings_western_first

    def test_cycle_log_level(self):
        assert apply_settings_action(Config(), "edit:log_level").log_level == "warning"

    def test_cycle_wraps(self):
        config = Config(log_level=LOG_LEVELS[-1])
        assert apply_settings_action(config, "edit:log_level").log_level == LOG_LEVELS[0]

    def test_cycle_theme_from_none(self):
        assert apply_settings_action(Config(), "edit:theme").display.theme_name == "orange"

    def test_unknown_value_restarts_cycle(self):
        config = Config(refresh_interval=45)
        assert apply_settings_action(config, "edit:refresh_interval").refresh_interval == REFRESH_INTERVALS[0]

    def test_time_format(self):
        assert apply_settings_action(Config(), "edit:time_format").time_format == "%H:%M"

    def test_log_file(self):
        assert apply_settings_action(Config(), "edit:log_file").log_file == "rink.log"

    def test_unknown_action(self):
        with pytest.raises(ValueError):
            apply_settings_action(Config(), "edit:nothing")

    def test_original_unchanged(self):
        config = Config()
        apply_settings_action(config, "edit:log_level")
        assert config.log_level == "info"


# ---------------------------------------------------------------------------
# Focus and scrolling
# ---------------------------------------------------------------------------


class TestScrollToFocus:
    def test_scrolls_down_minimally(self):
        nav = DocumentNav(focus_index=5, scroll_offset=0)
        scroll_to_focus(nav, _links(10), Rect(0, 0, 40, 4))
        assert nav.scroll_offset == 2

    def test_scrolls_up_to_focus(self):
        nav = DocumentNav(focus_index=1, scroll_offset=3)
        scroll_to_focus(nav, _links(10), Rect(0, 0, 40, 4))
        assert nav.scroll_offset == 1

    def test_visible_focus_keeps_offset(self):
        nav = DocumentNav(focus_index=4, scroll_offset=2)
        scroll_to_focus(nav, _links(10), Rect(0, 0, 40, 4))
        assert nav.scroll_offset == 2

    def test_no_focus(self):
        nav = DocumentNav(focus_index=None, scroll_offset=3)
        scroll_to_focus(nav, _links(10), Rect(0, 0, 40, 4))
        assert nav.scroll_offset == 3

    def test_tall_unit_aligned_to_top(self):
        box = ScoreBox("TOR", "BOS", "Maple Leafs", "Bruins", 3, 2, Final())

        def build(focus):
            return (
                DocumentBuilder()
                .spacer(4)
                .element(ScoreBoxElement("game", box, None, focus.is_link_focused("game")))
                .spacer(10)
                .build()
            )

        nav = DocumentNav(focus_index=0, scroll_offset=0)
        scroll_to_focus(nav, StubDocument(build), Rect(0, 0, 40, 3))
        assert nav.scroll_offset == 4


class TestMoveFocus:
    def test_first_move_focuses_first_unit(self):
        nav = DocumentNav()
        assert move_focus(nav, _links(3), 1, Rect(0, 0, 40, 10))
        assert nav.focus_index == 0

    def test_clamps_at_bottom(self):
        nav = DocumentNav(focus_index=2)
        assert move_focus(nav, _links(3), 1, Rect(0, 0, 40, 10))
        assert nav.focus_index == 2

    def test_top_edge_reports_false(self):
        nav = DocumentNav(focus_index=0)
        assert not move_focus(nav, _links(3), -1, Rect(0, 0, 40, 10))
        assert nav.focus_index == 0

    def test_move_scrolls(self):
        nav = DocumentNav(focus_index=3)
        move_focus(nav, _links(10), 1, Rect(0, 0, 40, 4))
        assert nav.focus_index == 4
        assert nav.scroll_offset == 1

    def test_stale_index_is_clamped_first(self):
        nav = DocumentNav(focus_index=20)
        move_focus(nav, _links(3), -1, Rect(0, 0, 40, 10))
        assert nav.focus_index == 1


class TestScrollPage:
    def test_page_is_viewport_minus_one(self):
        nav = DocumentNav()
        scroll_page(nav, _links(20), 1, Rect(0, 0, 40, 5))
        assert nav.scroll_offset == 4

    def test_clamped_to_max_scroll(self):
        nav = DocumentNav(scroll_offset=14)
        scroll_page(nav, _links(20), 1, Rect(0, 0, 40, 5))
        assert nav.scroll_offset == 15
        scroll_page(nav, _links(20), -10, Rect(0, 0, 40, 5))
        assert nav.scroll_offset == 0


# ---------------------------------------------------------------------------
# Reducer
# ---------------------------------------------------------------------------


@pytest.fixture
def store() -> ComponentStateStore:
    return ComponentStateStore()


def _press(state, store, *keys) -> list[bool]:
    return [handle_key(state, store, key, content_viewport(state, 80, 24)) for key in keys]


class TestHandleKey:
    def test_quit(self, app_state, store):
        assert _press(app_state, store, "q") == [True]
        assert not app_state.system.running

    def test_refresh(self, app_state, store):
        _press(app_state, store, "r")
        assert app_state.system.refresh_requested

    def test_unbound_key(self, app_state, store):
        assert _press(app_state, store, "z") == [False]

    def test_tabs(self, app_state, store):
        _press(app_state, store, RIGHT)
        assert app_state.navigation.current_tab is Tab.STANDINGS
        _press(app_state, store, LEFT, LEFT)
        assert app_state.navigation.current_tab is Tab.SETTINGS

    def test_enter_content_then_focus_first_game(self, app_state, store):
        _press(app_state, store, DOWN)
        assert app_state.navigation.focus_in_content
        _press(app_state, store, DOWN)
        assert store.get(SCORES_TAB_PATH).focus_index == 0

    def test_up_from_first_unit_returns_to_tab_bar(self, app_state, store):
        _press(app_state, store, DOWN, DOWN, UP)
        assert not app_state.navigation.focus_in_content
        assert store.get(SCORES_TAB_PATH).focus_index == 0

    def test_open_and_close_boxscore(self, app_state, store):
        _press(app_state, store, DOWN, DOWN, ENTER)
        nav = app_state.navigation
        assert nav.document_stack.top.document == BoxscoreRef(2024020001, "TOR", "BOS", 3, 2, game_date="10/12")
        assert nav.current_breadcrumb_labels() == ["Scores", "TOR:3-BOS:2"]

        _press(app_state, store, ESCAPE)
        assert nav.document_stack.is_empty
        assert nav.focus_in_content
        assert store.get(SCORES_TAB_PATH).focus_index == 0

        _press(app_state, store, ESCAPE)
        assert not nav.focus_in_content

    def test_loading_document_ignores_focus_moves(self, app_state, store):
        _press(app_state, store, DOWN, DOWN, ENTER)
        app_state.data.loading.add(LoadingKey.boxscore(2024020001))
        assert _press(app_state, store, DOWN) == [False]

    def test_drill_down_to_player(self, app_state, store, boxscore):
        app_state.data.boxscores[2024020001] = boxscore
        _press(app_state, store, DOWN, DOWN, ENTER, DOWN, ENTER)
        labels = app_state.navigation.current_breadcrumb_labels()
        assert labels == ["Scores", "TOR:3-BOS:2", "#34 Matthews"]

    def test_back_restores_stacked_focus(self, app_state, store, boxscore):
        app_state.data.boxscores[2024020001] = boxscore
        _press(app_state, store, DOWN, DOWN, ENTER, DOWN, DOWN, ENTER, ESCAPE)
        top = app_state.navigation.document_stack.top
        assert isinstance(top.document, BoxscoreRef)
        assert top.nav.focus_index == 1

    def test_switching_tab_closes_documents(self, app_state, store):
        _press(app_state, store, DOWN, DOWN, ENTER, RIGHT)
        assert app_state.navigation.document_stack.is_empty
        assert app_state.navigation.current_tab is Tab.STANDINGS

    def test_settings_category_cycle(self, app_state, store):
        _press(app_state, store, LEFT, TAB)
        assert store.get(SETTINGS_TAB_PATH).category is SettingsCategory.DISPLAY

    def test_category_cycle_only_on_settings(self, app_state, store):
        assert _press(app_state, store, TAB) == [False]

    def test_settings_edit(self, app_state, store):
        _press(app_state, store, LEFT, TAB, DOWN, DOWN, ENTER)
        assert app_state.system.config.display.theme_name == "orange"
        assert app_state.system.status_message is None

    def test_settings_toggle(self, app_state, store):
        _press(app_state, store, LEFT, TAB, DOWN, DOWN, DOWN, ENTER)
        assert app_state.system.config.display.use_unicode is False

    def test_page_down_scrolls_tab(self, app_state, store):
        app_state.navigation.focus_in_content = True
        small = Rect(0, 2, 80, 4)
        assert handle_key(app_state, store, PAGE_DOWN, small)
        assert store.get(SCORES_TAB_PATH).scroll_offset == 3
        handle_key(app_state, store, PAGE_UP, small)
        assert store.get(SCORES_TAB_PATH).scroll_offset == 0

    def test_schedule_loading(self, app_state, store):
        app_state.data.loading.add(LoadingKey.schedule())
        assert _press(app_state, store, DOWN, DOWN) == [True, False]
