"""Input reducer: applies one key press to the application state.

Focus moves and scroll offsets live in the navigation state of whatever is
active (the top stack entry, or the current tab's component state).  After
a focus move the reducer scrolls just enough to keep the focused unit
visible; ``DocumentView`` itself never scrolls on its own.
"""

from __future__ import annotations

import logging
from dataclasses import replace

from rink.tui.buffer import Rect
from rink.tui.component_store import ComponentStateStore
from rink.tui.components.app import NavState, active_content
from rink.tui.config import THEMES, Config, RenderContext
from rink.tui.document import Document, DocumentView, FocusContext
from rink.tui.keybindings import NavigationAction, NavigationKeybindingsManager, get_navigation_keybindings
from rink.tui.navigation import ActionTarget, DocumentTarget, Tab
from rink.tui.state import AppState

logger = logging.getLogger(__name__)

LOG_LEVELS = ("debug", "info", "warning", "error")
THEME_CHOICES: tuple[str | None, ...] = (None, *THEMES)
REFRESH_INTERVALS = (30, 60, 120, 300)
TIME_FORMATS = ("%H:%M:%S", "%H:%M", "%I:%M %p")
LOG_FILES = ("/dev/null", "rink.log")


# ---------------------------------------------------------------------------
# Settings actions
# ---------------------------------------------------------------------------


def _cycle(choices: tuple, current: object) -> object:
    if current not in choices:
        return choices[0]
    return choices[(choices.index(current) + 1) % len(choices)]


def apply_settings_action(config: Config, action: str) -> Config:
    """Return the config produced by activating a settings link.

    ``toggle:*`` flips a flag; ``edit:*`` cycles through the known values.
    """
    if action == "toggle:use_unicode":
        return config.with_display(use_unicode=not config.display.use_unicode)
    if action == "toggle:western_teams_first":
        return replace(config, display_standings_western_first=not config.display_standings_western_first)
    if action == "edit:theme":
        return config.with_display(theme_name=_cycle(THEME_CHOICES, config.display.theme_name))
    if action == "edit:log_level":
        return replace(config, log_level=_cycle(LOG_LEVELS, config.log_level))
    if action == "edit:log_file":
        return replace(config, log_file=_cycle(LOG_FILES, config.log_file))
    if action == "edit:refresh_interval":
        return replace(config, refresh_interval=_cycle(REFRESH_INTERVALS, config.refresh_interval))
    if action == "edit:time_format":
        return replace(config, time_format=_cycle(TIME_FORMATS, config.time_format))
    raise ValueError(f"unknown settings action: {action!r}")


# ---------------------------------------------------------------------------
# Focus and scrolling
# ---------------------------------------------------------------------------


def scroll_to_focus(nav: NavState, document: Document, viewport: Rect, ctx: RenderContext | None = None) -> None:
    """Adjust ``nav.scroll_offset`` so the focused unit is inside *viewport*.

    Scrolls the minimum distance; a unit taller than the viewport is aligned
    to its top.
    """
    view = DocumentView(document, nav.focus_index, nav.scroll_offset)
    span = view.focused_span(viewport.width, ctx)
    if span is None or viewport.height <= 0:
        return
    start, end = span
    offset = nav.scroll_offset
    if start < offset or end - start > viewport.height:
        offset = start
    elif end > offset + viewport.height:
        offset = end - viewport.height
    nav.scroll_offset = min(max(0, offset), view.max_scroll(viewport.width, viewport.height, ctx))


def move_focus(nav: NavState, document: Document, delta: int, viewport: Rect, ctx: RenderContext | None = None) -> bool:
    """Move focus by *delta* units, clamped.  Returns False at the top edge."""
    count = len(document.focusable_positions(_focus_context(viewport.width, ctx)))
    if count == 0:
        return delta >= 0
    if nav.focus_index is None:
        if delta < 0:
            return False
        nav.focus_index = 0
    else:
        current = min(nav.focus_index, count - 1)
        if current + delta < 0:
            return False
        nav.focus_index = min(current + delta, count - 1)
    scroll_to_focus(nav, document, viewport, ctx)
    return True


def scroll_page(nav: NavState, document: Document, pages: int, viewport: Rect, ctx: RenderContext | None = None) -> None:
    view = DocumentView(document, nav.focus_index, nav.scroll_offset)
    page = max(1, viewport.height - 1)
    limit = view.max_scroll(viewport.width, viewport.height, ctx)
    current = min(max(0, nav.scroll_offset), limit)
    nav.scroll_offset = min(max(0, current + pages * page), limit)


def _focus_context(width: int, ctx: RenderContext | None) -> FocusContext:
    if ctx is None:
        return FocusContext(available_width=width)
    return FocusContext.for_render(ctx, width)


# ---------------------------------------------------------------------------
# Reducer
# ---------------------------------------------------------------------------


def handle_key(
    state: AppState,
    store: ComponentStateStore,
    data: str,
    viewport: Rect,
    keybindings: NavigationKeybindingsManager | None = None,
) -> bool:
    """Apply raw key input *data*; returns True when the key was handled.

    *viewport* is the area the active document is drawn in (see
    :func:`rink.tui.components.content_viewport`).
    """
    keybindings = keybindings or get_navigation_keybindings()
    action = keybindings.action_for(data)
    if action is None:
        return False
    logger.debug("Key %r -> %s", data, action)
    return dispatch(state, store, action, viewport)


def dispatch(state: AppState, store: ComponentStateStore, action: NavigationAction, viewport: Rect) -> bool:
    nav = state.navigation
    system = state.system

    if action == "quit":
        system.running = False
        return True
    if action == "refresh":
        system.refresh_requested = True
        return True
    if action in ("tabLeft", "tabRight"):
        tab = nav.current_tab.next() if action == "tabRight" else nav.current_tab.previous()
        nav.switch_tab(tab)
        return True
    if action == "nextCategory":
        if nav.current_tab is not Tab.SETTINGS or not nav.document_stack.is_empty:
            return False
        _, settings_state = active_content(state, store)
        settings_state.select_category(settings_state.category.next())
        return True

    if not nav.focus_in_content:
        if action in ("focusDown", "activate"):
            nav.focus_in_content = True
            return True
        return False

    if action == "back":
        if nav.pop_document() is None:
            nav.focus_in_content = False
        return True

    ctx = RenderContext(system.config.display)
    document, target_nav = active_content(state, store)
    if document is None:
        return False

    if action in ("focusUp", "focusDown"):
        moved = move_focus(target_nav, document, -1 if action == "focusUp" else 1, viewport, ctx)
        if not moved and nav.document_stack.is_empty:
            nav.focus_in_content = False
        return True
    if action in ("pageUp", "pageDown"):
        scroll_page(target_nav, document, -1 if action == "pageUp" else 1, viewport, ctx)
        return True
    if action == "activate":
        return _activate(state, document, target_nav, viewport, ctx)
    return False


def _activate(state: AppState, document: Document, nav: NavState, viewport: Rect, ctx: RenderContext) -> bool:
    if nav.focus_index is None:
        return False
    focus = _focus_context(viewport.width, ctx)
    count = len(document.focusable_positions(focus))
    target = document.target_at(min(nav.focus_index, count - 1), focus)
    if isinstance(target, DocumentTarget):
        state.navigation.push_document(target.document)
        return True
    if isinstance(target, ActionTarget):
        try:
            config = apply_settings_action(state.system.config, target.action)
        except ValueError as e:
            logger.warning("%s", e)
            state.system.set_status(str(e), error=True)
            return False
        state.system.set_config(config)
        state.system.set_status(None)
        return True
    return False
