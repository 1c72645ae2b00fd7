"""rink-tui: document-based, keyboard-navigable hockey scoreboard renderer."""

# Grid primitives
from rink.tui.box_chars import BoxChars
from rink.tui.buffer import Buffer, Cell, Rect

# Component state
from rink.tui.component_store import ComponentStateStore

# Components (re-exported from components package)
from rink.tui.components import (
    App,
    BreadcrumbWidget,
    DocumentPanel,
    ScoresTab,
    SettingsTab,
    StandingsTab,
    StatusBar,
    TabbedPanel,
    content_viewport,
    render_frame,
)

# Configuration
from rink.tui.config import (
    THEMES,
    Config,
    ConfigManager,
    DisplayConfig,
    RenderContext,
    Theme,
    configure_logging,
    load_config,
    save_config,
)

# Document engine
from rink.tui.document import (
    Document,
    DocumentBuilder,
    DocumentElement,
    DocumentView,
    FocusablePosition,
    FocusContext,
)

# Concrete documents
from rink.tui.documents import (
    BoxscoreDocument,
    MessageDocument,
    PlayerDetailDocument,
    ScoresDocument,
    SettingsDocument,
    StandingsDocument,
    TeamDetailDocument,
)

# Element tree
from rink.tui.element import (
    Element,
    ElementWidget,
    Fill,
    Length,
    Min,
    Percentage,
    WidgetElement,
    horizontal,
    render_element,
    vertical,
)

# Keybindings
from rink.tui.keybindings import (
    DEFAULT_NAVIGATION_KEYBINDINGS,
    NavigationAction,
    NavigationKeybindingsManager,
    get_navigation_keybindings,
    set_navigation_keybindings,
)

# Keyboard input handling
from rink.tui.keys import Key, KeyId, matches_key, parse_key

# Navigation
from rink.tui.navigation import (
    ActionTarget,
    BoxscoreRef,
    DocumentStack,
    DocumentStackEntry,
    DocumentTarget,
    PlayerDetailRef,
    SettingsCategory,
    StackedDocument,
    Tab,
    TeamDetailRef,
)

# Application state
from rink.tui.state import AppState, DataState, LoadingKey, NavigationState, SystemState, UiState

# Styling
from rink.tui.style import Color, Modifier, Style

# Tables
from rink.tui.table import Alignment, ColumnDef, TableWidget

# Input reducer
from rink.tui.update import apply_settings_action, handle_key, scroll_to_focus

__all__ = [
    # Grid primitives
    "BoxChars",
    "Buffer",
    "Cell",
    "Rect",
    # Component state
    "ComponentStateStore",
    # Components
    "App",
    "BreadcrumbWidget",
    "DocumentPanel",
    "ScoresTab",
    "SettingsTab",
    "StandingsTab",
    "StatusBar",
    "TabbedPanel",
    "content_viewport",
    "render_frame",
    # Configuration
    "THEMES",
    "Config",
    "ConfigManager",
    "DisplayConfig",
    "RenderContext",
    "Theme",
    "configure_logging",
    "load_config",
    "save_config",
    # Document engine
    "Document",
    "DocumentBuilder",
    "DocumentElement",
    "DocumentView",
    "FocusablePosition",
    "FocusContext",
    # Concrete documents
    "BoxscoreDocument",
    "MessageDocument",
    "PlayerDetailDocument",
    "ScoresDocument",
    "SettingsDocument",
    "StandingsDocument",
    "TeamDetailDocument",
    # Element tree
    "Element",
    "ElementWidget",
    "Fill",
    "Length",
    "Min",
    "Percentage",
    "WidgetElement",
    "horizontal",
    "render_element",
    "vertical",
    # Keybindings
    "DEFAULT_NAVIGATION_KEYBINDINGS",
    "NavigationAction",
    "NavigationKeybindingsManager",
    "get_navigation_keybindings",
    "set_navigation_keybindings",
    # Keys
    "Key",
    "KeyId",
    "matches_key",
    "parse_key",
    # Navigation
    "ActionTarget",
    "BoxscoreRef",
    "DocumentStack",
    "DocumentStackEntry",
    "DocumentTarget",
    "PlayerDetailRef",
    "SettingsCategory",
    "StackedDocument",
    "Tab",
    "TeamDetailRef",
    # Application state
    "AppState",
    "DataState",
    "LoadingKey",
    "NavigationState",
    "SystemState",
    "UiState",
    # Styling
    "Color",
    "Modifier",
    "Style",
    # Tables
    "Alignment",
    "ColumnDef",
    "TableWidget",
    # Input reducer
    "apply_settings_action",
    "handle_key",
    "scroll_to_focus",
]
