"""Navigation keybindings manager."""

from __future__ import annotations

from typing import Literal

from rink.tui.keys import KeyId, matches_key

NavigationAction = Literal[
    # Tabs
    "tabLeft",
    "tabRight",
    # Focus and scrolling
    "focusUp",
    "focusDown",
    "pageUp",
    "pageDown",
    # Drill-down
    "activate",
    "back",
    # Settings
    "nextCategory",
    # Application
    "refresh",
    "quit",
]

NavigationKeybindingsConfig = dict[NavigationAction, KeyId | list[KeyId]]

DEFAULT_NAVIGATION_KEYBINDINGS: dict[NavigationAction, KeyId | list[KeyId]] = {
    # Tabs
    "tabLeft": "left",
    "tabRight": "right",
    # Focus and scrolling
    "focusUp": ["up", "k"],
    "focusDown": ["down", "j"],
    "pageUp": "pageUp",
    "pageDown": ["pageDown", "space"],
    # Drill-down
    "activate": "enter",
    "back": ["escape", "backspace"],
    # Settings
    "nextCategory": "tab",
    # Application
    "refresh": "r",
    "quit": ["q", "ctrl+c"],
}


class NavigationKeybindingsManager:
    """Maps navigation actions to keys, with per-action overrides."""

    def __init__(self, config: NavigationKeybindingsConfig | None = None) -> None:
        self._action_to_keys: dict[NavigationAction, list[KeyId]] = {}
        self._build_maps(config or {})

    def _build_maps(self, config: NavigationKeybindingsConfig) -> None:
        self._action_to_keys.clear()

        # Start with defaults
        for action, keys in DEFAULT_NAVIGATION_KEYBINDINGS.items():
            key_array = keys if isinstance(keys, list) else [keys]
            self._action_to_keys[action] = list(key_array)

        # Override with user config
        for action, keys in config.items():
            key_array = keys if isinstance(keys, list) else [keys]
            self._action_to_keys[action] = list(key_array)

    def matches(self, data: str, action: NavigationAction) -> bool:
        """Check if input matches a specific action."""
        keys = self._action_to_keys.get(action)
        if not keys:
            return False
        return any(matches_key(data, key) for key in keys)

    def action_for(self, data: str) -> NavigationAction | None:
        """First action (in declaration order) bound to *data*."""
        for action in self._action_to_keys:
            if self.matches(data, action):
                return action
        return None

    def get_keys(self, action: NavigationAction) -> list[KeyId]:
        """Get keys bound to an action."""
        return self._action_to_keys.get(action, [])

    def set_config(self, config: NavigationKeybindingsConfig) -> None:
        """Update configuration."""
        self._build_maps(config)


_global_navigation_keybindings: NavigationKeybindingsManager | None = None


def get_navigation_keybindings() -> NavigationKeybindingsManager:
    global _global_navigation_keybindings
    if _global_navigation_keybindings is None:
        _global_navigation_keybindings = NavigationKeybindingsManager()
    return _global_navigation_keybindings


def set_navigation_keybindings(manager: NavigationKeybindingsManager) -> None:
    global _global_navigation_keybindings
    _global_navigation_keybindings = manager
