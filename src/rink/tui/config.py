"""Display configuration, colour themes and JSON settings persistence.

``Config`` is the process-wide settings snapshot.  ``DisplayConfig`` owns the
style accessors used by every renderer; ``RenderContext`` wraps it with the
focus state of the panel being drawn so unfocused panels render dimmed.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any

from rink.tui.box_chars import BoxChars
from rink.tui.style import NAMED_COLORS, Color, Modifier, Style, darken

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "RINK_CONFIG"

DEFAULT_DARKENING_FACTOR = 0.5
BRIGHT_BG_DARKENING_FACTOR = 0.85
DEFAULT_REFRESH_INTERVAL_SECONDS = 60

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


# ---------------------------------------------------------------------------
# Themes
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Theme:
    """A colour palette.

    ``darkening_factor`` scales every colour towards black when the panel
    using the theme is not focused (0.0 = black, 1.0 = unchanged).
    """

    name: str
    bg: Color | None
    emphasis_fg: Color
    fg: Color
    boxchar_fg: Color
    selection_text_fg: Color
    selection_text_bg: Color
    darkening_factor: float = DEFAULT_DARKENING_FACTOR

    def dark(self, color: Color) -> Color:
        return darken(color, self.darkening_factor)

    def bg_dark(self) -> Color | None:
        return self.dark(self.bg) if self.bg is not None else None


def _theme(name, bg, emphasis_fg, fg, boxchar_fg, sel_fg, sel_bg, factor=DEFAULT_DARKENING_FACTOR):
    return Theme(name, bg, emphasis_fg, fg, boxchar_fg, sel_fg, sel_bg, factor)


THEMES: dict[str, Theme] = {
    "orange": _theme("Orange", None, (255, 214, 128), (255, 175, 64), (226, 108, 34), (0, 0, 0), (255, 175, 64)),
    "green": _theme("Green", None, (175, 255, 135), (95, 255, 175), (0, 255, 0), (0, 0, 0), (95, 255, 175)),
    "blue": _theme("Blue", None, (175, 255, 255), (95, 135, 255), (0, 95, 255), (255, 255, 255), (95, 135, 255)),
    "purple": _theme("Purple", None, (255, 175, 255), (175, 135, 255), (135, 95, 175), (0, 0, 0), (175, 135, 255)),
    "white": _theme("White", None, (255, 255, 255), (192, 192, 192), (128, 128, 128), (0, 0, 0), (192, 192, 192)),
    "red": _theme("Red", None, (255, 175, 175), (255, 95, 95), (255, 0, 0), (0, 0, 0), (255, 95, 95)),
    "yellow": _theme("Yellow", None, (255, 255, 175), (255, 255, 95), (255, 215, 0), (0, 0, 0), (255, 255, 95)),
    "cyan": _theme("Cyan", None, (175, 255, 255), (95, 255, 255), (0, 255, 255), (0, 0, 0), (95, 255, 255)),
    "north_stars": _theme("North Stars", None, (240, 240, 240), (198, 146, 20), (0, 122, 51), (0, 0, 0), (198, 146, 20)),
    "habs": _theme(
        "Habs",
        (175, 30, 45),
        (255, 255, 255),
        (255, 255, 255),
        (45, 53, 124),
        (255, 255, 255),
        (45, 53, 124),
        BRIGHT_BG_DARKENING_FACTOR,
    ),
    "sabres": _theme("Sabres", None, (255, 255, 255), (255, 184, 28), (0, 48, 135), (0, 0, 0), (255, 184, 28)),
    "sharks": _theme("Sharks", None, (255, 255, 255), (0, 109, 117), (234, 114, 0), (255, 255, 255), (0, 109, 117)),
    "bruins": _theme("Bruins", None, (255, 255, 255), (252, 181, 20), (196, 196, 196), (0, 0, 0), (252, 181, 20)),
    "islanders": _theme("Islanders", None, (255, 255, 255), (252, 76, 2), (0, 58, 162), (0, 0, 0), (252, 76, 2)),
    "flames": _theme("Flames", None, (255, 255, 255), (200, 16, 46), (241, 190, 72), (255, 255, 255), (200, 16, 46)),
    "red_wings": _theme("Red Wings", None, (255, 82, 102), (206, 17, 38), (255, 255, 255), (255, 255, 255), (206, 17, 38)),
}


# ---------------------------------------------------------------------------
# Colour parsing
# ---------------------------------------------------------------------------

_EXTRA_COLORS: dict[str, tuple[int, int, int]] = {
    "orange": (255, 165, 0),
    "seafoam": (159, 226, 191),
    "deepred": (226, 74, 74),
    "coral": (255, 107, 107),
    "burntorange": (255, 140, 66),
    "amber": (255, 200, 87),
    "goldenrod": (232, 185, 35),
    "olive": (166, 166, 89),
    "chartreuse": (140, 207, 77),
    "greenapple": (88, 196, 114),
    "emerald": (46, 184, 114),
    "teal": (42, 168, 118),
    "cyansky": (77, 208, 225),
    "azure": (33, 150, 243),
    "cobaltblue": (61, 90, 254),
    "indigo": (92, 107, 192),
    "violet": (126, 87, 194),
    "orchid": (186, 104, 200),
    "hotpink": (255, 119, 169),
    "salmon": (255, 158, 157),
    "beige": (234, 210, 172),
    "coolgray": (159, 168, 176),
    "slate": (96, 125, 139),
    "charcoal": (55, 71, 79),
}


def parse_color(value: str) -> Color | None:
    """Parse a colour name, ``#rgb``/``#rrggbb`` hex string or ``r,g,b`` triple.

    Returns ``None`` for anything unrecognised.
    """
    s = value.strip().lower()
    compact = s.replace(" ", "")

    if compact == "grey":
        return "gray"
    if compact == "darkgrey":
        return "darkgray"
    if compact in NAMED_COLORS:
        return compact
    if compact in _EXTRA_COLORS:
        return _EXTRA_COLORS[compact]

    if s.startswith("#"):
        digits = s[1:]
        if len(digits) == 3:
            digits = "".join(ch * 2 for ch in digits)
        if len(digits) == 6:
            try:
                return (int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))
            except ValueError:
                return None
        return None

    if "," in s:
        parts = s.split(",")
        if len(parts) != 3:
            return None
        try:
            rgb = tuple(int(p.strip()) for p in parts)
        except ValueError:
            return None
        if all(0 <= c <= 255 for c in rgb):
            return rgb  # type: ignore[return-value]
    return None


def format_color(color: Color) -> str:
    """Serialise a colour the way :func:`parse_color` reads it back."""
    if isinstance(color, tuple):
        return "{},{},{}".format(*color)
    return color


def describe_color(color: Color) -> str:
    """Human-readable colour for display (``rgb(255, 0, 0)`` or the name)."""
    if isinstance(color, tuple):
        return "rgb({}, {}, {})".format(*color)
    return color


# ---------------------------------------------------------------------------
# Display configuration
# ---------------------------------------------------------------------------


@dataclass
class DisplayConfig:
    use_unicode: bool = True
    theme_name: str | None = None
    error_fg: Color = (255, 0, 0)

    @property
    def theme(self) -> Theme | None:
        if self.theme_name is None:
            return None
        return THEMES.get(self.theme_name)

    @property
    def box_chars(self) -> BoxChars:
        return BoxChars.from_use_unicode(self.use_unicode)

    # --- Style accessors ---

    def _themed(self, fg_attr: str, dim: bool) -> Style:
        theme = self.theme
        if theme is None:
            return Style()
        fg = getattr(theme, fg_attr)
        bg = theme.bg
        if dim:
            fg = theme.dark(fg)
            bg = theme.bg_dark()
        return Style(fg=fg, bg=bg)

    def base_style(self, dim: bool = False) -> Style:
        theme = self.theme
        if theme is None or theme.bg is None:
            return Style()
        return Style(bg=theme.bg_dark() if dim else theme.bg)

    def text_style(self, dim: bool = False) -> Style:
        return self._themed("fg", dim)

    def boxchar_style(self, dim: bool = False) -> Style:
        return self._themed("boxchar_fg", dim)

    def muted_style(self, dim: bool = False) -> Style:
        """Rules, underlines and separators."""
        return self.boxchar_style(dim)

    def heading_style(self, level: int, dim: bool = False) -> Style:
        base = self.text_style(dim)
        if level in (1, 2):
            return base.add(Modifier.BOLD)
        return base.add(Modifier.UNDERLINED)

    def emphasis_style(self, dim: bool = False) -> Style:
        theme = self.theme
        if theme is None:
            return Style(add_modifier=Modifier.BOLD)
        return self._themed("emphasis_fg", dim).add(Modifier.BOLD)

    def selection_style(self, dim: bool = False) -> Style:
        """Highlight for the focused link or table cell.

        Without a theme the cell is shown reversed.
        """
        theme = self.theme
        if theme is None:
            return Style(add_modifier=Modifier.REVERSED | Modifier.BOLD)
        fg, bg = theme.selection_text_fg, theme.selection_text_bg
        if dim:
            fg, bg = theme.dark(fg), theme.dark(bg)
        return Style(fg=fg, bg=bg, add_modifier=Modifier.BOLD)

    def error_style(self) -> Style:
        return Style(fg=self.error_fg)


@dataclass
class Config:
    log_level: str = "info"
    log_file: str = "/dev/null"
    refresh_interval: int = DEFAULT_REFRESH_INTERVAL_SECONDS
    display_standings_western_first: bool = False
    time_format: str = "%H:%M:%S"
    display: DisplayConfig = field(default_factory=DisplayConfig)

    def with_display(self, **changes: Any) -> Config:
        return replace(self, display=replace(self.display, **changes))


# ---------------------------------------------------------------------------
# Render context
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class RenderContext:
    """Style context for one render pass over one panel.

    Picks the normal or dimmed variant of every style depending on whether
    the panel being drawn has keyboard focus.
    """

    config: DisplayConfig = field(default_factory=DisplayConfig)
    focused: bool = True

    @property
    def box_chars(self) -> BoxChars:
        return self.config.box_chars

    @property
    def use_unicode(self) -> bool:
        return self.config.use_unicode

    @property
    def theme(self) -> Theme | None:
        return self.config.theme

    def with_focus(self, focused: bool) -> RenderContext:
        return replace(self, focused=focused)

    def base_style(self) -> Style:
        return self.config.base_style(not self.focused)

    def text_style(self) -> Style:
        return self.config.text_style(not self.focused)

    def boxchar_style(self) -> Style:
        return self.config.boxchar_style(not self.focused)

    def muted_style(self) -> Style:
        return self.config.muted_style(not self.focused)

    def heading_style(self, level: int) -> Style:
        return self.config.heading_style(level, not self.focused)

    def emphasis_style(self) -> Style:
        return self.config.emphasis_style(not self.focused)

    def selection_style(self) -> Style:
        return self.config.selection_style(not self.focused)

    def error_style(self) -> Style:
        return self.config.error_style()


# ---------------------------------------------------------------------------
# JSON persistence
# ---------------------------------------------------------------------------


def _config_defaults() -> dict[str, Any]:
    return config_to_dict(Config())


def config_to_dict(config: Config) -> dict[str, Any]:
    display: dict[str, Any] = {
        "useUnicode": config.display.use_unicode,
        "errorFg": format_color(config.display.error_fg),
    }
    if config.display.theme_name is not None:
        display["theme"] = config.display.theme_name
    return {
        "logLevel": config.log_level,
        "logFile": config.log_file,
        "refreshInterval": config.refresh_interval,
        "displayStandingsWesternFirst": config.display_standings_western_first,
        "timeFormat": config.time_format,
        "display": display,
    }


def config_from_dict(data: dict[str, Any]) -> Config:
    """Build a ``Config`` from camelCase settings, ignoring bad values."""
    merged = deep_merge_settings(_config_defaults(), data)
    display = merged.get("display") or {}

    error_fg = parse_color(str(display.get("errorFg", ""))) or DisplayConfig().error_fg
    theme_name = display.get("theme")
    if theme_name is not None and theme_name not in THEMES:
        logger.debug("Unknown theme %r, falling back to no theme", theme_name)
        theme_name = None

    try:
        refresh_interval = int(merged["refreshInterval"])
    except (TypeError, ValueError):
        logger.debug("Invalid refreshInterval %r", merged["refreshInterval"])
        refresh_interval = DEFAULT_REFRESH_INTERVAL_SECONDS

    return Config(
        log_level=str(merged["logLevel"]),
        log_file=str(merged["logFile"]),
        refresh_interval=refresh_interval,
        display_standings_western_first=bool(merged["displayStandingsWesternFirst"]),
        time_format=str(merged["timeFormat"]),
        display=DisplayConfig(
            use_unicode=bool(display.get("useUnicode", True)),
            theme_name=theme_name,
            error_fg=error_fg,
        ),
    )


def deep_merge_settings(base: dict[str, Any], overrides: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge overrides into base settings.

    For nested dicts, merge recursively. For primitives and arrays,
    override value wins completely.
    """
    result = dict(base)
    for key, value in overrides.items():
        if value is None:
            continue
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge_settings(result[key], value)
        else:
            result[key] = value
    return result


def config_path() -> str:
    """Settings file location: ``$RINK_CONFIG`` or ``~/.config/rink/config.json``."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return override
    return os.path.join(os.path.expanduser("~"), ".config", "rink", "config.json")


def _load_from_file(path: str) -> tuple[dict[str, Any], Exception | None]:
    """Load settings from a JSON file. Returns (settings, error)."""
    if not os.path.exists(path):
        return {}, None
    try:
        content = Path(path).read_text(encoding="utf-8")
        settings = json.loads(content)
    except (OSError, json.JSONDecodeError) as e:
        return {}, e
    if not isinstance(settings, dict):
        return {}, ValueError(f"settings root must be an object, got {type(settings).__name__}")
    return settings, None


def load_config(path: str | None = None) -> tuple[Config, Exception | None]:
    """Read the settings file, returning defaults plus the error if unreadable."""
    path = path or config_path()
    settings, error = _load_from_file(path)
    if error is not None:
        logger.warning("Could not read settings from %s: %s", path, error)
    return config_from_dict(settings), error


def save_config(config: Config, path: str | None = None) -> None:
    path = path or config_path()
    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    Path(path).write_text(
        json.dumps(config_to_dict(config), indent=2, ensure_ascii=False) + "\n",
        encoding="utf-8",
    )
    logger.debug("Saved settings to %s", path)


class ConfigManager:
    """Holds the live ``Config`` and writes changes back to disk.

    A manager whose file failed to parse never overwrites it.
    """

    def __init__(self, config: Config, path: str | None, load_error: Exception | None = None) -> None:
        self._config = config
        self._path = path
        self._load_error = load_error

    @classmethod
    def create(cls, path: str | None = None) -> ConfigManager:
        path = path or config_path()
        config, error = load_config(path)
        return cls(config, path, error)

    @classmethod
    def in_memory(cls, config: Config | None = None) -> ConfigManager:
        return cls(config or Config(), None)

    @property
    def config(self) -> Config:
        return self._config

    @property
    def load_error(self) -> Exception | None:
        return self._load_error

    def update(self, config: Config) -> None:
        self._config = config
        if self._path is None:
            return
        if self._load_error is not None:
            logger.warning("Not saving settings: %s failed to load", self._path)
            return
        save_config(config, self._path)


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------


def configure_logging(config: Config) -> None:
    """Configure root logging from the settings (for embedding applications)."""
    level = getattr(logging, config.log_level.upper(), logging.INFO)
    kwargs: dict[str, Any] = {"level": level, "format": LOG_FORMAT, "force": True}
    if config.log_file:
        kwargs["filename"] = config.log_file
    logging.basicConfig(**kwargs)
