"""Tests for rink.tui.config -- colours, themes, render styles and persistence."""

from __future__ import annotations

import json

import pytest

from rink.tui.config import (
    CONFIG_ENV_VAR,
    DEFAULT_REFRESH_INTERVAL_SECONDS,
    THEMES,
    Config,
    ConfigManager,
    DisplayConfig,
    RenderContext,
    config_from_dict,
    config_path,
    config_to_dict,
    deep_merge_settings,
    describe_color,
    format_color,
    load_config,
    parse_color,
    save_config,
)
from rink.tui.style import Modifier, Style


# ---------------------------------------------------------------------------
# Colours
# ---------------------------------------------------------------------------


class TestParseColor:
    def test_named(self):
        assert parse_color("red") == "red"
        assert parse_color("  DarkGray ") == "darkgray"

    def test_grey_spelling(self):
        assert parse_color("grey") == "gray"
        assert parse_color("dark grey") == "darkgray"

    def test_extra_names(self):
        assert parse_color("seafoam") == (159, 226, 191)
        assert parse_color("cool gray") == (159, 168, 176)

    def test_hex(self):
        assert parse_color("#ff8000") == (255, 128, 0)
        assert parse_color("#f00") == (255, 0, 0)

    def test_rgb_triple(self):
        assert parse_color("255, 0, 10") == (255, 0, 10)

    @pytest.mark.parametrize("value", ["bogus", "#12345", "#gggggg", "1,2", "300,0,0", "a,b,c", ""])
    def test_invalid(self, value):
        assert parse_color(value) is None

    def test_format_reads_back(self):
        assert parse_color(format_color((1, 2, 3))) == (1, 2, 3)
        assert format_color("red") == "red"

    def test_describe(self):
        assert describe_color((255, 0, 0)) == "rgb(255, 0, 0)"
        assert describe_color("blue") == "blue"


# ---------------------------------------------------------------------------
# Styles
# ---------------------------------------------------------------------------


class TestDisplayStyles:
    def test_no_theme_is_plain(self):
        display = DisplayConfig()
        assert display.theme is None
        assert display.text_style() == Style()
        assert display.base_style() == Style()

    def test_no_theme_selection_is_reversed(self):
        assert DisplayConfig().selection_style().has(Modifier.REVERSED)

    def test_headings(self):
        display = DisplayConfig()
        assert display.heading_style(1).has(Modifier.BOLD)
        assert display.heading_style(3).has(Modifier.UNDERLINED)

    def test_theme_colours(self):
        display = DisplayConfig(theme_name="orange")
        theme = THEMES["orange"]
        assert display.text_style().fg == theme.fg
        assert display.selection_style() == Style(
            fg=theme.selection_text_fg, bg=theme.selection_text_bg, add_modifier=Modifier.BOLD
        )

    def test_dim_darkens(self):
        display = DisplayConfig(theme_name="orange")
        assert display.text_style(dim=True).fg == (127, 87, 32)

    def test_unknown_theme_name(self):
        assert DisplayConfig(theme_name="nope").theme is None

    def test_background_theme(self):
        display = DisplayConfig(theme_name="habs")
        assert display.base_style() == Style(bg=(175, 30, 45))
        assert display.base_style(dim=True).bg == (148, 25, 38)

    def test_error_style(self):
        assert DisplayConfig(error_fg="magenta").error_style() == Style(fg="magenta")

    def test_box_chars_follow_unicode_flag(self):
        assert DisplayConfig(use_unicode=False).box_chars.horizontal == "-"
        assert DisplayConfig().box_chars.horizontal == "─"


class TestRenderContext:
    def test_unfocused_uses_dim_styles(self):
        ctx = RenderContext(DisplayConfig(theme_name="orange"))
        assert ctx.with_focus(False).text_style() == ctx.config.text_style(dim=True)
        assert ctx.text_style() == ctx.config.text_style()

    def test_with_focus_returns_copy(self):
        ctx = RenderContext()
        assert ctx.with_focus(False) is not ctx
        assert ctx.focused

    def test_passthrough(self):
        ctx = RenderContext(DisplayConfig(use_unicode=False))
        assert not ctx.use_unicode
        assert ctx.box_chars.selector == ">"
        assert ctx.theme is None


# ---------------------------------------------------------------------------
# Settings dictionaries
# ---------------------------------------------------------------------------


class TestDeepMergeSettings:
    def test_nested_merge(self):
        merged = deep_merge_settings({"a": 1, "d": {"x": 1, "y": 2}}, {"d": {"y": 3}})
        assert merged == {"a": 1, "d": {"x": 1, "y": 3}}

    def test_none_is_skipped(self):
        assert deep_merge_settings({"a": 1}, {"a": None}) == {"a": 1}

    def test_lists_replace(self):
        assert deep_merge_settings({"a": [1, 2]}, {"a": [3]}) == {"a": [3]}


class TestConfigFromDict:
    def test_empty_gives_defaults(self):
        assert config_from_dict({}) == Config()

    def test_camel_case_keys(self):
        config = config_from_dict(
            {
                "logLevel": "debug",
                "refreshInterval": 30,
                "displayStandingsWesternFirst": True,
                "timeFormat": "%H:%M",
                "display": {"useUnicode": False, "theme": "green", "errorFg": "#00ff00"},
            }
        )
        assert config.log_level == "debug"
        assert config.refresh_interval == 30
        assert config.display_standings_western_first
        assert config.time_format == "%H:%M"
        assert config.display == DisplayConfig(use_unicode=False, theme_name="green", error_fg=(0, 255, 0))

    def test_unknown_theme_dropped(self):
        assert config_from_dict({"display": {"theme": "nope"}}).display.theme_name is None

    def test_bad_refresh_interval(self):
        assert config_from_dict({"refreshInterval": "soon"}).refresh_interval == DEFAULT_REFRESH_INTERVAL_SECONDS

    def test_bad_error_color(self):
        assert config_from_dict({"display": {"errorFg": "nope"}}).display.error_fg == (255, 0, 0)

    def test_to_dict_omits_unset_theme(self):
        assert "theme" not in config_to_dict(Config())["display"]


# ---------------------------------------------------------------------------
# Persistence
# ---------------------------------------------------------------------------


class TestConfigFiles:
    def test_missing_file(self, tmp_path):
        config, error = load_config(str(tmp_path / "missing.json"))
        assert config == Config()
        assert error is None

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("{not json", encoding="utf-8")
        config, error = load_config(str(path))
        assert config == Config()
        assert error is not None

    def test_root_must_be_object(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("[1, 2]", encoding="utf-8")
        _, error = load_config(str(path))
        assert isinstance(error, ValueError)

    def test_save_then_load(self, tmp_path):
        path = str(tmp_path / "nested" / "config.json")
        config = Config(log_level="error", display=DisplayConfig(theme_name="blue", error_fg=(1, 2, 3)))
        save_config(config, path)
        loaded, error = load_config(path)
        assert error is None
        assert loaded == config

    def test_saved_file_uses_camel_case(self, tmp_path):
        path = tmp_path / "config.json"
        save_config(Config(), str(path))
        data = json.loads(path.read_text(encoding="utf-8"))
        assert data["refreshInterval"] == DEFAULT_REFRESH_INTERVAL_SECONDS
        assert data["display"]["useUnicode"] is True

    def test_config_path_env_override(self, monkeypatch, tmp_path):
        monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "x.json"))
        assert config_path() == str(tmp_path / "x.json")

    def test_config_path_default(self, monkeypatch):
        monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
        assert config_path().endswith("config.json")


class TestConfigManager:
    def test_update_writes_file(self, tmp_path):
        path = tmp_path / "config.json"
        manager = ConfigManager.create(str(path))
        manager.update(Config(log_level="debug"))
        assert manager.config.log_level == "debug"
        assert json.loads(path.read_text(encoding="utf-8"))["logLevel"] == "debug"

    def test_broken_file_is_never_overwritten(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("{broken", encoding="utf-8")
        manager = ConfigManager.create(str(path))
        assert manager.load_error is not None
        manager.update(Config(log_level="debug"))
        assert manager.config.log_level == "debug"
        assert path.read_text(encoding="utf-8") == "{broken"

    def test_in_memory(self):
        manager = ConfigManager.in_memory()
        manager.update(Config(refresh_interval=5))
        assert manager.config.refresh_interval == 5
