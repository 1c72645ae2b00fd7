"""Settings panel: one document per settings category.

Every editable setting is a link whose target is an action string
(``"edit:theme"``, ``"toggle:use_unicode"``) handled by
:func:`rink.tui.update.apply_settings_action`.
"""

from __future__ import annotations

from rink.tui.config import Config, describe_color
from rink.tui.document import Document, DocumentBuilder, DocumentElement, FocusContext
from rink.tui.navigation import ActionTarget, SettingsCategory


def _setting(label: str, value: object, width: int) -> str:
    return f"{label:<{width}}   {value}"


class SettingsDocument(Document):
    def __init__(self, category: SettingsCategory, config: Config) -> None:
        self.category = category
        self.config = config

    def _logging(self, builder: DocumentBuilder, focus: FocusContext) -> None:
        width = 10
        builder.spacer(1).link_with_focus(
            "log_level",
            _setting("Log Level:", self.config.log_level, width),
            ActionTarget("edit:log_level"),
            focus,
        )
        builder.spacer(1).link_with_focus(
            "log_file",
            _setting("Log File:", self.config.log_file, width),
            ActionTarget("edit:log_file"),
            focus,
        )

    def _display(self, builder: DocumentBuilder, focus: FocusContext) -> None:
        width = 12
        display = self.config.display
        theme = display.theme
        builder.spacer(1).link_with_focus(
            "theme",
            _setting("Theme:", theme.name if theme is not None else "none", width),
            ActionTarget("edit:theme"),
            focus,
        )
        builder.spacer(1).link_with_focus(
            "use_unicode",
            _setting("Use Unicode:", str(display.use_unicode).lower(), width),
            ActionTarget("toggle:use_unicode"),
            focus,
        )
        builder.spacer(1).text(_setting("Error Color:", describe_color(display.error_fg), width))

    def _data(self, builder: DocumentBuilder, focus: FocusContext) -> None:
        width = 20
        builder.spacer(1).link_with_focus(
            "refresh_interval",
            _setting("Refresh Interval:", f"{self.config.refresh_interval} seconds", width),
            ActionTarget("edit:refresh_interval"),
            focus,
        )
        builder.spacer(1).link_with_focus(
            "western_teams_first",
            _setting("Western Teams First:", str(self.config.display_standings_western_first).lower(), width),
            ActionTarget("toggle:western_teams_first"),
            focus,
        )
        builder.spacer(1).link_with_focus(
            "time_format",
            _setting("Time Format:", self.config.time_format, width),
            ActionTarget("edit:time_format"),
            focus,
        )

    def build(self, focus: FocusContext) -> list[DocumentElement]:
        builder = DocumentBuilder()
        if self.category is SettingsCategory.LOGGING:
            self._logging(builder, focus)
        elif self.category is SettingsCategory.DISPLAY:
            self._display(builder, focus)
        else:
            self._data(builder, focus)
        return builder.build()

    def title(self) -> str:
        return f"{self.category.label} Settings"

    def id(self) -> str:
        return f"settings_{self.category.value}"
