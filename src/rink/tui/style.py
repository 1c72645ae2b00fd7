"""Cell styling: colours, text modifiers and composable styles."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import IntFlag
from typing import Union

# A colour is either a named terminal colour ("red", "darkgray", ...) or an
# RGB triple.
Color = Union[str, tuple[int, int, int]]

NAMED_COLORS: tuple[str, ...] = (
    "black",
    "red",
    "green",
    "yellow",
    "blue",
    "magenta",
    "cyan",
    "gray",
    "darkgray",
    "lightred",
    "lightgreen",
    "lightyellow",
    "lightblue",
    "lightmagenta",
    "lightcyan",
    "white",
)


class Modifier(IntFlag):
    NONE = 0
    BOLD = 1
    DIM = 2
    ITALIC = 4
    UNDERLINED = 8
    REVERSED = 16


@dataclass(frozen=True)
class Style:
    """Foreground/background colours plus modifiers to add and remove.

    Styles compose with :meth:`patch`: fields set on the patch win, and
    modifiers accumulate.
    """

    fg: Color | None = None
    bg: Color | None = None
    add_modifier: Modifier = Modifier.NONE
    sub_modifier: Modifier = Modifier.NONE

    def with_fg(self, color: Color | None) -> Style:
        return replace(self, fg=color)

    def with_bg(self, color: Color | None) -> Style:
        return replace(self, bg=color)

    def add(self, modifier: Modifier) -> Style:
        return replace(
            self,
            add_modifier=self.add_modifier | modifier,
            sub_modifier=self.sub_modifier & ~modifier,
        )

    def remove(self, modifier: Modifier) -> Style:
        return replace(
            self,
            add_modifier=self.add_modifier & ~modifier,
            sub_modifier=self.sub_modifier | modifier,
        )

    def patch(self, other: Style) -> Style:
        """Return this style overlaid with *other*."""
        add = (self.add_modifier & ~other.sub_modifier) | other.add_modifier
        sub = (self.sub_modifier & ~other.add_modifier) | other.sub_modifier
        return Style(
            fg=other.fg if other.fg is not None else self.fg,
            bg=other.bg if other.bg is not None else self.bg,
            add_modifier=add,
            sub_modifier=sub,
        )

    def has(self, modifier: Modifier) -> bool:
        return bool(self.add_modifier & modifier)


def darken(color: Color, factor: float) -> Color:
    """Scale an RGB colour towards black; named colours are returned as-is."""
    if isinstance(color, tuple):
        r, g, b = color
        return (int(r * factor), int(g * factor), int(b * factor))
    return color
