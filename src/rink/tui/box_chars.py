"""Box-drawing glyph sets (unicode and ASCII fallback)."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class BoxChars:
    # Single-line characters
    horizontal: str
    vertical: str
    top_left: str
    top_right: str
    bottom_left: str
    bottom_right: str
    left_junction: str
    right_junction: str

    # Double-line characters
    double_horizontal: str
    double_vertical: str

    # Mixed double-horizontal/single-vertical (team boxscore borders)
    mixed_dh_top_left: str
    mixed_dh_top_right: str
    mixed_dh_bottom_left: str
    mixed_dh_bottom_right: str
    mixed_dh_left_t: str
    mixed_dh_right_t: str

    # Other characters
    selector: str
    breadcrumb_separator: str
    tab_separator: str
    checkmark: str

    @classmethod
    def unicode(cls) -> BoxChars:
        return cls(
            horizontal="─",
            vertical="│",
            top_left="╭",
            top_right="╮",
            bottom_left="╰",
            bottom_right="╯",
            left_junction="├",
            right_junction="┤",
            double_horizontal="═",
            double_vertical="║",
            mixed_dh_top_left="╒",
            mixed_dh_top_right="╕",
            mixed_dh_bottom_left="╘",
            mixed_dh_bottom_right="╛",
            mixed_dh_left_t="╞",
            mixed_dh_right_t="╡",
            selector="▶",
            breadcrumb_separator="▶",
            tab_separator="│",
            checkmark="✓",
        )

    @classmethod
    def ascii(cls) -> BoxChars:
        return cls(
            horizontal="-",
            vertical="|",
            top_left="+",
            top_right="+",
            bottom_left="+",
            bottom_right="+",
            left_junction="+",
            right_junction="+",
            double_horizontal="=",
            double_vertical="|",
            mixed_dh_top_left="+",
            mixed_dh_top_right="+",
            mixed_dh_bottom_left="+",
            mixed_dh_bottom_right="+",
            mixed_dh_left_t="+",
            mixed_dh_right_t="+",
            selector=">",
            breadcrumb_separator=">",
            tab_separator="|",
            checkmark="*",
        )

    @classmethod
    def from_use_unicode(cls, use_unicode: bool) -> BoxChars:
        return cls.unicode() if use_unicode else cls.ascii()
