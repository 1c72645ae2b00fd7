"""Four-row block font for score digits."""

from __future__ import annotations

BIG_DIGIT_WIDTH = 4
BIG_DIGIT_HEIGHT = 4

# Each digit is four rows of exactly four columns.
BIG_DIGITS: tuple[tuple[str, str, str, str], ...] = (
    ("▟▀▀▙", "█  █", "█  █", "▜▄▄▛"),
    ("▗█  ", " █  ", " █  ", "▗█▖ "),
    ("▟▀▀▙", "  ▗▛", " ▗▛ ", "▄█▄▄"),
    ("▟▀▀▙", " ▄▄▛", "   █", "▜▄▄▛"),
    (" ▗█ ", "▗▘█ ", "▙▄█▄", "  █ "),
    ("█▀▀▀", "█▄▄▖", "   █", "▜▄▄▛"),
    ("▗▛▀▘", "█▄▄▖", "█  █", "▜▄▄▛"),
    ("█▀▀█", "  ▟▘", " ▟▘ ", " █  "),
    ("▟▀▀▙", "▜▄▄▛", "█  █", "▜▄▄▛"),
    ("▟▀▀▙", "▜▄▄█", "  ▗▛", "▗▄▛ "),
)


def get_digit(n: int) -> tuple[str, str, str, str]:
    return BIG_DIGITS[n % 10]
