"""Text measurement utilities: grapheme widths, truncation and alignment.

Provides functions for measuring the terminal display width of text, splitting
text into grapheme clusters with their widths, and fitting text into a fixed
number of columns.
"""

from __future__ import annotations

import unicodedata
from typing import Iterator

import grapheme
import wcwidth as _wcwidth


# ---------------------------------------------------------------------------
# Width cache (capped at 512 entries)
# ---------------------------------------------------------------------------

_width_cache: dict[str, int] = {}
_WIDTH_CACHE_MAX = 512


def _cache_width(key: str, value: int) -> int:
    if len(_width_cache) >= _WIDTH_CACHE_MAX:
        _width_cache.clear()
    _width_cache[key] = value
    return value


# ---------------------------------------------------------------------------
# Grapheme width
# ---------------------------------------------------------------------------

def grapheme_width(g: str) -> int:
    """Return the terminal display width of a single grapheme cluster.

    Rules:
    1. Zero-width characters (control, combining marks, etc.) -> 0
    2. Emoji (multi-codepoint, contains VS16 U+FE0F, ZWJ sequences, etc.) -> 2
    3. Otherwise delegate to wcwidth for the first meaningful codepoint.
    """
    if not g:
        return 0

    # Single codepoint fast path
    if len(g) == 1:
        cp = ord(g)
        # Control characters
        if cp < 0x20 or (0x7F <= cp <= 0x9F):
            return 0
        w = _wcwidth.wcwidth(g)
        return max(w, 0)

    codepoints = list(g)

    for ch in codepoints:
        cp = ord(ch)
        if cp == 0xFE0F:  # VS16
            return 2
        if cp == 0x200D:  # ZWJ
            return 2
        if 0x1F3FB <= cp <= 0x1F3FF:  # Skin tone modifiers
            return 2
        if 0x1F1E6 <= cp <= 0x1F1FF:  # Regional indicators
            return 2

    first_cp = ord(codepoints[0])
    if first_cp >= 0x1F000:
        return 2

    cat = unicodedata.category(codepoints[0])
    if cat.startswith("M"):  # Mark
        return 0
    if cat == "Cf":  # Format
        return 0

    w = _wcwidth.wcwidth(codepoints[0])
    return max(w, 0)


def iter_graphemes(text: str) -> Iterator[tuple[str, int]]:
    """Yield ``(cluster, width)`` pairs for every grapheme cluster in *text*."""
    for g in grapheme.graphemes(text):
        yield g, grapheme_width(g)


# ---------------------------------------------------------------------------
# visible_width
# ---------------------------------------------------------------------------

def visible_width(text: str) -> int:
    """Calculate the visible terminal width of *text*.

    * Treats tabs as 3 spaces.
    * Uses a fast ASCII path when possible.
    * Caches results for non-ASCII strings.
    """
    if not text:
        return 0

    text = text.replace("\t", "   ")

    # Fast ASCII path: all codepoints in 0x20..0x7E
    if all(0x20 <= ord(ch) <= 0x7E for ch in text):
        return len(text)

    cached = _width_cache.get(text)
    if cached is not None:
        return cached

    total = sum(w for _, w in iter_graphemes(text))
    return _cache_width(text, total)


# ---------------------------------------------------------------------------
# truncate_to_width / pad / align
# ---------------------------------------------------------------------------

def truncate_to_width(
    text: str,
    max_width: int,
    ellipsis: str = "",
    pad: bool = False,
) -> str:
    """Truncate *text* to fit within *max_width* visible columns.

    If the text is wider than *max_width*, it is cut at a grapheme boundary
    and *ellipsis* is appended (the ellipsis counts towards the width).  If
    *pad* is ``True``, the result is right-padded with spaces to exactly
    *max_width*.
    """
    if max_width <= 0:
        return ""

    text_width = visible_width(text)
    if text_width <= max_width:
        if pad:
            return text + " " * (max_width - text_width)
        return text

    ellipsis_width = visible_width(ellipsis)
    target_width = max_width - ellipsis_width
    if target_width <= 0:
        return _take_columns(ellipsis, max_width)

    result = _take_columns(text, target_width) + ellipsis

    if pad:
        result_width = visible_width(result)
        if result_width < max_width:
            result += " " * (max_width - result_width)

    return result


def _take_columns(text: str, max_cols: int) -> str:
    """Return a prefix of *text* that fits within *max_cols* visible columns."""
    result: list[str] = []
    cols = 0
    for g, w in iter_graphemes(text):
        if cols + w > max_cols:
            break
        result.append(g)
        cols += w
    return "".join(result)


def align_text(text: str, width: int, align: str = "left") -> str:
    """Fit *text* into exactly *width* columns with the given alignment.

    *align* is one of ``"left"``, ``"center"`` or ``"right"``.  Text wider
    than *width* is truncated from the right regardless of alignment.
    """
    if width <= 0:
        return ""

    fitted = truncate_to_width(text, width)
    slack = width - visible_width(fitted)
    if align == "right":
        return " " * slack + fitted
    if align == "center":
        left = slack // 2
        return " " * left + fitted + " " * (slack - left)
    return fitted + " " * slack
