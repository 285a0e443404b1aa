"""Rendered-width measurement for terminal text.

Widths are counted in terminal columns per grapheme cluster: wide glyphs take
two columns, combining marks and control characters take none. CSI and OSC
escape sequences (styles, hyperlinks, titles) are invisible and do not count.
"""

from __future__ import annotations

import re
import unicodedata
from typing import Iterator

import grapheme
import wcwidth as _wcwidth


DEFAULT_TAB_WIDTH = 4

# Stand-in for a glyph that cannot be split across a line boundary.
REPLACEMENT_CHAR = "\ufffd"

# ---------------------------------------------------------------------------
# Regex patterns for ANSI / OSC sequences
# ---------------------------------------------------------------------------

# OSC 8 hyperlinks: ESC]8;<params>;<uri> (BEL | ST)
OSC8_RE = re.compile(r"\x1b\]8;[^;\x07\x1b]*;([^\x07\x1b]*)(?:\x07|\x1b\\)")

_STRIP_RE = re.compile(
    r"\x1b\[[0-9;]*[mGKHJ]"  # CSI
    r"|\x1b\][^\x07\x1b]*(?:\x07|\x1b\\)"  # OSC, hyperlinks included
)

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


# Code points that make a multi-codepoint cluster render as a wide emoji.
_VS16 = 0xFE0F
_ZWJ = 0x200D
_SKIN_TONES = range(0x1F3FB, 0x1F400)
_REGIONAL_INDICATORS = range(0x1F1E6, 0x1F200)
# Leading code points whose clusters are presentation emoji.
_MISC_SYMBOLS = range(0x2600, 0x27C0)
_PICTOGRAPHS_START = 0x1F000


def graphemes(text: str) -> Iterator[str]:
    """Yield the grapheme clusters of *text*."""
    return grapheme.graphemes(text)


def _is_emoji_cluster(g: str) -> bool:
    for ch in g:
        cp = ord(ch)
        if cp in (_VS16, _ZWJ) or cp in _SKIN_TONES or cp in _REGIONAL_INDICATORS:
            return True
    first = ord(g[0])
    return first >= _PICTOGRAPHS_START or first in _MISC_SYMBOLS


def grapheme_width(g: str) -> int:
    """Return the number of terminal columns a grapheme cluster occupies.

    Follows the width rules of the pi terminal UI: control characters and
    lone marks are zero-width, emoji clusters are two columns, anything else
    is the ``wcwidth`` of its base character. The replacement marker written
    in place of an unsplittable glyph is always one column, so a line of
    markers fills exactly the room it stands in for.
    """
    if not g:
        return 0
    if g == REPLACEMENT_CHAR:
        return 1

    base = g[0]
    cp = ord(base)
    if cp < 0x20 or 0x7F <= cp <= 0x9F:
        return 0
    if len(g) == 1:
        return max(_wcwidth.wcwidth(base), 0)

    if _is_emoji_cluster(g):
        return 2
    category = unicodedata.category(base)
    if category.startswith("M") or category == "Cf":
        return 0
    return max(_wcwidth.wcwidth(base), 0)


# ---------------------------------------------------------------------------
# Escapes and tabs
# ---------------------------------------------------------------------------


def strip_ansi(text: str) -> str:
    """Remove CSI and OSC sequences (hyperlinks, titles) from *text*."""
    return _STRIP_RE.sub("", text)


def replace_tab(text: str, tab_width: int = DEFAULT_TAB_WIDTH) -> str:
    """Expand every tab in *text* into *tab_width* spaces."""
    if "\t" not in text:
        return text
    return text.replace("\t", " " * tab_width)


def extract_ansi_code(text: str, pos: int) -> tuple[str, int] | None:
    """Extract an escape sequence starting at *pos* in *text*.

    Returns ``(code, length)`` or ``None`` if there is no recognised sequence
    at *pos*.

    Handles:
    * CSI sequences: ``ESC[`` ... ``m`` / ``G`` / ``K`` / ``H`` / ``J``
    * OSC sequences: ``ESC]`` ... ``BEL`` / ``ST``
    """
    if pos + 1 >= len(text) or text[pos] != "\x1b":
        return None

    next_ch = text[pos + 1]

    if next_ch == "[":
        i = pos + 2
        while i < len(text):
            ch = text[i]
            if ch in "mGKHJ":
                code = text[pos : i + 1]
                return (code, len(code))
            if ch.isdigit() or ch == ";":
                i += 1
                continue
            break
        return None

    if next_ch == "]":
        i = pos + 2
        while i < len(text):
            ch = text[i]
            if ch == "\x07":
                code = text[pos : i + 1]
                return (code, len(code))
            if ch == "\x1b" and i + 1 < len(text) and text[i + 1] == "\\":
                code = text[pos : i + 2]
                return (code, len(code))
            i += 1
        return None

    return None


# ---------------------------------------------------------------------------
# visible_width / multiline_width
# ---------------------------------------------------------------------------


def visible_width(text: str, tab_width: int = DEFAULT_TAB_WIDTH) -> int:
    """Calculate the rendered width of a single line of *text*.

    * Strips ANSI escape sequences.
    * Treats a tab as *tab_width* spaces.
    * Uses a fast ASCII path when possible.
    * Caches results for non-ASCII strings.
    """
    if not text:
        return 0

    stripped = strip_ansi(text)
    if not stripped:
        return 0

    stripped = replace_tab(stripped, tab_width)

    if all(0x20 <= ord(ch) <= 0x7E for ch in stripped):
        return len(stripped)

    cached = _width_cache.get(stripped)
    if cached is not None:
        return cached

    total = 0
    for g in grapheme.graphemes(stripped):
        total += grapheme_width(g)

    return _cache_width(stripped, total)


def multiline_width(text: str, tab_width: int = DEFAULT_TAB_WIDTH) -> int:
    """Return the width of the widest line in *text*."""
    if "\n" not in text:
        return visible_width(text, tab_width)
    return max(visible_width(line, tab_width) for line in text.split("\n"))


def count_lines(text: str) -> int:
    """Return how many rows *text* occupies (an empty string takes one)."""
    return text.count("\n") + 1
