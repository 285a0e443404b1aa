"""Wrapping cell content onto new lines so it fits a width.

:func:`wrap_text` breaks a single string; :class:`Wrap` applies it either to
selected cells or to a whole table, shrinking columns until the table fits a
total width.

Widths are terminal columns. A glyph that is too wide for the room left on a
line is not split: it is replaced by one ``U+FFFD`` per remaining column and
dropped. Styling (SGR) is closed before every inserted line break and
re-opened after it; an OSC 8 hyperlink wraps every produced line.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, NamedTuple

from tablewrap.allocate import decrease_widths, get_decrease_cell_list
from tablewrap.ansi import Span, extract_hyperlink, hyperlink_prefix_suffix, segment
from tablewrap.entity import Entity, Position
from tablewrap.measurement import Width, measure
from tablewrap.peaker import Peaker, PriorityNone
from tablewrap.text import (
    DEFAULT_TAB_WIDTH,
    REPLACEMENT_CHAR,
    grapheme_width,
    graphemes,
    replace_tab,
    visible_width,
)

if TYPE_CHECKING:
    from tablewrap.table import Table

logger = logging.getLogger(__name__)

Style = tuple[str, str]


class _Glyph(NamedTuple):
    text: str
    width: int
    style: Style


# ---------------------------------------------------------------------------
# Line accumulator
# ---------------------------------------------------------------------------


class _LineWriter:
    """Accumulates output lines.

    A style is opened lazily by the first glyph that needs it and closed when
    the style changes or the line ends, so no line carries an empty
    open/close pair. Trailing padding is written after the style close and
    the hyperlink suffix.
    """

    def __init__(self, prefix: str = "", suffix: str = "") -> None:
        self.lines: list[str] = []
        self.width = 0
        self._prefix = prefix
        self._suffix = suffix
        self._parts: list[str] = []
        self._style: Style | None = None

    @property
    def is_empty(self) -> bool:
        return not self._parts

    def push(self, text: str, width: int, style: Style) -> None:
        if not self._parts:
            self._parts.append(self._prefix)
        if style != self._style:
            self._close_style()
            self._parts.append(style[0])
            self._style = style
        self._parts.append(text)
        self.width += width

    def push_glyph(self, glyph: _Glyph, width: int) -> None:
        """Append *glyph*, or replacement markers if it overflows *width*."""
        if self.width + glyph.width > width:
            unknowns = width - self.width
            self.push(REPLACEMENT_CHAR * unknowns, unknowns, glyph.style)
        else:
            self.push(glyph.text, glyph.width, glyph.style)

    def end_line(self, pad: int = 0) -> None:
        self._close_style()
        if self._parts:
            self._parts.append(self._suffix)
        self._parts.append(" " * pad)
        self.lines.append("".join(self._parts))
        self._parts = []
        self.width = 0

    def _close_style(self) -> None:
        if self._style is not None:
            self._parts.append(self._style[1])
            self._style = None


# ---------------------------------------------------------------------------
# wrap_text
# ---------------------------------------------------------------------------


def wrap_text(
    text: str,
    width: int,
    keep_words: bool = False,
    tab_width: int = DEFAULT_TAB_WIDTH,
) -> str:
    """Break *text* into lines no wider than *width* columns.

    With *keep_words* the text is split on spaces and a word is only cut when
    it is longer than a whole line; every line is then padded with spaces to
    exactly *width*. Existing newlines are kept, each physical line is wrapped
    on its own.

    A *width* of 0 yields an empty string.
    """
    if width < 0:
        raise ValueError(f"width must be non-negative, got {width}")
    if width == 0:
        return ""

    text, url = extract_hyperlink(replace_tab(text, tab_width))
    prefix, suffix = hyperlink_prefix_suffix(url)

    lines = _glyph_lines(segment(text))
    if lines == [[]]:
        return ""

    writer = _LineWriter(prefix, suffix)
    if keep_words:
        _split_keeping_words(lines, width, writer)
    else:
        _chunks(lines, width, writer)

    assert all(visible_width(line) <= width for line in writer.lines), (
        f"width={width!r} text={text!r} wrapped={writer.lines!r}"
    )

    return "\n".join(writer.lines)


def _glyph_lines(spans: list[Span]) -> list[list[_Glyph]]:
    """Measure every grapheme of *spans*, grouped by physical line.

    Clusters are found in the joined text, so a style change inside a cluster
    does not split it; the cluster takes the style of its first code point.
    """
    text = "".join(span.text for span in spans)
    styles = [span.style for span in spans for _ in span.text]

    lines: list[list[_Glyph]] = [[]]
    offset = 0
    for g in graphemes(text):
        style = styles[offset]
        offset += len(g)
        if g in ("\n", "\r\n"):
            lines.append([])
            continue
        lines[-1].append(_Glyph(g, grapheme_width(g), style))
    return lines


def _chunks(lines: list[list[_Glyph]], width: int, writer: _LineWriter) -> None:
    for glyphs in lines:
        for glyph in glyphs:
            writer.push_glyph(glyph, width)
            if writer.width == width:
                writer.end_line()

        # The last line is left unpadded; an empty physical line stays empty.
        if not writer.is_empty or not glyphs:
            writer.end_line()


def _split_keeping_words(
    lines: list[list[_Glyph]], width: int, writer: _LineWriter
) -> None:
    for glyphs in lines:
        if not glyphs:
            writer.end_line(pad=width)
            continue

        _wrap_words(glyphs, width, writer)
        if not writer.is_empty:
            writer.end_line(pad=width - writer.width)


def _wrap_words(glyphs: list[_Glyph], width: int, writer: _LineWriter) -> None:
    words, spaces = _split_words(glyphs)

    is_first_word = True
    for i, word in enumerate(words):
        if not is_first_word and writer.width < width:
            space = spaces[i - 1]
            writer.push(space.text, space.width, space.style)
        is_first_word = False

        word_width = sum(glyph.width for glyph in word)
        if writer.width + word_width <= width:
            for glyph in word:
                writer.push(glyph.text, glyph.width, glyph.style)
            continue

        if word_width <= width:
            # Fits on a line of its own.
            writer.end_line(pad=width - writer.width)
            for glyph in word:
                writer.push(glyph.text, glyph.width, glyph.style)
            continue

        # Longer than a line: cut it glyph by glyph.
        if writer.width == width:
            writer.end_line()
        for glyph in word:
            writer.push_glyph(glyph, width)
            if writer.width == width:
                writer.end_line()

        # No separating space at the start of a line the cut just opened.
        is_first_word = writer.is_empty


def _split_words(glyphs: list[_Glyph]) -> tuple[list[list[_Glyph]], list[_Glyph]]:
    """Split on space glyphs, keeping the spaces so their style survives."""
    words: list[list[_Glyph]] = [[]]
    spaces: list[_Glyph] = []
    for glyph in glyphs:
        if glyph.text == " ":
            spaces.append(glyph)
            words.append([])
        else:
            words[-1].append(glyph)
    return words, spaces


# ---------------------------------------------------------------------------
# Wrap option
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Wrap:
    """Wrap cell content onto new lines when it exceeds *width*.

    Applied to cells (:meth:`change_cell`) the width is the content width of
    each cell. Applied to a table (:meth:`change`) it is the total width of
    all columns; columns are narrowed in the order *priority* decides and
    only cells that no longer fit are re-wrapped.

    Padding is not considered when wrapping single cells.
    """

    width: Width
    keep_words: bool = False
    priority: type[Peaker] = PriorityNone

    def keeping_words(self) -> Wrap:
        """Copy of this option that avoids breaking inside words."""
        return replace(self, keep_words=True)

    def with_priority(self, priority: type[Peaker]) -> Wrap:
        """Copy of this option using *priority* to pick columns to shrink.

        - :class:`PriorityNone` cuts the columns one after another.
        - :class:`PriorityMax` cuts the widest columns first.
        - :class:`PriorityMin` cuts the narrowest columns first.
        """
        return replace(self, priority=priority)

    def change_cell(self, table: Table, entity: Entity) -> None:
        width = measure(self.width, table)

        count_rows, count_cols = table.shape()
        for pos in entity.iter_cells(count_rows, count_cols):
            if table.get_width(pos) <= width:
                continue
            self._rewrap(table, pos, width)

        table.invalidate_width_cache()

    def change(self, table: Table) -> None:
        if table.is_empty():
            return

        width = measure(self.width, table)
        widths = table.column_widths()
        total_width = sum(widths)
        if width >= total_width:
            return

        min_widths = table.minimum_widths()
        decrease_widths(widths, min_widths, total_width, width, self.priority())

        # Select everything before touching any cell.
        points = get_decrease_cell_list(table, widths, min_widths)
        for pos, cell_width in points:
            self._rewrap(table, pos, cell_width)

        table.invalidate_height_cache()
        table.invalidate_width_cache()
        table.store_width_cache(widths)

    def _rewrap(self, table: Table, pos: Position, width: int) -> None:
        text = table.get_text(pos)
        wrapped = wrap_text(text, width, self.keep_words, table.config.tab_width)
        logger.debug("Wrapped cell %s to width %d", pos, width)
        table.set_text(pos, wrapped)
