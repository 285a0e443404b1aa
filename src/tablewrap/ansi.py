"""Style-aware segmentation of ANSI-styled text.

Splits a styled string into :class:`Span` runs of plain text. Every span
carries the SGR codes that re-enter its style and the codes that close it, so
a line breaker can cut a span anywhere and keep each piece styled.
"""

from __future__ import annotations

from dataclasses import dataclass

from tablewrap.text import OSC8_RE, extract_ansi_code

# OSC 8 hyperlink open/close: ESC]8;;<uri> ST ... ESC]8;; ST
_OSC8 = "\x1b]8;;"
_ST = "\x1b\\"


@dataclass(frozen=True)
class Span:
    """A maximal run of text with constant styling."""

    text: str
    start: str = ""
    end: str = ""

    @property
    def style(self) -> tuple[str, str]:
        return (self.start, self.end)


# ---------------------------------------------------------------------------
# StyleTracker
# ---------------------------------------------------------------------------


class StyleTracker:
    """Track active ANSI SGR (Select Graphic Rendition) state.

    Processes CSI SGR sequences (``ESC[...m``) and maintains which attributes
    are currently active, so that a run can be re-opened after a line break
    and closed with targeted resets (``ESC[39m`` for a foreground colour,
    ``ESC[22m`` for bold, ...) instead of a blanket ``ESC[0m``.
    """

    # attribute name -> SGR parameter that switches it off
    _RESETS = (
        ("bold", "22"),
        ("dim", "22"),
        ("italic", "23"),
        ("underline", "24"),
        ("blink", "25"),
        ("inverse", "27"),
        ("hidden", "28"),
        ("strikethrough", "29"),
        ("fg_color", "39"),
        ("bg_color", "49"),
    )

    _SET = {
        1: "bold",
        2: "dim",
        3: "italic",
        4: "underline",
        5: "blink",
        7: "inverse",
        8: "hidden",
        9: "strikethrough",
    }

    _UNSET = {
        22: ("bold", "dim"),
        23: ("italic",),
        24: ("underline",),
        25: ("blink",),
        27: ("inverse",),
        28: ("hidden",),
        29: ("strikethrough",),
        39: ("fg_color",),
        49: ("bg_color",),
    }

    def __init__(self) -> None:
        self.bold: str | None = None
        self.dim: str | None = None
        self.italic: str | None = None
        self.underline: str | None = None
        self.blink: str | None = None
        self.inverse: str | None = None
        self.hidden: str | None = None
        self.strikethrough: str | None = None
        self.fg_color: str | None = None
        self.bg_color: str | None = None

    def process(self, code: str) -> None:
        """Update tracked state from an SGR sequence like ``\\x1b[1;31m``."""
        if not code.startswith("\x1b[") or not code.endswith("m"):
            return

        params_str = code[2:-1]
        if not params_str:
            # ESC[m is equivalent to reset
            self.clear()
            return

        params = params_str.split(";")
        i = 0
        while i < len(params):
            val = int(params[i]) if params[i] else 0

            if val == 0:
                self.clear()
            elif val in self._SET:
                setattr(self, self._SET[val], f"\x1b[{val}m")
            elif val in self._UNSET:
                for name in self._UNSET[val]:
                    setattr(self, name, None)
            elif 30 <= val <= 37 or 90 <= val <= 97:
                self.fg_color = f"\x1b[{val}m"
            elif 40 <= val <= 47 or 100 <= val <= 107:
                self.bg_color = f"\x1b[{val}m"
            elif val in (38, 48):
                color, consumed = _extended_color(params, i)
                if color is not None:
                    if val == 38:
                        self.fg_color = color
                    else:
                        self.bg_color = color
                i += consumed

            i += 1

    def clear(self) -> None:
        """Reset all tracked attributes to off."""
        for name, _reset in self._RESETS:
            setattr(self, name, None)

    def has_active_codes(self) -> bool:
        """Return ``True`` if any SGR attribute is currently active."""
        return any(getattr(self, name) is not None for name, _reset in self._RESETS)

    def get_active_codes(self) -> str:
        """Return a string of ANSI codes that reactivate the current state."""
        return "".join(
            getattr(self, name)
            for name, _reset in self._RESETS
            if getattr(self, name) is not None
        )

    def get_close_codes(self) -> str:
        """Return the targeted resets that switch the current state off."""
        resets: list[str] = []
        for name, reset in self._RESETS:
            if getattr(self, name) is not None and reset not in resets:
                resets.append(reset)
        return "".join(f"\x1b[{reset}m" for reset in resets)


def _extended_color(params: list[str], i: int) -> tuple[str | None, int]:
    """Parse a 256-colour or RGB colour following ``38`` / ``48`` at *i*.

    Returns ``(code, consumed)`` where *consumed* counts the extra parameters.
    """
    base = params[i]
    if i + 1 >= len(params):
        return None, 0

    mode = int(params[i + 1]) if params[i + 1] else 0
    if mode == 5 and i + 2 < len(params):
        return f"\x1b[{base};5;{params[i + 2]}m", 2
    if mode == 2 and i + 4 < len(params):
        r, g, b = params[i + 2 : i + 5]
        return f"\x1b[{base};2;{r};{g};{b}m", 4
    return None, 1


# ---------------------------------------------------------------------------
# segment
# ---------------------------------------------------------------------------


def segment(text: str) -> list[Span]:
    """Split *text* into styled spans.

    Empty runs are skipped and adjacent runs with the same style are merged.
    Escape sequences other than SGR are dropped.
    """
    spans: list[Span] = []
    tracker = StyleTracker()
    buf: list[str] = []

    def flush() -> None:
        if not buf:
            return
        run = "".join(buf)
        buf.clear()
        start = tracker.get_active_codes()
        end = tracker.get_close_codes()
        if spans and spans[-1].style == (start, end):
            spans[-1] = Span(spans[-1].text + run, start, end)
        else:
            spans.append(Span(run, start, end))

    i = 0
    while i < len(text):
        extracted = extract_ansi_code(text, i)
        if extracted is not None:
            code, length = extracted
            if code.startswith("\x1b[") and code.endswith("m"):
                flush()
                tracker.process(code)
            i += length
            continue

        buf.append(text[i])
        i += 1

    flush()
    return spans


# ---------------------------------------------------------------------------
# Hyperlinks
# ---------------------------------------------------------------------------


def extract_hyperlink(text: str) -> tuple[str, str | None]:
    """Remove OSC 8 hyperlink sequences from *text*.

    Returns the remaining text and the first non-empty link target, if any.
    """
    url: str | None = None
    for match in OSC8_RE.finditer(text):
        if match.group(1):
            url = match.group(1)
            break

    return OSC8_RE.sub("", text), url


def hyperlink_prefix_suffix(url: str | None) -> tuple[str, str]:
    """Return the OSC 8 sequences that open and close a link to *url*."""
    if url is None:
        return ("", "")
    return (f"{_OSC8}{url}{_ST}", f"{_OSC8}{_ST}")
