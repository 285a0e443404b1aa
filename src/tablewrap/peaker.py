"""Priority policies deciding which column gets narrower next.

A peaker is asked for one column at a time while a table is being shrunk to
a total width. It only ever returns a column whose width is still above its
minimum, and ``None`` once no such column is left.
"""

from __future__ import annotations

from typing import Protocol, Sequence


class Peaker(Protocol):
    """Strategy picking the next column to shrink by one unit."""

    def peak(self, widths: Sequence[int], min_widths: Sequence[int]) -> int | None: ...


def _shrinkable(widths: Sequence[int], min_widths: Sequence[int]) -> list[int]:
    return [col for col, width in enumerate(widths) if width > min_widths[col]]


class PriorityNone:
    """Shrink columns one after another, left to right, round and round."""

    def __init__(self) -> None:
        self._next = 0

    def peak(self, widths: Sequence[int], min_widths: Sequence[int]) -> int | None:
        count = len(widths)
        for offset in range(count):
            col = (self._next + offset) % count
            if widths[col] > min_widths[col]:
                self._next = (col + 1) % count
                return col
        return None


class PriorityMax:
    """Shrink the widest column first; the leftmost one wins a tie."""

    def peak(self, widths: Sequence[int], min_widths: Sequence[int]) -> int | None:
        columns = _shrinkable(widths, min_widths)
        if not columns:
            return None
        return max(columns, key=lambda col: (widths[col], -col))


class PriorityMin:
    """Shrink the narrowest column that can still give way; leftmost on a tie."""

    def peak(self, widths: Sequence[int], min_widths: Sequence[int]) -> int | None:
        columns = _shrinkable(widths, min_widths)
        if not columns:
            return None
        return min(columns, key=lambda col: (widths[col], col))
