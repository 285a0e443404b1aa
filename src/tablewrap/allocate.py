"""Shrinking column widths to a total and picking the cells to re-wrap."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from tablewrap.entity import Position
from tablewrap.peaker import Peaker

if TYPE_CHECKING:
    from tablewrap.table import Table

logger = logging.getLogger(__name__)


def decrease_widths(
    widths: list[int],
    min_widths: list[int],
    total_width: int,
    target_width: int,
    peaker: Peaker,
) -> None:
    """Narrow *widths* in place, one column unit at a time, down to *target_width*.

    *peaker* chooses the column to take each unit from. Columns never go below
    *min_widths*; when every column sits at its minimum the loop stops even if
    the total is still above *target_width*.
    """
    total = total_width
    while total > target_width:
        col = peaker.peak(widths, min_widths)
        if col is None:
            logger.debug(
                "Columns at minimum width; total %d stays above target %d",
                total,
                target_width,
            )
            break

        widths[col] -= 1
        total -= 1

    logger.debug("Allocated column widths %s (total %d)", widths, total)


def get_decrease_cell_list(
    table: Table,
    widths: list[int],
    min_widths: list[int],
) -> list[tuple[Position, int]]:
    """Return ``(position, width)`` for every cell that no longer fits its column.

    The width is the room left for content once padding is taken out of the
    allocated column width.
    """
    padding = table.config.horizontal_padding
    count_rows, count_cols = table.shape()

    points: list[tuple[Position, int]] = []
    for col in range(count_cols):
        if widths[col] < min_widths[col]:
            continue

        width = max(widths[col] - padding, 0)
        for row in range(count_rows):
            if table.get_width((row, col)) <= width:
                continue
            points.append(((row, col), width))

    logger.debug("%d cells need wrapping", len(points))
    return points
