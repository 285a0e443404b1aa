"""Ways of turning a width option into a concrete number of columns."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, Union

if TYPE_CHECKING:
    from tablewrap.table import Table


class Measurement(Protocol):
    def measure(self, table: Table) -> int: ...


Width = Union[int, Measurement]


def measure(width: Width, table: Table) -> int:
    """Resolve *width* against *table*; plain integers are taken as-is."""
    if isinstance(width, int):
        if width < 0:
            raise ValueError(f"width must be non-negative, got {width}")
        return width
    return width.measure(table)


@dataclass(frozen=True)
class Percent:
    """A share of the table's current total width."""

    percent: int

    def __post_init__(self) -> None:
        if self.percent < 0:
            raise ValueError(f"percent must be non-negative, got {self.percent}")

    def measure(self, table: Table) -> int:
        return table.total_width() * self.percent // 100


def _cell_widths(table: Table) -> list[int]:
    count_rows, count_cols = table.shape()
    return [
        table.get_width((row, col))
        for row in range(count_rows)
        for col in range(count_cols)
    ]


@dataclass(frozen=True)
class Max:
    """Width of the widest cell."""

    def measure(self, table: Table) -> int:
        return max(_cell_widths(table), default=0)


@dataclass(frozen=True)
class Min:
    """Width of the narrowest cell."""

    def measure(self, table: Table) -> int:
        return min(_cell_widths(table), default=0)
