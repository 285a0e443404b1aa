"""Targets selecting which cells an option is applied to."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Protocol, Union

Position = tuple[int, int]


class Entity(Protocol):
    def iter_cells(self, count_rows: int, count_cols: int) -> Iterator[Position]: ...


@dataclass(frozen=True)
class Cell:
    row: int
    col: int

    def iter_cells(self, count_rows: int, count_cols: int) -> Iterator[Position]:
        if 0 <= self.row < count_rows and 0 <= self.col < count_cols:
            yield (self.row, self.col)


@dataclass(frozen=True)
class Row:
    index: int

    def iter_cells(self, count_rows: int, count_cols: int) -> Iterator[Position]:
        if 0 <= self.index < count_rows:
            for col in range(count_cols):
                yield (self.index, col)


@dataclass(frozen=True)
class Column:
    index: int

    def iter_cells(self, count_rows: int, count_cols: int) -> Iterator[Position]:
        if 0 <= self.index < count_cols:
            for row in range(count_rows):
                yield (row, self.index)


@dataclass(frozen=True)
class Global:
    """Every cell of the table."""

    def iter_cells(self, count_rows: int, count_cols: int) -> Iterator[Position]:
        for row in range(count_rows):
            for col in range(count_cols):
                yield (row, col)


Target = Union[Entity, Position]


def as_entity(target: Target) -> Entity:
    """Accept a bare ``(row, col)`` tuple wherever an entity is expected."""
    if isinstance(target, tuple):
        row, col = target
        return Cell(row, col)
    return target
