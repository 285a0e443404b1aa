"""In-memory table of text cells with cached column widths and row heights."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Iterable

from tablewrap.config import TableConfig
from tablewrap.entity import Position, Target, as_entity
from tablewrap.text import count_lines, multiline_width

if TYPE_CHECKING:
    from tablewrap.wrap import Wrap


class Table:
    """A grid of text cells.

    Column widths include the configured horizontal padding. Both widths and
    heights are cached; every mutation goes through :meth:`set_text`, which
    drops the caches it affects.
    """

    def __init__(
        self,
        rows: Iterable[Iterable[Any]] = (),
        config: TableConfig | None = None,
    ) -> None:
        self.config = config or TableConfig()
        records = [[str(value) for value in row] for row in rows]
        count_cols = max((len(row) for row in records), default=0)
        # Ragged rows are padded with empty cells.
        self._records = [row + [""] * (count_cols - len(row)) for row in records]
        self._count_cols = count_cols
        self._widths_cache: list[int] | None = None
        self._heights_cache: list[int] | None = None

    # --- Records ---

    def shape(self) -> tuple[int, int]:
        return (len(self._records), self._count_cols)

    def is_empty(self) -> bool:
        count_rows, count_cols = self.shape()
        return count_rows == 0 or count_cols == 0

    @property
    def rows(self) -> list[list[str]]:
        return [list(row) for row in self._records]

    def get_text(self, pos: Position) -> str:
        row, col = pos
        return self._records[row][col]

    def set_text(self, pos: Position, text: str) -> None:
        row, col = pos
        self._records[row][col] = text
        self.invalidate_width_cache()
        self.invalidate_height_cache()

    def get_width(self, pos: Position) -> int:
        """Rendered width of a cell's content, without padding."""
        return multiline_width(self.get_text(pos), self.config.tab_width)

    def get_height(self, pos: Position) -> int:
        return count_lines(self.get_text(pos))

    # --- Dimensions ---

    def column_widths(self) -> list[int]:
        if self._widths_cache is None:
            self._widths_cache = self._measure_widths()
        return list(self._widths_cache)

    def row_heights(self) -> list[int]:
        if self._heights_cache is None:
            count_rows, count_cols = self.shape()
            self._heights_cache = [
                max(
                    (self.get_height((row, col)) for col in range(count_cols)),
                    default=0,
                )
                for row in range(count_rows)
            ]
        return list(self._heights_cache)

    def total_width(self) -> int:
        return sum(self.column_widths())

    def minimum_widths(self) -> list[int]:
        """Widths the columns would have if every cell were empty."""
        return [self.config.horizontal_padding] * self._count_cols

    def _measure_widths(self) -> list[int]:
        padding = self.config.horizontal_padding
        count_rows, count_cols = self.shape()
        return [
            max(self.get_width((row, col)) for row in range(count_rows)) + padding
            for col in range(count_cols)
        ]

    # --- Caches ---

    def invalidate_width_cache(self) -> None:
        self._widths_cache = None

    def invalidate_height_cache(self) -> None:
        self._heights_cache = None

    def store_width_cache(self, widths: list[int]) -> None:
        if len(widths) != self._count_cols:
            raise ValueError(
                f"Expected {self._count_cols} column widths, got {len(widths)}"
            )
        self._widths_cache = list(widths)

    # --- Options ---

    def apply(self, option: Wrap) -> Table:
        """Apply *option* to the table as a whole."""
        option.change(self)
        return self

    def modify(self, target: Target, option: Wrap) -> Table:
        """Apply *option* to the cells selected by *target*."""
        option.change_cell(self, as_entity(target))
        return self
