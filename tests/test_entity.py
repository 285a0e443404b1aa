"""Tests for tablewrap.entity and tablewrap.config."""

from __future__ import annotations

import pytest

from tablewrap.config import TableConfig
from tablewrap.entity import Cell, Column, Global, Row, as_entity


class TestEntities:
    """Each target yields the positions it covers inside a shape."""

    def test_cell(self) -> None:
        assert list(Cell(1, 2).iter_cells(3, 3)) == [(1, 2)]

    def test_cell_outside(self) -> None:
        assert list(Cell(5, 0).iter_cells(3, 3)) == []

    def test_row(self) -> None:
        assert list(Row(0).iter_cells(2, 3)) == [(0, 0), (0, 1), (0, 2)]

    def test_column(self) -> None:
        assert list(Column(1).iter_cells(2, 3)) == [(0, 1), (1, 1)]

    def test_global(self) -> None:
        assert list(Global().iter_cells(2, 2)) == [(0, 0), (0, 1), (1, 0), (1, 1)]

    def test_tuple_becomes_cell(self) -> None:
        assert as_entity((1, 0)) == Cell(1, 0)
        assert as_entity(Row(1)) == Row(1)


class TestTableConfig:
    def test_defaults(self) -> None:
        config = TableConfig()
        assert config.tab_width == 4
        assert config.horizontal_padding == 0

    def test_horizontal_padding(self) -> None:
        assert TableConfig(padding_left=1, padding_right=3).horizontal_padding == 4

    @pytest.mark.parametrize("field", ["tab_width", "padding_left", "padding_right"])
    def test_negative_values_raise(self, field: str) -> None:
        with pytest.raises(ValueError):
            TableConfig(**{field: -1})
