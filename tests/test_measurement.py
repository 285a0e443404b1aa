"""Tests for tablewrap.measurement."""

from __future__ import annotations

import pytest

from tablewrap.measurement import Max, Min, Percent, measure
from tablewrap.table import Table


@pytest.fixture
def table() -> Table:
    return Table([["abcdefghij", "ab"], ["abcd", "\x1b[32mabcdef\x1b[0m"]])


class TestMeasure:
    def test_int_is_taken_as_is(self, table: Table) -> None:
        assert measure(7, table) == 7

    def test_negative_int_raises(self, table: Table) -> None:
        with pytest.raises(ValueError):
            measure(-3, table)

    def test_percent_of_total_width(self, table: Table) -> None:
        # Columns are 10 and 6 wide.
        assert measure(Percent(50), table) == 8

    def test_percent_rounds_down(self, table: Table) -> None:
        assert measure(Percent(33), table) == 5

    def test_negative_percent_raises(self) -> None:
        with pytest.raises(ValueError):
            Percent(-1)

    def test_max_cell(self, table: Table) -> None:
        assert measure(Max(), table) == 10

    def test_min_cell(self, table: Table) -> None:
        assert measure(Min(), table) == 2

    def test_empty_table(self) -> None:
        assert measure(Max(), Table()) == 0
        assert measure(Min(), Table()) == 0
