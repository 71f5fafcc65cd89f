"""Tests for height settings."""

from __future__ import annotations

import pytest

from pi.grid import (
    GridError,
    HeightIncrease,
    HeightLimit,
    HeightList,
    Padding,
    PriorityMax,
    Row,
    Span,
    Table,
)
from pi.grid.height import row_floors


def zero_table(rows):
    return Table(rows).with_(Padding.zero())


class TestHeightLimit:
    """Rows shrink toward a total height; extra lines are dropped."""

    def test_table(self) -> None:
        table = zero_table([["a\nb\nc"], ["d"]]).with_(HeightLimit(5))
        assert table.render() == "+-+\n|a|\n+-+\n|d|\n+-+"
        assert table.get_text((0, 0)) == "a"
        assert table.total_height() == 5

    def test_already_fits(self) -> None:
        table = zero_table([["a\nb"]]).with_(HeightLimit(10))
        assert table.render() == "+-+\n|a|\n|b|\n+-+"

    def test_priority_max(self) -> None:
        table = zero_table([["a\nb\nc\nd", "x\ny"]]).with_(HeightLimit(4, priority="max"))
        assert table.render() == "+-+-+\n|a|x|\n|b|y|\n+-+-+"

    def test_stops_at_one_line(self) -> None:
        table = zero_table([["a\nb"], ["c\nd"]]).with_(HeightLimit(0, priority=PriorityMax))
        assert table.total_height() == 5

    def test_cell(self) -> None:
        table = zero_table([["a\nb\nc", "x\ny"]])
        table.modify((0, 0), HeightLimit(1))
        assert table.get_text((0, 0)) == "a"
        assert table.get_text((0, 1)) == "x\ny"

    def test_cell_counts_padding(self) -> None:
        table = zero_table([["a\nb\nc"]]).with_(Padding(top=1))
        table.modify(Row(0), HeightLimit(3))
        assert table.get_text((0, 0)) == "a\nb"


class TestHeightIncrease:
    """Rows grow toward a total height."""

    def test_table(self) -> None:
        table = zero_table([["a"], ["b"]]).with_(HeightIncrease(7))
        assert table.render() == "+-+\n|a|\n| |\n+-+\n|b|\n| |\n+-+"

    def test_already_tall(self) -> None:
        table = zero_table([["a\nb"]]).with_(HeightIncrease(2))
        assert table.total_height() == 4

    def test_cell(self) -> None:
        table = zero_table([["a"]])
        table.modify((0, 0), HeightIncrease(3))
        assert table.get_text((0, 0)) == "a\n\n"
        assert table.total_height() == 5


class TestHeightList:
    """Explicit heights for every row."""

    def test_heights(self) -> None:
        table = zero_table([["a"], ["b"]]).with_(HeightList([2, 1]))
        assert table.render() == "+-+\n|a|\n| |\n+-+\n|b|\n+-+"

    def test_wrong_length(self) -> None:
        with pytest.raises(GridError):
            zero_table([["a"]]).with_(HeightList([1, 1]))


class TestRowFloors:
    """Each row keeps its vertical padding plus one line."""

    def test_floors(self) -> None:
        table = zero_table([["a"], ["b"]]).with_(Padding(top=1, bottom=1))
        assert row_floors(table) == [3, 3]

    def test_row_span(self) -> None:
        table = zero_table([["a", "b"], ["", "c"]])
        table.modify((0, 0), Span.row(2))
        assert row_floors(table) == [1, 1]
