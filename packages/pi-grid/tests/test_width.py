"""Tests for width settings."""

from __future__ import annotations

import pytest

from pi.grid import (
    Column,
    GridError,
    Max,
    MinWidth,
    Padding,
    Percent,
    PriorityRight,
    Span,
    TabWidth,
    Table,
    Truncate,
    WidthList,
    Wrap,
)
from pi.grid.utils import string_width
from pi.grid.width import column_floors


def zero_table(rows):
    return Table(rows).with_(Padding.zero())


def line_widths(table: Table) -> set[int]:
    return {string_width(line) for line in table.render().split("\n")}


# ---------------------------------------------------------------------------
# Truncate
# ---------------------------------------------------------------------------


class TestTruncateTable:
    """Table-wide truncation fits the whole table into a width."""

    def test_fits_width(self) -> None:
        table = Table([["hello world"]]).with_(Truncate(8))
        assert table.render() == "+------+\n| hell |\n+------+"
        assert table.total_width() == 8

    def test_suffix(self) -> None:
        table = zero_table([["hello world"]]).with_(Truncate(7, suffix="..."))
        assert table.render().split("\n")[1] == "|he...|"

    def test_already_fits(self) -> None:
        table = zero_table([["abc"]]).with_(Truncate(10))
        assert table.render() == "+---+\n|abc|\n+---+"

    def test_every_line_has_target_width(self) -> None:
        table = Table([["first column", "second column"], ["x", "a much longer cell here"]])
        table.with_(Truncate(20))
        assert line_widths(table) == {20}

    def test_priority_right(self) -> None:
        table = zero_table([["aaaa", "bbbb"]]).with_(Truncate(7, priority=PriorityRight))
        assert table.render().split("\n")[1] == "|aaa|b|"

    def test_percent(self) -> None:
        table = zero_table([["abcdefgh"]]).with_(Truncate(Percent(50)))
        assert table.render() == "+---+\n|abc|\n+---+"

    def test_floors_keep_padding(self) -> None:
        table = Table([["abc", "def"]]).with_(Truncate(1))
        assert table.render().split("\n")[1] == "| a | d |"

    def test_tab_keeps_suffix(self) -> None:
        table = zero_table([["ab\tcdefgh"]]).with_(Truncate(8, suffix="..."))
        assert table.render() == "+------+\n|ab ...|\n+------+"


class TestTruncateCell:
    """Truncating selected cells rewrites their text only."""

    def test_column(self) -> None:
        table = zero_table([["abcdef", "abcdef"]])
        table.modify(Column(1), Truncate(3, suffix="."))
        assert table.get_text((0, 0)) == "abcdef"
        assert table.get_text((0, 1)) == "ab."

    def test_multiline(self) -> None:
        table = zero_table([["abcdef\nxy"]])
        table.modify((0, 0), Truncate(3, multiline=True))
        assert table.get_text((0, 0)) == "abc\nxy"

    def test_keeps_first_line_only(self) -> None:
        table = zero_table([["abcdef\nxy"]])
        table.modify((0, 0), Truncate(3))
        assert table.get_text((0, 0)) == "abc"

    def test_width_counts_padding(self) -> None:
        table = Table([["abcdef"]])
        table.modify((0, 0), Truncate(4))
        assert table.get_text((0, 0)) == "ab"

    def test_tab(self) -> None:
        table = zero_table([["tab\there x"]])
        table.modify((0, 0), Truncate(7, suffix="..."))
        assert table.get_text((0, 0)) == "tab ..."

    def test_uses_table_tab_width(self) -> None:
        table = zero_table([["a\tbcdef"]]).with_(TabWidth(1))
        table.modify((0, 0), Truncate(4))
        assert table.get_text((0, 0)) == "a bc"

    @pytest.mark.parametrize("width", [3, 4, 6, 10])
    def test_width_bound(self, width: int) -> None:
        table = zero_table([["some rather long text", "日本語のテキスト"]])
        table.modify(Column(0), Truncate(width, suffix="..."))
        table.modify(Column(1), Truncate(width, suffix="..."))
        assert string_width(table.get_text((0, 0))) <= width
        assert string_width(table.get_text((0, 1))) <= width


# ---------------------------------------------------------------------------
# Wrap
# ---------------------------------------------------------------------------


class TestWrap:
    """Wrapping moves text onto extra lines."""

    def test_keep_words_cell(self) -> None:
        table = zero_table([["a", "Hello World"]])
        table.modify(Column(1), Wrap(5, keep_words=True))
        assert table.get_text((0, 1)) == "Hello\nWorld"
        assert table.render() == "+-+-----+\n|a|Hello|\n| |World|\n+-+-----+"

    def test_table_wide(self) -> None:
        table = zero_table([["Hello World"]]).with_(Wrap(7, keep_words=True))
        assert table.render() == "+-----+\n|Hello|\n|World|\n+-----+"

    def test_table_wide_every_line_fits(self) -> None:
        table = Table([["a long line of text", "another long cell"], ["x", "y"]])
        table.with_(Wrap(24))
        assert line_widths(table) == {24}

    def test_uses_table_tab_width(self) -> None:
        table = zero_table([["a\tb"]]).with_(TabWidth(2))
        table.modify((0, 0), Wrap(3))
        assert table.get_text((0, 0)) == "a  \nb"

    def test_table_wide_tabs_fit(self) -> None:
        table = Table([["col\tumn one", "x\ty"], ["a", "b"]]).with_(Wrap(14))
        assert line_widths(table) == {14}

    def test_spanned_cell_wraps_over_range(self) -> None:
        table = zero_table([["aaaa bbbb cccc", ""], ["xx", "yy"]])
        table.modify((0, 0), Span.column(2))
        table.with_(Wrap(8, keep_words=True))
        assert [line.rstrip() for line in table.get_text((0, 0)).split("\n")] == ["aaaa", "bbbb", "cccc"]
        assert line_widths(table) == {8}


# ---------------------------------------------------------------------------
# MinWidth and WidthList
# ---------------------------------------------------------------------------


class TestMinWidth:
    """MinWidth pads cells or grows columns."""

    def test_table_grows(self) -> None:
        table = zero_table([["a", "b"]]).with_(MinWidth(9))
        assert table.render() == "+---+---+\n|a  |b  |\n+---+---+"

    def test_table_already_wide(self) -> None:
        table = zero_table([["abc"]]).with_(MinWidth(3))
        assert table.render() == "+---+\n|abc|\n+---+"

    def test_cell_padding(self) -> None:
        table = zero_table([["a", "bb"]])
        table.modify((0, 0), MinWidth(3, fill="."))
        assert table.get_text((0, 0)) == "a.."
        assert table.get_text((0, 1)) == "bb"

    def test_cell_max(self) -> None:
        table = zero_table([["a"], ["abcd"]])
        table.modify(Column(0), MinWidth(Max()))
        assert table.get_text((0, 0)) == "a   "


class TestWidthList:
    """Explicit widths for every column."""

    def test_widths(self) -> None:
        table = zero_table([["a", "b"]]).with_(WidthList([2, 3]))
        assert table.render() == "+--+---+\n|a |b  |\n+--+---+"

    def test_wrong_length(self) -> None:
        with pytest.raises(GridError):
            zero_table([["a", "b"]]).with_(WidthList([1]))


class TestColumnFloors:
    """Floors are padding plus one character, or the widest word."""

    def test_floors(self) -> None:
        table = Table([["abc def", ""]])
        assert column_floors(table) == [3, 2]
        assert column_floors(table, keep_words=True) == [5, 2]

    def test_spanned_cell_adds_no_content(self) -> None:
        table = zero_table([["abcdef", ""], ["x", "yy"]])
        table.modify((0, 0), Span.column(2))
        assert column_floors(table) == [1, 1]

    def test_padding_only(self) -> None:
        table = Table([["", ""]]).with_(Padding(left=2, right=1))
        assert column_floors(table) == [3, 3]
