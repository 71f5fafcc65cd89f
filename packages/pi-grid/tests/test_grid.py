"""Tests for the grid composer."""

from __future__ import annotations

import io

import pytest

from pi.grid import (
    Alignment,
    Borders,
    BorderColors,
    Color,
    Colorize,
    Column,
    ExactDimension,
    Grid,
    GridConfig,
    IterRecords,
    Margin,
    Offset,
    Padding,
    Sides,
    Span,
    Style,
    Table,
    VecRecords,
    estimate,
)


def zero_table(rows):
    return Table(rows).with_(Padding.zero())


def ascii_config() -> GridConfig:
    cfg = GridConfig()
    cfg.set_borders(Style.ascii().borders)
    return cfg


# ---------------------------------------------------------------------------
# Basic layouts
# ---------------------------------------------------------------------------


class TestBasicLayout:
    """Records, borders and estimated dimensions compose into text lines."""

    def test_two_by_two_ascii_without_padding(self) -> None:
        table = zero_table([["a", "bb"], ["ccc", "d"]])
        assert table.render() == "+---+--+\n|a  |bb|\n+---+--+\n|ccc|d |\n+---+--+"

    def test_grid_directly_from_config(self) -> None:
        records = VecRecords([["a", "bb"], ["ccc", "d"]])
        cfg = ascii_config()
        dims = estimate(records, cfg)
        assert dims.widths == [3, 2]
        assert dims.heights == [1, 1]
        assert Grid(records, cfg, dims).to_string() == "+---+--+\n|a  |bb|\n+---+--+\n|ccc|d |\n+---+--+"

    def test_default_table_has_one_space_padding(self) -> None:
        table = Table([["a", "bb"], ["ccc", "d"]])
        assert str(table) == "+-----+----+\n| a   | bb |\n+-----+----+\n| ccc | d  |\n+-----+----+"

    def test_no_trailing_newline(self) -> None:
        assert not zero_table([["a"]]).render().endswith("\n")

    def test_multiline_cell(self) -> None:
        assert zero_table([["a\nbb"]]).render() == "+--+\n|a |\n|bb|\n+--+"

    def test_no_borders(self) -> None:
        table = zero_table([["a", "b"], ["c", "d"]]).with_(Style.empty())
        assert table.render() == "ab\ncd"

    def test_render_is_repeatable(self) -> None:
        table = Table([["a", "b\nc"], ["long cell", ""]])
        assert table.render() == table.render()

    def test_build_writes_into_sink(self) -> None:
        records = VecRecords([["x"]])
        cfg = ascii_config()
        sink = io.StringIO()
        Grid(records, cfg, estimate(records, cfg)).build(sink)
        assert sink.getvalue() == "+-+\n|x|\n+-+"


class TestEmptyGrid:
    """Grids without rows or columns render nothing."""

    def test_no_rows(self) -> None:
        assert Table([]).render() == ""

    def test_no_columns(self) -> None:
        records = VecRecords([[], []])
        cfg = ascii_config()
        assert Grid(records, cfg, ExactDimension([], [1, 1])).to_string() == ""

    def test_empty_cells_still_draw_frame(self) -> None:
        assert zero_table([[""]]).render() == "++\n||\n++"


class TestSinglePassRecords:
    """IterRecords render with a precomputed dimension."""

    def test_iter_records(self) -> None:
        records = IterRecords(iter([["a", "b"], ["c", "d"]]))
        grid = Grid(records, ascii_config(), ExactDimension([1, 1], [1, 1]))
        assert grid.to_string() == "+-+-+\n|a|b|\n+-+-+\n|c|d|\n+-+-+"


# ---------------------------------------------------------------------------
# Spans
# ---------------------------------------------------------------------------


class TestColumnSpan:
    """A column span merges cells of one row."""

    def test_merged_first_row(self) -> None:
        table = zero_table([["a", "bb"], ["ccc", "d"]])
        table.modify((0, 0), Span.column(2))
        assert table.render() == "+---+-+\n|a    |\n+---+-+\n|ccc|d|\n+---+-+"

    def test_wide_span_grows_columns(self) -> None:
        table = zero_table([["abcdefg", ""], ["a", "b"]])
        table.modify((0, 0), Span.column(2))
        lines = table.render().split("\n")
        assert lines[1] == "|abcdefg|"
        assert all(len(line) == len(lines[0]) for line in lines)


class TestRowSpan:
    """A row span keeps printing its cell across row boundaries."""

    def test_merged_first_column(self) -> None:
        table = zero_table([["a", "b"], ["c", "d"]])
        table.modify((0, 0), Span.row(2))
        assert table.render() == "+-+-+\n|a|b|\n+ +-+\n| |d|\n+-+-+"

    def test_row_span_text_flows_through_border(self) -> None:
        table = zero_table([["1\n2\n3", "b"], ["", "d"]])
        table.modify((0, 0), Span.row(2))
        assert table.render() == "+-+-+\n|1|b|\n+2+-+\n|3|d|\n+-+-+"


# ---------------------------------------------------------------------------
# Alignment and padding
# ---------------------------------------------------------------------------


class TestAlignment:
    """Horizontal and vertical alignment place text inside the cell box."""

    def test_right(self) -> None:
        table = zero_table([["abc"], ["a"]]).with_(Alignment.right())
        assert table.render() == "+---+\n|abc|\n+---+\n|  a|\n+---+"

    def test_center(self) -> None:
        table = zero_table([["abc"], ["a"]]).with_(Alignment.center())
        assert table.render().split("\n")[3] == "| a |"

    def test_bottom(self) -> None:
        table = zero_table([["a\nb\nc", "x"]]).with_(Alignment.bottom())
        assert table.render() == "+-+-+\n|a| |\n|b| |\n|c|x|\n+-+-+"

    def test_center_vertical(self) -> None:
        table = zero_table([["a\nb\nc", "x"]]).with_(Alignment.center_vertical())
        assert table.render().split("\n")[2] == "|b|x|"

    def test_per_column(self) -> None:
        table = zero_table([["abc", "abc"], ["a", "a"]])
        table.modify(Column(1), Alignment.right())
        assert table.render().split("\n")[3] == "|a  |  a|"


class TestPadding:
    """Padding sits between the border and the text."""

    def test_all_sides(self) -> None:
        table = zero_table([["a"]]).with_(Padding(left=1, right=2, top=1, bottom=1))
        assert table.render() == "+----+\n|    |\n| a  |\n|    |\n+----+"

    def test_padding_fill(self) -> None:
        table = zero_table([["a"]]).with_(Padding(left=1, right=1, fill="."))
        assert table.render() == "+---+\n|.a.|\n+---+"


# ---------------------------------------------------------------------------
# Margins
# ---------------------------------------------------------------------------


class TestMargin:
    """Margins surround the whole grid."""

    def test_all_sides(self) -> None:
        table = zero_table([["a"]]).with_(Margin(left=1, right=1, top=1, bottom=1, fill="*"))
        assert table.render() == "*****\n*+-+*\n*|a|*\n*+-+*\n*****"

    def test_left_offset_begin(self) -> None:
        offsets = Sides(
            top=Offset.begin(0),
            bottom=Offset.begin(0),
            left=Offset.begin(1),
            right=Offset.begin(0),
        )
        table = zero_table([["a"]]).with_(Margin(left=1, fill="*", offsets=offsets))
        assert table.render() == " +-+\n*|a|\n*+-+"

    def test_total_width_includes_margin(self) -> None:
        table = zero_table([["a"]]).with_(Margin(left=2, right=3))
        assert table.total_width() == 8


# ---------------------------------------------------------------------------
# Colors
# ---------------------------------------------------------------------------


class TestColors:
    """Colors wrap text and glyphs without changing the layout."""

    def test_cell_color(self) -> None:
        table = zero_table([["a"]]).with_(Colorize(Color("<", ">")))
        assert table.render() == "+-+\n|<a>|\n+-+"

    def test_border_color(self) -> None:
        table = zero_table([["a"]]).with_(BorderColors(Borders(top=Color("[", "]"))))
        assert table.render().split("\n")[0] == "+[-]+"

    def test_cell_color_uses_visible_width(self) -> None:
        table = zero_table([["\x1b[31mab\x1b[0m", "c"]])
        assert table.total_width() == 6


class TestTruncatedLines:
    """Lines wider than their cell are cut at render time."""

    def test_fixed_width_cuts_line(self) -> None:
        records = VecRecords([["abcdef"]])
        grid = Grid(records, ascii_config(), ExactDimension([3], [1]))
        assert grid.to_string() == "+---+\n|abc|\n+---+"

    def test_fixed_height_hides_lines(self) -> None:
        records = VecRecords([["a\nb\nc"]])
        grid = Grid(records, ascii_config(), ExactDimension([1], [2]))
        assert grid.to_string() == "+-+\n|a|\n|b|\n+-+"


class TestSinkErrors:
    """Errors from the sink abort the render."""

    def test_write_error_propagates(self) -> None:
        class Broken:
            def write(self, text: str) -> int:
                raise OSError("disk full")

        with pytest.raises(OSError, match="disk full"):
            zero_table([["a"]]).write(Broken())
