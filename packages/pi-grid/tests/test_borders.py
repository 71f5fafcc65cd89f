"""Tests for border presence and glyph lookup."""

from __future__ import annotations

from pi.grid import Border, Borders, BordersConfig, HorizontalLine, Offset, VerticalLine
from pi.grid.styles import Style


def ascii_config() -> BordersConfig[str]:
    cfg: BordersConfig[str] = BordersConfig()
    cfg.set_borders(Style.ascii().borders)
    return cfg


class TestBordersFrame:
    """The has_* helpers look at every glyph of a side."""

    def test_empty(self) -> None:
        b: Borders[str] = Borders()
        assert b.is_empty()
        assert not b.has_top()
        assert not b.has_vertical()

    def test_corner_is_enough(self) -> None:
        assert Borders(top_left="+").has_top()
        assert Borders(top_left="+").has_left()

    def test_filled(self) -> None:
        b = Borders.filled("#")
        assert b.top == b.intersection == b.right == "#"
        assert b.has_horizontal()


class TestPresence:
    """Which row and column boundaries draw a line."""

    def test_ascii_everywhere(self) -> None:
        cfg = ascii_config()
        assert all(cfg.has_horizontal(row, 2) for row in range(3))
        assert all(cfg.has_vertical(col, 2) for col in range(3))

    def test_global_glyph(self) -> None:
        cfg: BordersConfig[str] = BordersConfig()
        cfg.set_global("*")
        assert cfg.has_horizontal(1, 3)
        assert cfg.get_intersection((1, 1), (3, 3)) == "*"

    def test_empty_line_override_does_not_count(self) -> None:
        cfg: BordersConfig[str] = BordersConfig()
        cfg.set_horizontal_line(1, HorizontalLine())
        assert not cfg.has_horizontal(1, 3)

    def test_cell_border_switches_line_on(self) -> None:
        cfg: BordersConfig[str] = BordersConfig()
        cfg.insert_border((0, 0), Border(bottom="-"), (2, 2))
        assert cfg.has_horizontal(1, 2)
        assert not cfg.has_horizontal(0, 2)
        assert cfg.get_horizontal((1, 0), 2) == "-"
        assert cfg.get_horizontal((1, 1), 2) is None

    def test_cell_border_on_last_row_marks_bottom(self) -> None:
        cfg: BordersConfig[str] = BordersConfig()
        cfg.insert_border((1, 1), Border(bottom="_", right="|"), (2, 2))
        assert cfg.has_horizontal(2, 2)
        assert cfg.has_vertical(2, 2)

    def test_remove_border(self) -> None:
        cfg: BordersConfig[str] = BordersConfig()
        cfg.insert_border((0, 0), Border(top="="), (1, 1))
        cfg.remove_border((0, 0))
        assert cfg.get_horizontal((0, 0), 1) is None


class TestLookupPrecedence:
    """Cell override, then line override, then frame, then global."""

    def test_frame(self) -> None:
        cfg = ascii_config()
        assert cfg.get_horizontal((0, 0), 2) == "-"
        assert cfg.get_vertical((0, 0), 2) == "|"
        assert cfg.get_intersection((0, 0), (2, 2)) == "+"

    def test_line_override_beats_frame(self) -> None:
        cfg = ascii_config()
        cfg.set_horizontal_line(1, HorizontalLine(main="=", intersection="#", left="<", right=">"))
        assert cfg.get_horizontal((1, 0), 2) == "="
        assert cfg.get_intersection((1, 0), (2, 2)) == "<"
        assert cfg.get_intersection((1, 1), (2, 2)) == "#"
        assert cfg.get_intersection((1, 2), (2, 2)) == ">"
        assert cfg.get_horizontal((2, 0), 2) == "-"

    def test_vertical_line_override(self) -> None:
        cfg = ascii_config()
        cfg.set_vertical_line(1, VerticalLine(main="!", top="v", bottom="^"))
        assert cfg.get_vertical((0, 1), 2) == "!"
        assert cfg.get_intersection((0, 1), (2, 2)) == "v"
        assert cfg.get_intersection((2, 1), (2, 2)) == "^"
        assert cfg.get_intersection((1, 1), (2, 2)) == "+"

    def test_horizontal_line_beats_vertical_line(self) -> None:
        cfg = ascii_config()
        cfg.set_horizontal_line(1, HorizontalLine(intersection="h"))
        cfg.set_vertical_line(1, VerticalLine(intersection="v"))
        assert cfg.get_intersection((1, 1), (2, 2)) == "h"

    def test_cell_beats_line(self) -> None:
        cfg = ascii_config()
        cfg.set_horizontal_line(0, HorizontalLine(main="="))
        cfg.insert_border((0, 1), Border(top="~", left_top_corner="@"), (2, 2))
        assert cfg.get_horizontal((0, 0), 2) == "="
        assert cfg.get_horizontal((0, 1), 2) == "~"
        assert cfg.get_intersection((0, 1), (2, 2)) == "@"

    def test_removed_border_falls_back_to_frame(self) -> None:
        cfg = ascii_config()
        cfg.insert_border((0, 0), Border.filled("*"), (1, 1))
        cfg.remove_border((0, 0))
        assert cfg.get_horizontal((0, 0), 1) == "-"
        assert cfg.get_vertical((0, 1), 1) == "|"
        assert cfg.get_intersection((1, 1), (1, 1)) == "+"


class TestCharOverrides:
    """Single glyphs of a segment can be replaced by offset."""

    def test_from_begin(self) -> None:
        cfg = ascii_config()
        cfg.set_horizontal_char((0, 0), "*", Offset.begin(1))
        assert cfg.has_horizontal_chars((0, 0))
        assert [cfg.lookup_horizontal_char((0, 0), i, 4) for i in range(4)] == [None, "*", None, None]

    def test_from_end(self) -> None:
        cfg = ascii_config()
        cfg.set_vertical_char((0, 0), "#", Offset.end(0))
        assert [cfg.lookup_vertical_char((0, 0), i, 3) for i in range(3)] == [None, None, "#"]
