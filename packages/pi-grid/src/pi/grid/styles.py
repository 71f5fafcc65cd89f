"""Border themes.

A :class:`Style` bundles a frame (:class:`~pi.grid.borders.Borders`) with
line overrides at fixed row/column boundaries, e.g. the header separator of
``markdown`` and ``psql``. Applying a style replaces the whole border theme
of a table.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Callable

from pi.grid.borders import Borders, HorizontalLine, VerticalLine
from pi.grid.errors import GridError

if TYPE_CHECKING:
    from pi.grid.table import Table


def _frame(
    top: HorizontalLine[str],
    bottom: HorizontalLine[str],
    horizontal: HorizontalLine[str],
    left: str | None,
    right: str | None,
    vertical: str | None,
) -> Borders[str]:
    return Borders(
        top=top.main,
        top_intersection=top.intersection,
        top_left=top.left,
        top_right=top.right,
        bottom=bottom.main,
        bottom_intersection=bottom.intersection,
        bottom_left=bottom.left,
        bottom_right=bottom.right,
        horizontal=horizontal.main,
        intersection=horizontal.intersection,
        left_intersection=horizontal.left,
        right_intersection=horizontal.right,
        left=left,
        right=right,
        vertical=vertical,
    )


def _line(main: str, intersection: str | None, left: str | None, right: str | None) -> HorizontalLine[str]:
    return HorizontalLine(main, intersection, left, right)


_NONE: HorizontalLine[str] = HorizontalLine()


@dataclass(frozen=True)
class Style:
    borders: Borders[str] = field(default_factory=Borders)
    horizontals: dict[int, HorizontalLine[str]] = field(default_factory=dict)
    verticals: dict[int, VerticalLine[str]] = field(default_factory=dict)

    # -- presets ----------------------------------------------------------

    @classmethod
    def empty(cls) -> Style:
        return cls()

    @classmethod
    def blank(cls) -> Style:
        return cls(_frame(_NONE, _NONE, _NONE, None, None, " "))

    @classmethod
    def ascii(cls) -> Style:
        line = _line("-", "+", "+", "+")
        return cls(_frame(line, line, line, "|", "|", "|"))

    @classmethod
    def psql(cls) -> Style:
        return cls(
            _frame(_NONE, _NONE, _NONE, None, None, "|"),
            {1: _line("-", "+", None, None)},
        )

    @classmethod
    def markdown(cls) -> Style:
        return cls(
            _frame(_NONE, _NONE, _NONE, "|", "|", "|"),
            {1: _line("-", "|", "|", "|")},
        )

    @classmethod
    def modern(cls) -> Style:
        return cls(
            _frame(
                _line("─", "┬", "┌", "┐"),
                _line("─", "┴", "└", "┘"),
                _line("─", "┼", "├", "┤"),
                "│",
                "│",
                "│",
            )
        )

    @classmethod
    def sharp(cls) -> Style:
        return cls(
            _frame(_line("─", "┬", "┌", "┐"), _line("─", "┴", "└", "┘"), _NONE, "│", "│", "│"),
            {1: _line("─", "┼", "├", "┤")},
        )

    @classmethod
    def rounded(cls) -> Style:
        return cls(
            _frame(_line("─", "┬", "╭", "╮"), _line("─", "┴", "╰", "╯"), _NONE, "│", "│", "│"),
            {1: _line("─", "┼", "├", "┤")},
        )

    @classmethod
    def modern_rounded(cls) -> Style:
        return cls(
            _frame(
                _line("─", "┬", "╭", "╮"),
                _line("─", "┴", "╰", "╯"),
                _line("─", "┼", "├", "┤"),
                "│",
                "│",
                "│",
            )
        )

    @classmethod
    def extended(cls) -> Style:
        return cls(
            _frame(
                _line("═", "╦", "╔", "╗"),
                _line("═", "╩", "╚", "╝"),
                _line("═", "╬", "╠", "╣"),
                "║",
                "║",
                "║",
            )
        )

    @classmethod
    def dots(cls) -> Style:
        return cls(
            _frame(
                _line(".", ".", ".", "."),
                _line(".", ":", ":", ":"),
                _line(".", ":", ":", ":"),
                ":",
                ":",
                ":",
            )
        )

    @classmethod
    def re_structured_text(cls) -> Style:
        line = _line("=", " ", None, None)
        return cls(_frame(line, line, _NONE, None, None, " "), {1: line})

    @classmethod
    def ascii_rounded(cls) -> Style:
        return cls(
            _frame(_line("-", "-", ".", "."), _line("-", "-", "'", "'"), _NONE, "|", "|", "|")
        )

    @classmethod
    def get(cls, name: str) -> Style:
        """Look up a preset by name, e.g. ``Style.get("rounded")``."""
        factory = PRESETS.get(name.strip().lower().replace("-", "_"))
        if factory is None:
            raise GridError(f"unknown style {name!r}; expected one of {', '.join(sorted(PRESETS))}")
        return factory()

    # -- edits ------------------------------------------------------------

    def with_borders(self, **glyphs: str | None) -> Style:
        """Return a copy with some frame glyphs replaced."""
        return replace(self, borders=replace(self.borders, **glyphs))

    def with_horizontal_line(self, row: int, line: HorizontalLine[str]) -> Style:
        return replace(self, horizontals={**self.horizontals, row: line})

    def with_vertical_line(self, col: int, line: VerticalLine[str]) -> Style:
        return replace(self, verticals={**self.verticals, col: line})

    def remove_horizontal(self) -> Style:
        return self.with_borders(
            horizontal=None, intersection=None, left_intersection=None, right_intersection=None
        )

    def remove_vertical(self) -> Style:
        return self.with_borders(
            vertical=None, intersection=None, top_intersection=None, bottom_intersection=None
        )

    def remove_frame(self) -> Style:
        return self.with_borders(
            top=None,
            top_left=None,
            top_right=None,
            top_intersection=None,
            bottom=None,
            bottom_left=None,
            bottom_right=None,
            bottom_intersection=None,
            left=None,
            left_intersection=None,
            right=None,
            right_intersection=None,
        )

    def change(self, table: Table) -> None:
        cfg = table.config
        cfg.clear_theme()
        cfg.set_borders(self.borders)
        for row, hline in self.horizontals.items():
            cfg.set_horizontal_line(row, hline)
        for col, vline in self.verticals.items():
            cfg.set_vertical_line(col, vline)


PRESETS: dict[str, Callable[[], Style]] = {
    "empty": Style.empty,
    "no_borders": Style.empty,
    "blank": Style.blank,
    "ascii": Style.ascii,
    "psql": Style.psql,
    "markdown": Style.markdown,
    "modern": Style.modern,
    "sharp": Style.sharp,
    "rounded": Style.rounded,
    "modern_rounded": Style.modern_rounded,
    "extended": Style.extended,
    "dots": Style.dots,
    "re_structured_text": Style.re_structured_text,
    "ascii_rounded": Style.ascii_rounded,
}
