"""Table options.

Options with a ``change(table)`` method go to :meth:`Table.with_`; options
with a ``change_cell(table, entity)`` method go to :meth:`Table.modify`.
Most per-cell options also accept ``with_``, which applies them to every
cell.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable, Literal

from pi.grid.borders import Border, Borders
from pi.grid.types import (
    AlignmentHorizontal,
    AlignmentVertical,
    Formatting,
    Global,
    Indent,
    Offset,
    Sides,
)

if TYPE_CHECKING:
    from pi.grid.colors import Color
    from pi.grid.table import Table
    from pi.grid.types import Entity


@dataclass
class Padding:
    """Space inside a cell, between its border and its text."""

    left: int = 0
    right: int = 0
    top: int = 0
    bottom: int = 0
    fill: str = " "
    color: Color | None = None

    @classmethod
    def zero(cls) -> Padding:
        return cls()

    def indents(self) -> Sides[Indent]:
        return Sides(
            top=Indent(self.top, self.fill, self.color),
            bottom=Indent(self.bottom, self.fill, self.color),
            left=Indent(self.left, self.fill, self.color),
            right=Indent(self.right, self.fill, self.color),
        )

    def change(self, table: Table) -> None:
        self.change_cell(table, Global())

    def change_cell(self, table: Table, entity: Entity) -> None:
        table.config.set_padding(entity, self.indents())


@dataclass
class Margin:
    """Space around the whole table.

    ``offsets`` leave part of a side blank: ``Offset.begin(n)`` skips the
    first *n* lines (or columns), ``Offset.end(n)`` the last *n*.
    """

    left: int = 0
    right: int = 0
    top: int = 0
    bottom: int = 0
    fill: str = " "
    color: Color | None = None
    offsets: Sides[Offset] | None = None

    def change(self, table: Table) -> None:
        table.config.set_margin(
            Sides(
                top=Indent(self.top, self.fill, self.color),
                bottom=Indent(self.bottom, self.fill, self.color),
                left=Indent(self.left, self.fill, self.color),
                right=Indent(self.right, self.fill, self.color),
            )
        )
        if self.offsets is not None:
            table.config.set_margin_offset(self.offsets)


@dataclass
class Alignment:
    horizontal: AlignmentHorizontal | None = None
    vertical: AlignmentVertical | None = None

    @classmethod
    def left(cls) -> Alignment:
        return cls(horizontal="left")

    @classmethod
    def right(cls) -> Alignment:
        return cls(horizontal="right")

    @classmethod
    def center(cls) -> Alignment:
        return cls(horizontal="center")

    @classmethod
    def top(cls) -> Alignment:
        return cls(vertical="top")

    @classmethod
    def bottom(cls) -> Alignment:
        return cls(vertical="bottom")

    @classmethod
    def center_vertical(cls) -> Alignment:
        return cls(vertical="center")

    def change(self, table: Table) -> None:
        self.change_cell(table, Global())

    def change_cell(self, table: Table, entity: Entity) -> None:
        if self.horizontal is not None:
            table.config.set_alignment_horizontal(entity, self.horizontal)
        if self.vertical is not None:
            table.config.set_alignment_vertical(entity, self.vertical)


@dataclass
class Span:
    """Merge a cell with its neighbours to the right and/or below."""

    rows: int | None = None
    columns: int | None = None

    @classmethod
    def column(cls, n: int) -> Span:
        return cls(columns=n)

    @classmethod
    def row(cls, n: int) -> Span:
        return cls(rows=n)

    def change_cell(self, table: Table, entity: Entity) -> None:
        cfg = table.config
        count_rows, count_columns = table.shape
        for pos in entity.iter_positions(count_rows, count_columns):
            rows = self.rows if self.rows is not None else cfg.get_row_span(pos)
            columns = self.columns if self.columns is not None else cfg.get_column_span(pos)
            cfg.set_span(pos, rows, columns)


@dataclass
class Format:
    """Rewrite cell text with a function, e.g. ``Format(str.upper)``."""

    func: Callable[[str], str]

    def change(self, table: Table) -> None:
        self.change_cell(table, Global())

    def change_cell(self, table: Table, entity: Entity) -> None:
        records = table.records
        count_rows, count_columns = records.shape
        for pos in entity.iter_positions(count_rows, count_columns):
            records.set(pos, self.func(records.get_text(pos)))


@dataclass
class FormatFlags:
    """Trimming and per-line alignment flags."""

    horizontal_trim: bool = False
    vertical_trim: bool = False
    allow_lines_alignment: bool = False

    def change(self, table: Table) -> None:
        self.change_cell(table, Global())

    def change_cell(self, table: Table, entity: Entity) -> None:
        table.config.set_formatting(
            entity,
            Formatting(self.horizontal_trim, self.vertical_trim, self.allow_lines_alignment),
        )


@dataclass
class Justification:
    """The character that fills the space left over by alignment."""

    fill: str
    color: Color | None = None

    def change(self, table: Table) -> None:
        self.change_cell(table, Global())

    def change_cell(self, table: Table, entity: Entity) -> None:
        table.config.set_justification(entity, self.fill)
        table.config.set_justification_color(entity, self.color)


@dataclass
class TabWidth:
    width: int

    def change(self, table: Table) -> None:
        table.config.tab_width = self.width


@dataclass
class Colorize:
    """Color cell text."""

    color: Color

    def change(self, table: Table) -> None:
        self.change_cell(table, Global())

    def change_cell(self, table: Table, entity: Entity) -> None:
        table.colors.set(entity, self.color)


@dataclass
class BorderOverride:
    """Replace the border glyphs (and optionally colors) around cells.

    An empty ``Border()`` drops the glyphs and colors set on the cells
    before, so the theme shows through again.
    """

    border: Border[str]
    colors: Border[Color] | None = None

    def change_cell(self, table: Table, entity: Entity) -> None:
        cfg = table.config
        shape = table.shape
        for pos in entity.iter_positions(*shape):
            if self.border.is_empty() and self.colors is None:
                cfg.remove_border(pos)
            elif not self.border.is_empty():
                cfg.insert_border(pos, self.border, shape)
            if self.colors is not None:
                cfg.insert_border_color(pos, self.colors, shape)


@dataclass
class BorderChar:
    """Override single glyphs of a border segment next to a cell.

    ``Offset.begin(i)`` counts from the start of the segment, ``Offset.end(i)``
    from its end. Horizontal segments run above the cell; vertical segments
    run along its left edge.
    """

    glyph: str
    offset: Offset
    axis: Literal["horizontal", "vertical"] = "horizontal"

    def change_cell(self, table: Table, entity: Entity) -> None:
        cfg = table.config
        for pos in entity.iter_positions(*table.shape):
            if self.axis == "horizontal":
                cfg.set_horizontal_char(pos, self.glyph, self.offset)
            else:
                cfg.set_vertical_char(pos, self.glyph, self.offset)


@dataclass
class BorderColors:
    """Colors for the table frame.

    ``fill`` colors every border glyph the frame does not color itself.
    """

    colors: Borders[Color] = field(default_factory=Borders)
    fill: Color | None = None

    def change(self, table: Table) -> None:
        table.config.set_border_colors(self.colors, self.fill)


@dataclass
class BordersMissing:
    """The glyph drawn where a border line exists but defines no glyph."""

    glyph: str

    def change(self, table: Table) -> None:
        table.config.borders_missing = self.glyph
