"""Grid configuration: sparse per-entity settings plus borders and spans."""

from __future__ import annotations

from typing import TYPE_CHECKING, Generic, TypeVar

from pi.grid.borders import Border, Borders, BordersConfig, HorizontalLine, VerticalLine
from pi.grid.spans import SpanMap
from pi.grid.types import (
    AlignmentHorizontal,
    AlignmentVertical,
    Cell,
    Column,
    Entity,
    Formatting,
    Global,
    Indent,
    MarginConfig,
    Offset,
    Position,
    Row,
    Sides,
    zero_indents,
)
from pi.grid.utils import DEFAULT_TAB_WIDTH

if TYPE_CHECKING:
    from pi.grid.colors import Color

T = TypeVar("T")

DEFAULT_BORDERS_MISSING = " "


class EntityMap(Generic[T]):
    """Values stored per entity and resolved per cell.

    A cell value wins over a column or row value, which wins over the global
    one. Writing a row or column copies the value into every cell where the
    other axis already has a value, so that the most recent write wins at
    the intersection.
    """

    def __init__(self, default: T) -> None:
        self._global = default
        self._rows: dict[int, T] = {}
        self._columns: dict[int, T] = {}
        self._cells: dict[Position, T] = {}

    def get(self, pos: Position) -> T:
        if pos in self._cells:
            return self._cells[pos]
        if pos[1] in self._columns:
            return self._columns[pos[1]]
        if pos[0] in self._rows:
            return self._rows[pos[0]]
        return self._global

    @property
    def global_value(self) -> T:
        return self._global

    def set(self, entity: Entity, value: T) -> None:
        if isinstance(entity, Global):
            self._global = value
            self._rows.clear()
            self._columns.clear()
            self._cells.clear()
        elif isinstance(entity, Column):
            col = entity.index
            self._cells = {p: v for p, v in self._cells.items() if p[1] != col}
            for row in self._rows:
                self._cells[(row, col)] = value
            self._columns[col] = value
        elif isinstance(entity, Row):
            row = entity.index
            self._cells = {p: v for p, v in self._cells.items() if p[0] != row}
            for col in self._columns:
                self._cells[(row, col)] = value
            self._rows[row] = value
        elif isinstance(entity, Cell):
            self._cells[entity.position] = value
        else:
            raise TypeError(f"not an entity: {entity!r}")

    def is_empty(self) -> bool:
        """True when the global value is ``None`` and no override is stored."""
        return self._global is None and not self._rows and not self._columns and not self._cells

    def values(self) -> list[T]:
        return [
            self._global,
            *self._rows.values(),
            *self._columns.values(),
            *self._cells.values(),
        ]

    def __repr__(self) -> str:
        return (
            f"EntityMap(global={self._global!r}, rows={self._rows!r}, "
            f"columns={self._columns!r}, cells={self._cells!r})"
        )


class GridConfig:
    """Everything that shapes a render apart from the text itself."""

    def __init__(self) -> None:
        self.tab_width = DEFAULT_TAB_WIDTH
        self.margin = MarginConfig()
        self.borders_missing = DEFAULT_BORDERS_MISSING
        self.spans = SpanMap()
        self.borders: BordersConfig[str] = BordersConfig()
        self.border_colors: BordersConfig[Color] = BordersConfig()

        self._padding: EntityMap[Sides[Indent]] = EntityMap(zero_indents())
        self._alignment_h: EntityMap[AlignmentHorizontal] = EntityMap("left")
        self._alignment_v: EntityMap[AlignmentVertical] = EntityMap("top")
        self._formatting: EntityMap[Formatting] = EntityMap(Formatting())
        self._justification: EntityMap[str] = EntityMap(" ")
        self._justification_color: EntityMap[Color | None] = EntityMap(None)

    # -- per-cell settings -------------------------------------------------

    def set_padding(self, entity: Entity, padding: Sides[Indent]) -> None:
        self._padding.set(entity, padding)

    def get_padding(self, pos: Position) -> Sides[Indent]:
        return self._padding.get(pos)

    def set_alignment_horizontal(self, entity: Entity, alignment: AlignmentHorizontal) -> None:
        self._alignment_h.set(entity, alignment)

    def get_alignment_horizontal(self, pos: Position) -> AlignmentHorizontal:
        return self._alignment_h.get(pos)

    def set_alignment_vertical(self, entity: Entity, alignment: AlignmentVertical) -> None:
        self._alignment_v.set(entity, alignment)

    def get_alignment_vertical(self, pos: Position) -> AlignmentVertical:
        return self._alignment_v.get(pos)

    def set_formatting(self, entity: Entity, formatting: Formatting) -> None:
        self._formatting.set(entity, formatting)

    def get_formatting(self, pos: Position) -> Formatting:
        return self._formatting.get(pos)

    def set_justification(self, entity: Entity, fill: str) -> None:
        self._justification.set(entity, fill)

    def get_justification(self, pos: Position) -> str:
        return self._justification.get(pos)

    def set_justification_color(self, entity: Entity, color: Color | None) -> None:
        self._justification_color.set(entity, color)

    def get_justification_color(self, pos: Position) -> Color | None:
        return self._justification_color.get(pos)

    # -- spans ------------------------------------------------------------

    def set_span(self, pos: Position, row_span: int, col_span: int) -> None:
        self.spans.set(pos, row_span, col_span)

    def set_row_span(self, pos: Position, n: int) -> None:
        self.spans.set_row_span(pos, n)

    def set_column_span(self, pos: Position, n: int) -> None:
        self.spans.set_column_span(pos, n)

    def get_row_span(self, pos: Position) -> int:
        return self.spans.row_span(pos)

    def get_column_span(self, pos: Position) -> int:
        return self.spans.column_span(pos)

    def is_cell_visible(self, pos: Position) -> bool:
        return self.spans.is_visible(pos)

    def has_spans(self) -> bool:
        return not self.spans.is_empty()

    # -- borders ----------------------------------------------------------

    def set_borders(self, borders: Borders[str]) -> None:
        self.borders.set_borders(borders)

    def get_borders(self) -> Borders[str]:
        return self.borders.borders

    def set_border_colors(self, colors: Borders[Color], fill: Color | None = None) -> None:
        self.border_colors.set_borders(colors)
        self.border_colors.set_global(fill)

    def set_horizontal_line(self, row: int, line: HorizontalLine[str]) -> None:
        self.borders.set_horizontal_line(row, line)

    def set_vertical_line(self, col: int, line: VerticalLine[str]) -> None:
        self.borders.set_vertical_line(col, line)

    def insert_border(self, pos: Position, border: Border[str], shape: tuple[int, int]) -> None:
        self.borders.insert_border(pos, border, shape)

    def remove_border(self, pos: Position) -> None:
        self.borders.remove_border(pos)
        self.border_colors.remove_border(pos)

    def insert_border_color(self, pos: Position, border: Border[Color], shape: tuple[int, int]) -> None:
        self.border_colors.insert_border(pos, border, shape)

    def set_horizontal_char(self, pos: Position, glyph: str, offset: Offset) -> None:
        self.borders.set_horizontal_char(pos, glyph, offset)

    def set_vertical_char(self, pos: Position, glyph: str, offset: Offset) -> None:
        self.borders.set_vertical_char(pos, glyph, offset)

    def clear_theme(self) -> None:
        self.borders = BordersConfig()

    def has_horizontal(self, row: int, count_rows: int) -> bool:
        return self.borders.has_horizontal(row, count_rows)

    def has_vertical(self, col: int, count_columns: int) -> bool:
        return self.borders.has_vertical(col, count_columns)

    def count_horizontal(self, count_rows: int) -> int:
        return sum(1 for row in range(count_rows + 1) if self.has_horizontal(row, count_rows))

    def count_vertical(self, count_columns: int) -> int:
        return sum(1 for col in range(count_columns + 1) if self.has_vertical(col, count_columns))

    def get_horizontal(self, pos: Position, count_rows: int) -> str | None:
        glyph = self.borders.get_horizontal(pos, count_rows)
        if glyph is not None:
            return glyph
        if self.has_horizontal(pos[0], count_rows):
            return self.borders_missing
        return None

    def get_vertical(self, pos: Position, count_columns: int) -> str | None:
        glyph = self.borders.get_vertical(pos, count_columns)
        if glyph is not None:
            return glyph
        if self.has_vertical(pos[1], count_columns):
            return self.borders_missing
        return None

    def get_intersection(self, pos: Position, shape: tuple[int, int]) -> str | None:
        glyph = self.borders.get_intersection(pos, shape)
        if glyph is not None:
            return glyph
        if self.has_horizontal(pos[0], shape[0]) and self.has_vertical(pos[1], shape[1]):
            return self.borders_missing
        return None

    def get_horizontal_color(self, pos: Position, count_rows: int) -> Color | None:
        return self.border_colors.get_horizontal(pos, count_rows)

    def get_vertical_color(self, pos: Position, count_columns: int) -> Color | None:
        return self.border_colors.get_vertical(pos, count_columns)

    def get_intersection_color(self, pos: Position, shape: tuple[int, int]) -> Color | None:
        return self.border_colors.get_intersection(pos, shape)

    # -- margin -----------------------------------------------------------

    def set_margin(self, indents: Sides[Indent]) -> None:
        self.margin = MarginConfig(indents, self.margin.offsets)

    def set_margin_offset(self, offsets: Sides[Offset]) -> None:
        self.margin = MarginConfig(self.margin.indents, offsets)
