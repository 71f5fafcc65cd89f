"""Border glyph sets and their per-line / per-cell overrides.

A border glyph is looked up from the most specific source that defines it:
a cell-level override, then a line override (:class:`HorizontalLine` for a
row boundary, :class:`VerticalLine` for a column boundary), then the frame
itself (:class:`Borders`), then the global glyph. The same structure holds
border colors.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Generic, TypeVar

from pi.grid.types import Offset, Position

T = TypeVar("T")


@dataclass(frozen=True)
class Borders(Generic[T]):
    """The frame of a grid: edges, separators, corners and intersections."""

    top: T | None = None
    top_left: T | None = None
    top_right: T | None = None
    top_intersection: T | None = None

    bottom: T | None = None
    bottom_left: T | None = None
    bottom_right: T | None = None
    bottom_intersection: T | None = None

    left: T | None = None
    left_intersection: T | None = None
    right: T | None = None
    right_intersection: T | None = None

    horizontal: T | None = None
    vertical: T | None = None
    intersection: T | None = None

    @classmethod
    def filled(cls, value: T) -> Borders[T]:
        return cls(**{f.name: value for f in fields(cls)})

    def is_empty(self) -> bool:
        return all(getattr(self, f.name) is None for f in fields(self))

    def has_top(self) -> bool:
        return any(
            v is not None
            for v in (self.top, self.top_intersection, self.top_left, self.top_right)
        )

    def has_bottom(self) -> bool:
        return any(
            v is not None
            for v in (self.bottom, self.bottom_intersection, self.bottom_left, self.bottom_right)
        )

    def has_left(self) -> bool:
        return any(
            v is not None
            for v in (self.left, self.left_intersection, self.top_left, self.bottom_left)
        )

    def has_right(self) -> bool:
        return any(
            v is not None
            for v in (self.right, self.right_intersection, self.top_right, self.bottom_right)
        )

    def has_horizontal(self) -> bool:
        return any(
            v is not None
            for v in (
                self.horizontal,
                self.left_intersection,
                self.right_intersection,
                self.intersection,
            )
        )

    def has_vertical(self) -> bool:
        return any(
            v is not None
            for v in (
                self.intersection,
                self.vertical,
                self.top_intersection,
                self.bottom_intersection,
            )
        )


@dataclass(frozen=True)
class Border(Generic[T]):
    """Borders around a single cell."""

    top: T | None = None
    bottom: T | None = None
    left: T | None = None
    right: T | None = None
    left_top_corner: T | None = None
    right_top_corner: T | None = None
    left_bottom_corner: T | None = None
    right_bottom_corner: T | None = None

    @classmethod
    def full(
        cls,
        top: T,
        bottom: T,
        left: T,
        right: T,
        top_left: T,
        top_right: T,
        bottom_left: T,
        bottom_right: T,
    ) -> Border[T]:
        return cls(top, bottom, left, right, top_left, top_right, bottom_left, bottom_right)

    @classmethod
    def filled(cls, value: T) -> Border[T]:
        return cls(value, value, value, value, value, value, value, value)

    def is_empty(self) -> bool:
        return all(getattr(self, f.name) is None for f in fields(self))


@dataclass(frozen=True)
class HorizontalLine(Generic[T]):
    """Override for a whole row boundary."""

    main: T | None = None
    intersection: T | None = None
    left: T | None = None
    right: T | None = None

    def is_empty(self) -> bool:
        return all(v is None for v in (self.main, self.intersection, self.left, self.right))


@dataclass(frozen=True)
class VerticalLine(Generic[T]):
    """Override for a whole column boundary."""

    main: T | None = None
    intersection: T | None = None
    top: T | None = None
    bottom: T | None = None

    def is_empty(self) -> bool:
        return all(v is None for v in (self.main, self.intersection, self.top, self.bottom))


@dataclass
class _Layout:
    """Lines switched on by cell-level borders."""

    right: bool = False
    bottom: bool = False
    horizontals: set[int] = field(default_factory=set)
    verticals: set[int] = field(default_factory=set)


class BordersConfig(Generic[T]):
    def __init__(self) -> None:
        self.global_: T | None = None
        self.borders: Borders[T] = Borders()
        self.horizontals: dict[int, HorizontalLine[T]] = {}
        self.verticals: dict[int, VerticalLine[T]] = {}
        self._cell_horizontal: dict[Position, T] = {}
        self._cell_vertical: dict[Position, T] = {}
        self._cell_intersection: dict[Position, T] = {}
        self._horizontal_chars: dict[Position, dict[Offset, T]] = {}
        self._vertical_chars: dict[Position, dict[Offset, T]] = {}
        self._layout = _Layout()

    # -- mutation ---------------------------------------------------------

    def set_borders(self, borders: Borders[T]) -> None:
        self.borders = borders

    def set_global(self, value: T | None) -> None:
        self.global_ = value

    def set_horizontal_line(self, row: int, line: HorizontalLine[T]) -> None:
        self.horizontals[row] = line

    def set_vertical_line(self, col: int, line: VerticalLine[T]) -> None:
        self.verticals[col] = line

    def insert_border(self, pos: Position, border: Border[T], shape: tuple[int, int]) -> None:
        """Set the glyphs around the cell at *pos* and switch their lines on."""
        row, col = pos
        count_rows, count_columns = shape

        if border.top is not None:
            self._cell_horizontal[(row, col)] = border.top
            self._mark_horizontal(row, count_rows)
        if border.bottom is not None:
            self._cell_horizontal[(row + 1, col)] = border.bottom
            self._mark_horizontal(row + 1, count_rows)
        if border.left is not None:
            self._cell_vertical[(row, col)] = border.left
            self._mark_vertical(col, count_columns)
        if border.right is not None:
            self._cell_vertical[(row, col + 1)] = border.right
            self._mark_vertical(col + 1, count_columns)

        corners = (
            (border.left_top_corner, row, col),
            (border.right_top_corner, row, col + 1),
            (border.left_bottom_corner, row + 1, col),
            (border.right_bottom_corner, row + 1, col + 1),
        )
        for value, r, c in corners:
            if value is not None:
                self._cell_intersection[(r, c)] = value
                self._mark_horizontal(r, count_rows)
                self._mark_vertical(c, count_columns)

    def remove_border(self, pos: Position) -> None:
        row, col = pos
        self._cell_horizontal.pop((row, col), None)
        self._cell_horizontal.pop((row + 1, col), None)
        self._cell_vertical.pop((row, col), None)
        self._cell_vertical.pop((row, col + 1), None)
        for corner in ((row, col), (row, col + 1), (row + 1, col), (row + 1, col + 1)):
            self._cell_intersection.pop(corner, None)

    def _mark_horizontal(self, row: int, count_rows: int) -> None:
        self._layout.horizontals.add(row)
        if row == count_rows:
            self._layout.bottom = True

    def _mark_vertical(self, col: int, count_columns: int) -> None:
        self._layout.verticals.add(col)
        if col == count_columns:
            self._layout.right = True

    def set_horizontal_char(self, pos: Position, value: T, offset: Offset) -> None:
        self._horizontal_chars.setdefault(pos, {})[offset] = value

    def set_vertical_char(self, pos: Position, value: T, offset: Offset) -> None:
        self._vertical_chars.setdefault(pos, {})[offset] = value

    # -- presence ---------------------------------------------------------

    def has_horizontal(self, row: int, count_rows: int) -> bool:
        if self.global_ is not None:
            return True
        if row == 0 and self.borders.has_top():
            return True
        if row == count_rows and self.borders.has_bottom():
            return True
        if 0 < row < count_rows and self.borders.has_horizontal():
            return True
        return self._is_horizontal_set(row, count_rows)

    def has_vertical(self, col: int, count_columns: int) -> bool:
        if self.global_ is not None:
            return True
        if col == 0 and self.borders.has_left():
            return True
        if col == count_columns and self.borders.has_right():
            return True
        if 0 < col < count_columns and self.borders.has_vertical():
            return True
        return self._is_vertical_set(col, count_columns)

    def _is_horizontal_set(self, row: int, count_rows: int) -> bool:
        line = self.horizontals.get(row)
        if line is not None and not line.is_empty():
            return True
        if row == count_rows and self._layout.bottom:
            return True
        return row in self._layout.horizontals

    def _is_vertical_set(self, col: int, count_columns: int) -> bool:
        line = self.verticals.get(col)
        if line is not None and not line.is_empty():
            return True
        if col == count_columns and self._layout.right:
            return True
        return col in self._layout.verticals

    # -- lookup -----------------------------------------------------------

    def get_horizontal(self, pos: Position, count_rows: int) -> T | None:
        value = self._cell_horizontal.get(pos)
        if value is not None:
            return value

        line = self.horizontals.get(pos[0])
        if line is not None and line.main is not None:
            return line.main

        row = pos[0]
        if row == 0:
            value = self.borders.top
        elif row == count_rows:
            value = self.borders.bottom
        else:
            value = self.borders.horizontal
        return value if value is not None else self.global_

    def get_vertical(self, pos: Position, count_columns: int) -> T | None:
        value = self._cell_vertical.get(pos)
        if value is not None:
            return value

        line = self.verticals.get(pos[1])
        if line is not None and line.main is not None:
            return line.main

        col = pos[1]
        if col == 0:
            value = self.borders.left
        elif col == count_columns:
            value = self.borders.right
        else:
            value = self.borders.vertical
        return value if value is not None else self.global_

    def get_intersection(self, pos: Position, shape: tuple[int, int]) -> T | None:
        value = self._cell_intersection.get(pos)
        if value is not None:
            return value

        row, col = pos
        count_rows, count_columns = shape

        hline = self.horizontals.get(row)
        if hline is not None:
            if col == 0:
                value = hline.left
            elif col == count_columns:
                value = hline.right
            else:
                value = hline.intersection
            if value is not None:
                return value

        vline = self.verticals.get(col)
        if vline is not None:
            if row == 0:
                value = vline.top
            elif row == count_rows:
                value = vline.bottom
            else:
                value = vline.intersection
            if value is not None:
                return value

        b = self.borders
        if row == 0 and col == 0:
            value = b.top_left
        elif row == 0 and col == count_columns:
            value = b.top_right
        elif row == count_rows and col == 0:
            value = b.bottom_left
        elif row == count_rows and col == count_columns:
            value = b.bottom_right
        elif row == 0:
            value = b.top_intersection
        elif row == count_rows:
            value = b.bottom_intersection
        elif col == 0:
            value = b.left_intersection
        elif col == count_columns:
            value = b.right_intersection
        else:
            value = b.intersection
        return value if value is not None else self.global_

    def has_horizontal_chars(self, pos: Position) -> bool:
        return pos in self._horizontal_chars

    def has_vertical_chars(self, pos: Position) -> bool:
        return pos in self._vertical_chars

    def lookup_horizontal_char(self, pos: Position, index: int, length: int) -> T | None:
        """The glyph overriding column *index* of a segment *length* wide."""
        return _lookup_offset(self._horizontal_chars.get(pos), index, length)

    def lookup_vertical_char(self, pos: Position, index: int, length: int) -> T | None:
        return _lookup_offset(self._vertical_chars.get(pos), index, length)


def _lookup_offset(chars: dict[Offset, T] | None, index: int, length: int) -> T | None:
    if not chars:
        return None
    value = chars.get(Offset.begin(index))
    if value is not None:
        return value
    return chars.get(Offset.end(length - index - 1))
